"""Centralized tunable constants for ordering, export and presentation.

Every heuristic value used by the engine lives here so it can be tuned in
one place instead of being buried in the algorithms that consume it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class OrderingThresholds:
    """Thresholds for spatial frame ordering."""

    # Frames whose top edges differ by at most this many canvas units
    # (measured against the row's first frame) share a presentation row.
    row_threshold: float = 50.0


@dataclass(frozen=True)
class PageFormat:
    """Fixed A4 page format in millimetres (portrait)."""

    width_mm: float = 210.0
    height_mm: float = 297.0
    margin_mm: float = 10.0


@dataclass(frozen=True)
class RasterThresholds:
    """Rasterization scale multipliers."""

    nominal_scale: float = 1.0
    quality_scale: Dict[str, float] = field(
        default_factory=lambda: {"standard": 1.5, "high": 3.0}
    )


@dataclass(frozen=True)
class PresentationThresholds:
    """Timing for presentation slide transitions."""

    transition_duration_s: float = 0.25  # Each of fade-out and fade-in


ORDERING = OrderingThresholds()
PAGE_FORMAT = PageFormat()
RASTER = RasterThresholds()
PRESENTATION = PresentationThresholds()

ROW_THRESHOLD = ORDERING.row_threshold
QUALITY_SCALE = dict(RASTER.quality_scale)
TRANSITION_DURATION = PRESENTATION.transition_duration_s
