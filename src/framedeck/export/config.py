"""
Module: export.config

Purpose:
    Configuration for PDF export. Immutable configuration with validation
    on construction.

Key Classes:
    - Orientation: auto / portrait / landscape
    - Quality: standard / high
    - ExportMode: frames / full-canvas
    - ExportConfig: Page format, margin and quality scales

Dependencies:
    - common.thresholds: Default page format and quality scales

Used By:
    - export.layout: Page specs
    - export.pipeline: Export entry points
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union

from framedeck.common.thresholds import PAGE_FORMAT, RASTER


class Orientation(str, Enum):
    """Requested page orientation."""

    AUTO = "auto"
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class Quality(str, Enum):
    """Rasterization quality preset."""

    STANDARD = "standard"
    HIGH = "high"


class ExportMode(str, Enum):
    """What to export: one page per frame, or the whole canvas on one page."""

    FRAMES = "frames"
    FULL_CANVAS = "full-canvas"


DEFAULT_EXPORT_FILENAME = "excalidraw-export.pdf"


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for PDF export (immutable).

    Page dimensions describe the portrait A4 format; landscape pages swap
    width and height.

    Attributes:
        page_width_mm: Portrait page width in millimetres
        page_height_mm: Portrait page height in millimetres
        margin_mm: Margin kept clear on every side
        nominal_scale: Base rasterization scale unit
        quality_scale: Multiplier per quality preset

    Example:
        >>> config = ExportConfig()
        >>> config.scale_for("high")
        3.0
    """

    page_width_mm: float = PAGE_FORMAT.width_mm
    page_height_mm: float = PAGE_FORMAT.height_mm
    margin_mm: float = PAGE_FORMAT.margin_mm
    nominal_scale: float = RASTER.nominal_scale
    quality_scale: Dict[str, float] = field(default_factory=lambda: dict(RASTER.quality_scale))

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width_mm <= 0 or self.page_height_mm <= 0:
            raise ValueError(
                f"Page dimensions must be positive: {self.page_width_mm}x{self.page_height_mm}"
            )
        if self.margin_mm < 0:
            raise ValueError(f"margin_mm must be non-negative: {self.margin_mm}")
        if 2 * self.margin_mm >= min(self.page_width_mm, self.page_height_mm):
            raise ValueError("Margins exceed page size")
        if self.nominal_scale <= 0:
            raise ValueError(f"nominal_scale must be positive: {self.nominal_scale}")
        missing = {q.value for q in Quality} - set(self.quality_scale)
        if missing:
            raise ValueError(f"quality_scale missing presets: {sorted(missing)}")

    def scale_for(self, quality: Union[Quality, str]) -> float:
        """Rasterization scale for a quality preset."""
        return self.nominal_scale * self.quality_scale[Quality(quality).value]
