"""Shared constants used across framedeck subpackages."""

from .thresholds import (
    ORDERING,
    PAGE_FORMAT,
    PRESENTATION,
    QUALITY_SCALE,
    RASTER,
    ROW_THRESHOLD,
    TRANSITION_DURATION,
    PageFormat,
)

__all__ = [
    "ORDERING",
    "PAGE_FORMAT",
    "PRESENTATION",
    "QUALITY_SCALE",
    "RASTER",
    "ROW_THRESHOLD",
    "TRANSITION_DURATION",
    "PageFormat",
]
