"""
Module: presentation.models

Purpose:
    Value types for presentation sessions: lifecycle phases, screen
    geometry, and the keyboard contract.

Key Classes:
    - Phase: Session lifecycle state
    - ScreenGeometry: Display size and pixel density
    - SlideAction: Navigation actions bound to keys

Used By:
    - presentation.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from framedeck.core.models.raster import TargetDimensions


class Phase(str, Enum):
    """
    Presentation lifecycle.

    LOADING -> IDLE <-> TRANSITIONING, or LOADING -> EMPTY when there are no
    frames. Any state -> EXITED, which is terminal.
    """

    LOADING = "loading"
    IDLE = "idle"
    TRANSITIONING = "transitioning"
    EMPTY = "empty"
    EXITED = "exited"


class SlideAction(str, Enum):
    NEXT = "next"
    PREV = "prev"
    FIRST = "first"
    LAST = "last"
    EXIT = "exit"


# Keys use DOM KeyboardEvent.key names
KEY_BINDINGS: Dict[str, SlideAction] = {
    "ArrowRight": SlideAction.NEXT,
    " ": SlideAction.NEXT,
    "ArrowLeft": SlideAction.PREV,
    "Escape": SlideAction.EXIT,
    "Home": SlideAction.FIRST,
    "End": SlideAction.LAST,
}


def action_for_key(key: str) -> Optional[SlideAction]:
    """Map a key name to its slide action (None = ignored key)."""
    return KEY_BINDINGS.get(key)


@dataclass(frozen=True)
class ScreenGeometry:
    """
    Display geometry for a presentation.

    Attributes:
        width: Viewport width in CSS pixels
        height: Viewport height in CSS pixels
        device_pixel_ratio: Device pixels per CSS pixel

    Example:
        >>> ScreenGeometry(1920, 1080, 2.0).device_width
        3840.0
    """

    width: float
    height: float
    device_pixel_ratio: float = 1.0

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Screen size must be positive: {self.width}x{self.height}")
        if self.device_pixel_ratio <= 0:
            raise ValueError(f"device_pixel_ratio must be positive: {self.device_pixel_ratio}")

    @property
    def device_width(self) -> float:
        return self.width * self.device_pixel_ratio

    @property
    def device_height(self) -> float:
        return self.height * self.device_pixel_ratio

    def fill_dimensions(self, content_w: float, content_h: float) -> TargetDimensions:
        """
        Size that fills this screen while preserving the content's aspect ratio.

        Scales up as well as down, so small frames fill a large display.

        Args:
            content_w: Natural content width
            content_h: Natural content height

        Returns:
            TargetDimensions in device pixels

        Raises:
            ValueError: If the content has no area
        """
        if content_w <= 0 or content_h <= 0:
            raise ValueError(f"Content size must be positive: {content_w}x{content_h}")

        scale = min(self.device_width / content_w, self.device_height / content_h)
        return TargetDimensions(
            width=round(content_w * scale),
            height=round(content_h * scale),
            scale=scale,
        )
