"""
Module: core.models.frames

Purpose:
    Provides the Frame dataclass - a named rectangular region of the
    infinite canvas that acts as a slide/page boundary - and helpers to
    pull frames out of a list of scene elements.

Key Functions:
    - Frame.from_element(element): Build a Frame from a scene element
    - collect_frames(elements): Extract live frame-like elements

Dependencies:
    - dataclasses (std)

Used By:
    - ordering.orderer: Deck ordering
    - export.pipeline: Per-frame rasterization
    - presentation.controller: Slide deck
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

# Element types the canvas treats as frames
FRAME_LIKE_TYPES = frozenset({"frame", "magicframe"})


@dataclass(frozen=True, slots=True)
class Frame:
    """
    Rectangular slide region on the canvas (immutable).

    The engine only reads frames; the scene document owns them.

    Attributes:
        id: Unique element id
        x: Left edge in canvas units
        y: Top edge in canvas units
        width: Width in canvas units
        height: Height in canvas units
        name: Optional user-facing frame name

    Example:
        >>> frame = Frame("f1", x=0, y=0, width=1600, height=900)
        >>> frame.is_landscape
        True
    """

    id: str
    x: float
    y: float
    width: float
    height: float
    name: Optional[str] = None

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height (0.0 for degenerate frames)."""
        if self.height == 0:
            return 0.0
        return self.width / self.height

    @property
    def is_landscape(self) -> bool:
        """True when the frame is strictly wider than tall."""
        return self.width > self.height

    @property
    def label(self) -> str:
        """Display name, falling back to the id."""
        return self.name or self.id

    @classmethod
    def from_element(cls, element: Mapping[str, Any]) -> Frame:
        """
        Build a Frame from a scene element mapping.

        Args:
            element: Scene element with at least id/x/y/width/height

        Returns:
            Frame instance

        Raises:
            KeyError: If a required geometry field is missing
        """
        return cls(
            id=str(element["id"]),
            x=float(element["x"]),
            y=float(element["y"]),
            width=float(element["width"]),
            height=float(element["height"]),
            name=element.get("name") or None,
        )


def is_frame_like(element: Mapping[str, Any]) -> bool:
    """Check whether a scene element is a live frame."""
    return element.get("type") in FRAME_LIKE_TYPES and not element.get("isDeleted", False)


def collect_frames(elements: Iterable[Mapping[str, Any]]) -> List[Frame]:
    """
    Extract frames from scene elements in scene order.

    Deleted elements and non-frame elements are skipped.

    Args:
        elements: Scene elements from a snapshot

    Returns:
        List of Frames (unordered deck)
    """
    return [Frame.from_element(el) for el in elements if is_frame_like(el)]
