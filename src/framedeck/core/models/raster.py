"""
Module: core.models.raster

Purpose:
    Interface types for the external rasterizer that turns drawing
    elements into a bitmap.

Key Classes:
    - TargetDimensions: Output size override returned by a dimensions callback
    - RasterOptions: Options passed on every rasterizer call
    - Rasterizer: Async callable protocol

Dependencies:
    - PIL: RasterImage is a Pillow image
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from PIL import Image

from .frames import Frame
from .scene import Element


@dataclass(frozen=True)
class TargetDimensions:
    """
    Requested output size for a raster.

    Attributes:
        width: Output width in device pixels
        height: Output height in device pixels
        scale: Content-to-output scale factor
    """

    width: int
    height: int
    scale: float


DimensionsCallback = Callable[[float, float], TargetDimensions]


@dataclass(frozen=True)
class RasterOptions:
    """
    Options for a single rasterizer call.

    Attributes:
        exporting_frame: Restrict output to this frame (None = whole scene)
        target_dimensions: Callback overriding the natural output size
        background_enabled: Paint the canvas background
        scale: Resolution multiplier when no callback is given
    """

    exporting_frame: Optional[Frame] = None
    target_dimensions: Optional[DimensionsCallback] = None
    background_enabled: bool = True
    scale: float = 1.0


class Rasterizer(Protocol):
    """Async rasterizer provided by the canvas library."""

    async def __call__(
        self,
        elements: Sequence[Element],
        files: Dict[str, Any],
        app_state: Dict[str, Any],
        options: RasterOptions,
    ) -> Image.Image: ...
