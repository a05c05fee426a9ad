"""
Core Models Package

Immutable data models shared by ordering, export and presentation.
The engine reads frames and scene snapshots; it never mutates them.
"""

from .frames import Frame, collect_frames, is_frame_like
from .raster import RasterOptions, Rasterizer, TargetDimensions
from .scene import SceneAccessor, SceneSnapshot

__all__ = [
    "Frame",
    "collect_frames",
    "is_frame_like",
    "RasterOptions",
    "Rasterizer",
    "TargetDimensions",
    "SceneAccessor",
    "SceneSnapshot",
]
