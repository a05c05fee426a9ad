"""
Module: core.errors

Purpose:
    Exception hierarchy shared by the export pipeline and the
    presentation controller.

Key Classes:
    - FrameDeckError: Base class for all engine errors
    - ExportError: Base class for export failures
    - EmptyInputError: Frames export called with no frames
    - RasterizationError: External rasterizer rejected or raised
    - DocumentAssemblyError: PDF document could not be assembled
    - FullscreenUnavailableError: Host refused exclusive fullscreen

Used By:
    - export.pipeline
    - presentation.controller
"""

from __future__ import annotations

from typing import Optional


class FrameDeckError(Exception):
    """Base error for the framedeck engine."""
    pass


class ExportError(FrameDeckError):
    """Error during PDF export. No partial document is ever returned."""
    pass


class EmptyInputError(ExportError):
    """No frames were supplied to a frames-based export."""
    pass


class RasterizationError(ExportError):
    """
    The external rasterizer failed.

    Attributes:
        frame_id: Id of the frame being rendered (None for full canvas)
        page_index: Zero-based page/slide index being rendered
    """

    def __init__(
        self,
        message: str,
        *,
        frame_id: Optional[str] = None,
        page_index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.frame_id = frame_id
        self.page_index = page_index


class DocumentAssemblyError(ExportError):
    """The document builder failed while adding a page or serializing."""
    pass


class FullscreenUnavailableError(FrameDeckError):
    """Exclusive fullscreen could not be obtained. Never fatal."""
    pass


class SceneFormatError(FrameDeckError):
    """A scene file or payload could not be parsed."""
    pass
