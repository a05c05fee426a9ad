"""
Module: export.pipeline

Purpose:
    Orchestrate PDF export of a drawing scene.
    Snapshot → Order frames → (Rasterize → Orient → Fit → Add page)* → Serialize

Key Functions:
    - export_frames(): One page per frame, in deck order
    - export_full_canvas(): Whole scene on a single page
    - export_pdf(): Dispatch on ExportMode (export dialog entry point)

Concurrency:
    Pages are rasterized strictly one after another. Page N+1 never starts
    before page N's raster has been placed, which bounds peak memory to one
    raster and keeps page order equal to deck order.

Error Handling:
    Any rasterizer failure raises RasterizationError and any document
    builder failure raises DocumentAssemblyError. Either way no document is
    returned; there is no state to clean up, so callers can simply retry.

Dependencies:
    - ordering.orderer: Deck ordering
    - export.layout: Orientation + fitting
    - export.document: ReportLab document builder

Used By:
    - Host export dialog
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, Optional, Union

from PIL import Image

from framedeck.core.errors import (
    DocumentAssemblyError,
    EmptyInputError,
    RasterizationError,
)
from framedeck.core.models.frames import Frame, collect_frames
from framedeck.core.models.raster import RasterOptions, Rasterizer
from framedeck.core.models.scene import SceneAccessor, SceneSnapshot
from framedeck.ordering.orderer import order_frames

from .config import ExportConfig, ExportMode, Orientation, Quality
from .document import DocumentFactory, ExportDocument
from .layout import fit_to_page, page_spec_for, resolve_orientation
from .models import ExportResult

logger = logging.getLogger(__name__)

SceneSource = Union[SceneAccessor, SceneSnapshot]


async def export_frames(
    scene: SceneSource,
    frames: Iterable[Frame],
    orientation: Union[Orientation, str] = Orientation.AUTO,
    quality: Union[Quality, str] = Quality.STANDARD,
    *,
    rasterize: Rasterizer,
    config: Optional[ExportConfig] = None,
    document_factory: Optional[DocumentFactory] = None,
) -> ExportResult:
    """
    Export each frame as its own PDF page.

    Each page's orientation is resolved from that frame's own aspect ratio
    (unless an explicit orientation is requested).

    Args:
        scene: Editor scene accessor or snapshot
        frames: Frames to export (ordered spatially here)
        orientation: "auto", "portrait" or "landscape"
        quality: "standard" (1.5x) or "high" (3x)
        rasterize: External async rasterizer
        config: Export configuration
        document_factory: Builds the document (defaults to ExportDocument)

    Returns:
        ExportResult with the PDF blob and page metadata

    Raises:
        EmptyInputError: If no frames are supplied
        RasterizationError: If any frame fails to rasterize
        DocumentAssemblyError: If the document cannot be assembled

    Example:
        >>> result = await export_frames(api, frames, "auto", "high", rasterize=export_to_canvas)
        >>> result.save(Path("slides.pdf"))
    """
    orientation = Orientation(orientation)
    quality = Quality(quality)
    config = config or ExportConfig()

    deck = order_frames(frames)
    if not deck:
        logger.error("PDF export failed: no frames provided")
        raise EmptyInputError("No frames provided for PDF export.")

    snapshot = SceneSnapshot.capture(scene)
    scale = config.scale_for(quality)
    document = (document_factory or ExportDocument)()
    start_time = time.perf_counter()

    logger.info(
        f"Exporting {len(deck)} frames to PDF "
        f"(orientation={orientation.value}, quality={quality.value}, scale={scale})"
    )

    for index, frame in enumerate(deck):
        page_orientation = resolve_orientation(frame.width, frame.height, orientation)
        spec = page_spec_for(page_orientation, config)

        image = await _rasterize(
            rasterize,
            snapshot,
            RasterOptions(exporting_frame=frame, background_enabled=True, scale=scale),
            frame_id=frame.id,
            page_index=index,
            orientation=orientation,
            quality=quality,
        )

        placement = fit_to_page(
            image.width,
            image.height,
            spec.page_width_mm,
            spec.page_height_mm,
            spec.margin_mm,
        )
        _add_page(document, spec, image, placement, frame_id=frame.id, page_index=index)

    data = _serialize(document)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Exported {document.page_count} pages ({len(data)} bytes) in {elapsed:.2f}s")
    return ExportResult(data=data, pages=document.pages)


async def export_full_canvas(
    scene: SceneSource,
    orientation: Union[Orientation, str] = Orientation.AUTO,
    quality: Union[Quality, str] = Quality.STANDARD,
    *,
    rasterize: Rasterizer,
    config: Optional[ExportConfig] = None,
    document_factory: Optional[DocumentFactory] = None,
) -> ExportResult:
    """
    Export the whole scene as a single-page PDF.

    Orientation is resolved from the rendered image's own aspect ratio.

    Args:
        scene: Editor scene accessor or snapshot
        orientation: "auto", "portrait" or "landscape"
        quality: "standard" (1.5x) or "high" (3x)
        rasterize: External async rasterizer
        config: Export configuration
        document_factory: Builds the document (defaults to ExportDocument)

    Returns:
        ExportResult with a one-page PDF

    Raises:
        RasterizationError: If the scene fails to rasterize
        DocumentAssemblyError: If the document cannot be assembled
    """
    orientation = Orientation(orientation)
    quality = Quality(quality)
    config = config or ExportConfig()

    snapshot = SceneSnapshot.capture(scene)
    scale = config.scale_for(quality)

    logger.info(
        f"Exporting full canvas to PDF "
        f"(orientation={orientation.value}, quality={quality.value}, scale={scale})"
    )

    image = await _rasterize(
        rasterize,
        snapshot,
        RasterOptions(background_enabled=True, scale=scale),
        frame_id=None,
        page_index=0,
        orientation=orientation,
        quality=quality,
    )

    page_orientation = resolve_orientation(image.width, image.height, orientation)
    spec = page_spec_for(page_orientation, config)
    placement = fit_to_page(
        image.width,
        image.height,
        spec.page_width_mm,
        spec.page_height_mm,
        spec.margin_mm,
    )

    document = (document_factory or ExportDocument)()
    _add_page(document, spec, image, placement, frame_id=None, page_index=0)
    data = _serialize(document)

    logger.info(f"Exported full canvas ({page_orientation}, {len(data)} bytes)")
    return ExportResult(data=data, pages=document.pages)


async def export_pdf(
    scene: SceneSource,
    mode: Union[ExportMode, str] = ExportMode.FRAMES,
    orientation: Union[Orientation, str] = Orientation.AUTO,
    quality: Union[Quality, str] = Quality.STANDARD,
    *,
    rasterize: Rasterizer,
    config: Optional[ExportConfig] = None,
    document_factory: Optional[DocumentFactory] = None,
) -> ExportResult:
    """
    Export a scene according to the export dialog's mode.

    In frames mode the frames are collected from the scene snapshot.

    Args:
        scene: Editor scene accessor or snapshot
        mode: "frames" or "full-canvas"
        orientation: "auto", "portrait" or "landscape"
        quality: "standard" or "high"
        rasterize: External async rasterizer
        config: Export configuration
        document_factory: Builds the document

    Returns:
        ExportResult

    Raises:
        EmptyInputError: Frames mode on a scene without frames
        RasterizationError, DocumentAssemblyError: As for the entry points
    """
    mode = ExportMode(mode)
    snapshot = SceneSnapshot.capture(scene)

    if mode is ExportMode.FRAMES:
        frames = collect_frames(snapshot.elements)
        return await export_frames(
            snapshot,
            frames,
            orientation,
            quality,
            rasterize=rasterize,
            config=config,
            document_factory=document_factory,
        )

    return await export_full_canvas(
        snapshot,
        orientation,
        quality,
        rasterize=rasterize,
        config=config,
        document_factory=document_factory,
    )


async def _rasterize(
    rasterize: Rasterizer,
    snapshot: SceneSnapshot,
    options: RasterOptions,
    *,
    frame_id: Optional[str],
    page_index: int,
    orientation: Orientation,
    quality: Quality,
) -> Image.Image:
    """Call the rasterizer, converting any failure to RasterizationError."""
    try:
        image = await rasterize(
            list(snapshot.elements),
            dict(snapshot.files),
            dict(snapshot.app_state),
            options,
        )
    except Exception as e:
        logger.error(
            f"Rasterization failed for page {page_index + 1} "
            f"(frame={frame_id}, orientation={orientation.value}, quality={quality.value}): {e}"
        )
        raise RasterizationError(
            f"Failed to render page {page_index + 1}: {e}",
            frame_id=frame_id,
            page_index=page_index,
        ) from e

    if image is None or image.width <= 0 or image.height <= 0:
        logger.error(f"Rasterizer returned an empty image for page {page_index + 1} (frame={frame_id})")
        raise RasterizationError(
            f"Rasterizer returned an empty image for page {page_index + 1}",
            frame_id=frame_id,
            page_index=page_index,
        )
    return image


def _add_page(document, spec, image, placement, *, frame_id, page_index) -> None:
    try:
        document.add_page(spec, image, placement, frame_id=frame_id)
    except Exception as e:
        logger.error(f"Failed to add page {page_index + 1} (frame={frame_id}): {e}")
        raise DocumentAssemblyError(f"Failed to add page {page_index + 1}: {e}") from e


def _serialize(document) -> bytes:
    try:
        return document.to_bytes()
    except Exception as e:
        logger.error(f"Failed to serialize PDF document: {e}")
        raise DocumentAssemblyError(f"Failed to assemble PDF document: {e}") from e
