"""
Module: export.document

Purpose:
    Assemble a paginated PDF in memory using ReportLab.
    Each page holds one raster image placed at a PagePlacement. Pages are
    drawn as they are added so the raster can be released immediately.

Key Classes:
    - ExportDocument: Incremental page-by-page PDF builder

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - export.pipeline: Document assembly
"""

from __future__ import annotations

import io
import logging
from typing import Callable, List, Optional

from PIL import Image
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from .models import PagePlacement, PageRecord, PageSpec

logger = logging.getLogger(__name__)

PDF_TITLE = "Frame export"


class ExportDocument:
    """
    In-memory PDF document built one page at a time.

    Example:
        >>> doc = ExportDocument()
        >>> doc.add_page(spec, image, placement, frame_id="f1")
        >>> blob = doc.to_bytes()
    """

    def __init__(self, title: str = PDF_TITLE) -> None:
        self._buffer = io.BytesIO()
        self._canvas: Optional[canvas.Canvas] = None
        self._title = title
        self._pages: List[PageRecord] = []
        self._closed = False

    @property
    def pages(self) -> tuple[PageRecord, ...]:
        """Records for pages added so far."""
        return tuple(self._pages)

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def add_page(
        self,
        spec: PageSpec,
        image: Image.Image,
        placement: PagePlacement,
        *,
        frame_id: Optional[str] = None,
    ) -> PageRecord:
        """
        Append a page holding one placed image.

        Args:
            spec: Page format (mm) and orientation
            image: Raster to draw
            placement: Image rectangle in mm from the page top-left
            frame_id: Source frame, recorded in page metadata

        Returns:
            PageRecord for the new page

        Raises:
            RuntimeError: If the document was already serialized
        """
        if self._closed:
            raise RuntimeError("Cannot add pages after the document was serialized")

        page_size = (spec.page_width_mm * mm, spec.page_height_mm * mm)
        c = self._ensure_canvas(page_size)
        c.setPageSize(page_size)

        c.drawImage(
            _pil_to_reader(image),
            placement.x * mm,
            _transform_y(spec.page_height_mm, placement.y, placement.h) * mm,
            width=placement.w * mm,
            height=placement.h * mm,
            mask="auto",
        )
        c.showPage()

        record = PageRecord(
            index=len(self._pages),
            spec=spec,
            placement=placement,
            image_width=image.width,
            image_height=image.height,
            frame_id=frame_id,
        )
        self._pages.append(record)
        logger.debug(
            f"Added page {record.index + 1} ({spec.orientation}, "
            f"{image.width}x{image.height}px)"
        )
        return record

    def to_bytes(self) -> bytes:
        """
        Serialize the document.

        Returns:
            PDF file contents

        Raises:
            ValueError: If no pages were added
        """
        if self._canvas is None or not self._pages:
            raise ValueError("Cannot serialize a document with no pages")

        if not self._closed:
            self._canvas.save()
            self._closed = True
        return self._buffer.getvalue()

    def _ensure_canvas(self, page_size: tuple[float, float]) -> canvas.Canvas:
        if self._canvas is None:
            self._canvas = canvas.Canvas(self._buffer, pagesize=page_size)
            self._canvas.setTitle(self._title)
        return self._canvas


DocumentFactory = Callable[[], ExportDocument]


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)


def _transform_y(page_height_mm: float, y_top_mm: float, height_mm: float) -> float:
    """Convert a top-down y coordinate to PDF's bottom-up y."""
    return page_height_mm - y_top_mm - height_mm
