"""
Module: export.models

Purpose:
    Data models for paginated export.
    Immutable dataclasses for page format, image placement and results.

Key Classes:
    - PageSpec: Size, margin and orientation of one page
    - PagePlacement: Image rectangle on a page (mm, top-left origin)
    - PageRecord: Metadata for one exported page
    - ExportResult: Final PDF blob with per-page metadata

Used By:
    - export.layout: Creates PageSpecs and PagePlacements
    - export.document: Records pages
    - export.pipeline: Returns ExportResult
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageSpec:
    """
    One document page (immutable).

    Attributes:
        page_width_mm: Page width for this orientation
        page_height_mm: Page height for this orientation
        margin_mm: Margin on every side
        orientation: "portrait" or "landscape"
    """

    page_width_mm: float
    page_height_mm: float
    margin_mm: float
    orientation: str

    @property
    def usable_width_mm(self) -> float:
        """Width available for content (excluding margins)."""
        return self.page_width_mm - 2 * self.margin_mm

    @property
    def usable_height_mm(self) -> float:
        """Height available for content (excluding margins)."""
        return self.page_height_mm - 2 * self.margin_mm


@dataclass(frozen=True)
class PagePlacement:
    """
    Image rectangle on a page, in mm from the top-left corner.

    Example:
        >>> PagePlacement(x=10, y=20, w=190, h=100).right
        200
    """

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


@dataclass(frozen=True)
class PageRecord:
    """
    Metadata for one page written to a document.

    Attributes:
        index: Page number (0-indexed)
        spec: Page format used
        placement: Where the raster was drawn
        image_width: Raster width in device pixels
        image_height: Raster height in device pixels
        frame_id: Source frame (None for full-canvas export)
    """

    index: int
    spec: PageSpec
    placement: PagePlacement
    image_width: int
    image_height: int
    frame_id: Optional[str] = None

    @property
    def orientation(self) -> str:
        return self.spec.orientation


@dataclass(frozen=True)
class ExportResult:
    """
    Complete export result (immutable).

    Attributes:
        data: Serialized PDF document
        pages: Per-page metadata in document order

    Example:
        >>> result = await export_frames(scene, frames, rasterize=rasterize)
        >>> result.page_count
        3
    """

    data: bytes
    pages: Tuple[PageRecord, ...]

    @property
    def page_count(self) -> int:
        """Number of pages in the document."""
        return len(self.pages)

    @property
    def orientations(self) -> Tuple[str, ...]:
        """Orientation of each page in order."""
        return tuple(p.orientation for p in self.pages)

    def save(self, output_path: Path) -> Path:
        """
        Write the PDF blob to disk.

        Args:
            output_path: Destination file

        Returns:
            The path written
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(self.data)
        logger.info(f"Wrote {self.page_count} page PDF to {output_path}")
        return output_path
