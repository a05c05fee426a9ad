"""
Module: export

Purpose:
    Paginated PDF export of canvas frames or the full canvas.

Key Functions:
    - export_frames(): One page per frame
    - export_full_canvas(): Single page of the whole scene
    - export_pdf(): Mode-dispatching entry point
    - resolve_orientation(), fit_to_page(): Page layout decisions

Key Classes:
    - ExportConfig: Page format and quality scales
    - ExportDocument: ReportLab document builder
    - ExportResult: PDF blob + page metadata

Dependencies:
    - reportlab: PDF generation
    - PIL: Raster images
"""

from .config import DEFAULT_EXPORT_FILENAME, ExportConfig, ExportMode, Orientation, Quality
from .document import ExportDocument
from .layout import fit_to_page, page_spec_for, resolve_orientation
from .models import ExportResult, PagePlacement, PageRecord, PageSpec
from .pipeline import export_frames, export_full_canvas, export_pdf

__all__ = [
    # Config
    "DEFAULT_EXPORT_FILENAME",
    "ExportConfig",
    "ExportMode",
    "Orientation",
    "Quality",
    # Layout
    "fit_to_page",
    "page_spec_for",
    "resolve_orientation",
    # Models
    "ExportDocument",
    "ExportResult",
    "PagePlacement",
    "PageRecord",
    "PageSpec",
    # Pipeline
    "export_frames",
    "export_full_canvas",
    "export_pdf",
]
