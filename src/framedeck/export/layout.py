"""
Module: export.layout

Purpose:
    Page orientation and image fitting for PDF export.

Key Functions:
    - resolve_orientation(): Pick portrait/landscape for a content size
    - page_spec_for(): Page format for an orientation
    - fit_to_page(): Centered, margin-respecting image placement

Dependencies:
    - export.config: Orientation, ExportConfig
    - export.models: PageSpec, PagePlacement

Used By:
    - export.pipeline
"""

from __future__ import annotations

from typing import Optional, Union

from .config import ExportConfig, Orientation
from .models import PagePlacement, PageSpec


def resolve_orientation(
    width: float,
    height: float,
    requested: Union[Orientation, str] = Orientation.AUTO,
) -> str:
    """
    Decide page orientation for content of the given size.

    An explicit request always wins, even against the content's shape.

    Args:
        width: Content width (any unit)
        height: Content height (same unit)
        requested: "auto", "portrait" or "landscape"

    Returns:
        "portrait" or "landscape"

    Example:
        >>> resolve_orientation(100, 50, "auto")
        'landscape'
        >>> resolve_orientation(100, 50, "portrait")
        'portrait'
    """
    requested = Orientation(requested)
    if requested is Orientation.AUTO:
        return Orientation.LANDSCAPE.value if width > height else Orientation.PORTRAIT.value
    return requested.value


def page_spec_for(orientation: str, config: Optional[ExportConfig] = None) -> PageSpec:
    """
    Build the fixed-format page for an orientation.

    Landscape pages swap the portrait width and height.

    Args:
        orientation: "portrait" or "landscape"
        config: Export configuration (defaults to A4 with 10mm margin)

    Returns:
        PageSpec for this orientation
    """
    config = config or ExportConfig()
    orientation = Orientation(orientation)
    if orientation is Orientation.AUTO:
        raise ValueError("Page orientation must be resolved before building a page")

    if orientation is Orientation.LANDSCAPE:
        width, height = config.page_height_mm, config.page_width_mm
    else:
        width, height = config.page_width_mm, config.page_height_mm

    return PageSpec(
        page_width_mm=width,
        page_height_mm=height,
        margin_mm=config.margin_mm,
        orientation=orientation.value,
    )


def fit_to_page(
    img_w: float,
    img_h: float,
    page_w: float,
    page_h: float,
    margin_mm: float = 10.0,
) -> PagePlacement:
    """
    Fit an image inside a page's usable area and center it on the page.

    The image is scaled (up or down) to the largest size that fits inside
    the page minus margins while preserving its aspect ratio. The binding
    dimension is whichever side hits the usable area first.

    Args:
        img_w: Image width (pixels)
        img_h: Image height (pixels)
        page_w: Page width (mm)
        page_h: Page height (mm)
        margin_mm: Margin on every side (mm)

    Returns:
        PagePlacement in mm from the page's top-left corner

    Raises:
        ValueError: If any dimension is non-positive or margins fill the page

    Example:
        >>> p = fit_to_page(1600, 900, 210, 297, 10)
        >>> p.w
        190.0
    """
    if img_w <= 0 or img_h <= 0:
        raise ValueError(f"Image dimensions must be positive: {img_w}x{img_h}")
    if page_w <= 0 or page_h <= 0:
        raise ValueError(f"Page dimensions must be positive: {page_w}x{page_h}")

    usable_w = page_w - 2 * margin_mm
    usable_h = page_h - 2 * margin_mm
    if usable_w <= 0 or usable_h <= 0:
        raise ValueError(f"Margin {margin_mm}mm leaves no usable area on {page_w}x{page_h}")

    img_aspect = img_w / img_h
    usable_aspect = usable_w / usable_h

    if img_aspect > usable_aspect:
        # Width binds
        w = usable_w
        h = usable_w / img_aspect
    else:
        # Height binds
        h = usable_h
        w = usable_h * img_aspect

    return PagePlacement(
        x=(page_w - w) / 2,
        y=(page_h - h) / 2,
        w=w,
        h=h,
    )
