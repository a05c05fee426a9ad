"""Top-level package for framedeck.

Presentation and PDF export engine for frame-based canvas drawings.

Provides subpackages:
- framedeck.ordering – deterministic slide ordering of frames
- framedeck.export – paginated PDF export
- framedeck.presentation – fullscreen slideshow sessions
- framedeck.core – models, errors and scene loading
"""


def _get_version() -> str:
    """Get version from installed metadata, falling back to pyproject.toml in dev."""
    from pathlib import Path

    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("framedeck")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"


__version__ = _get_version()

from .core.errors import (  # noqa: E402
    DocumentAssemblyError,
    EmptyInputError,
    ExportError,
    FrameDeckError,
    FullscreenUnavailableError,
    RasterizationError,
    SceneFormatError,
)
from .core.models import Frame, RasterOptions, SceneSnapshot, TargetDimensions  # noqa: E402
from .export import export_frames, export_full_canvas, export_pdf  # noqa: E402
from .ordering import order_frames  # noqa: E402
from .presentation import PresentationController  # noqa: E402

__all__ = [
    "__version__",
    # Errors
    "DocumentAssemblyError",
    "EmptyInputError",
    "ExportError",
    "FrameDeckError",
    "FullscreenUnavailableError",
    "RasterizationError",
    "SceneFormatError",
    # Models
    "Frame",
    "RasterOptions",
    "SceneSnapshot",
    "TargetDimensions",
    # Operations
    "order_frames",
    "export_frames",
    "export_full_canvas",
    "export_pdf",
    "PresentationController",
]
