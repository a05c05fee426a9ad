"""
Unit tests for the ReportLab document builder and export config.

Uses pypdf to inspect generated PDFs.
"""

import io

import pytest
from PIL import Image

from framedeck.export import ExportConfig, ExportDocument, PagePlacement, page_spec_for
from framedeck.export.document import _transform_y

try:
    from pypdf import PdfReader
    PYPDF_AVAILABLE = True
except ImportError:
    PYPDF_AVAILABLE = False


MM_TO_PT = 72 / 25.4
TOLERANCE_PT = 1.0


def _placement():
    return PagePlacement(x=10, y=20, w=100, h=50)


class TestExportConfig:
    """Tests for ExportConfig dataclass."""

    def test_init_when_defaults_then_a4_with_margin(self):
        config = ExportConfig()
        assert (config.page_width_mm, config.page_height_mm, config.margin_mm) == (210, 297, 10)

    def test_scale_for_when_presets_then_multiplied(self):
        """standard = 1.5x and high = 3x the nominal unit."""
        config = ExportConfig(nominal_scale=2.0)
        assert ExportConfig().scale_for("standard") == 1.5
        assert ExportConfig().scale_for("high") == 3.0
        assert config.scale_for("high") == 6.0

    def test_init_when_margins_exceed_page_then_raises(self):
        with pytest.raises(ValueError, match="Margins exceed page size"):
            ExportConfig(margin_mm=105)

    def test_init_when_preset_missing_then_raises(self):
        with pytest.raises(ValueError, match="missing presets"):
            ExportConfig(quality_scale={"standard": 1.5})


class TestExportDocument:
    """Tests for incremental document assembly."""

    def test_to_bytes_when_no_pages_then_raises(self):
        """An empty document is never serialized."""
        with pytest.raises(ValueError, match="no pages"):
            ExportDocument().to_bytes()

    def test_add_page_when_called_then_records_metadata(self):
        # Arrange
        doc = ExportDocument()
        image = Image.new("RGB", (320, 180), "white")

        # Act
        record = doc.add_page(page_spec_for("landscape"), image, _placement(), frame_id="f1")

        # Assert
        assert record.index == 0
        assert record.orientation == "landscape"
        assert (record.image_width, record.image_height) == (320, 180)
        assert record.frame_id == "f1"
        assert doc.page_count == 1

    def test_to_bytes_when_pages_added_then_pdf(self):
        doc = ExportDocument()
        doc.add_page(page_spec_for("portrait"), Image.new("RGBA", (10, 10)), _placement())

        data = doc.to_bytes()

        assert data.startswith(b"%PDF")
        # Serializing twice returns the same blob
        assert doc.to_bytes() == data

    def test_add_page_when_serialized_then_raises(self):
        doc = ExportDocument()
        doc.add_page(page_spec_for("portrait"), Image.new("RGB", (10, 10)), _placement())
        doc.to_bytes()

        with pytest.raises(RuntimeError):
            doc.add_page(page_spec_for("portrait"), Image.new("RGB", (10, 10)), _placement())

    @pytest.mark.skipif(not PYPDF_AVAILABLE, reason="pypdf not installed")
    def test_to_bytes_when_mixed_orientations_then_page_sizes_follow(self):
        """Each page gets its own A4 orientation."""
        # Arrange
        doc = ExportDocument()
        image = Image.new("RGB", (40, 20), "white")
        for orientation in ("landscape", "portrait", "landscape"):
            doc.add_page(page_spec_for(orientation), image, _placement())

        # Act
        reader = PdfReader(io.BytesIO(doc.to_bytes()))

        # Assert
        assert len(reader.pages) == 3
        sizes = [(float(p.mediabox.width), float(p.mediabox.height)) for p in reader.pages]
        for (w, h), expected in zip(sizes, ("landscape", "portrait", "landscape")):
            long_side, short_side = 297 * MM_TO_PT, 210 * MM_TO_PT
            if expected == "landscape":
                assert w == pytest.approx(long_side, abs=TOLERANCE_PT)
                assert h == pytest.approx(short_side, abs=TOLERANCE_PT)
            else:
                assert w == pytest.approx(short_side, abs=TOLERANCE_PT)
                assert h == pytest.approx(long_side, abs=TOLERANCE_PT)


class TestTransformY:
    def test_transform_y_when_top_placement_then_bottom_up(self):
        """Top-down mm become PDF bottom-up mm."""
        assert _transform_y(297, 20, 50) == 227
