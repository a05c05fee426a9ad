"""
Unit tests for page orientation and image fitting.
"""

import random

import pytest

from framedeck.export import ExportConfig, Orientation, fit_to_page, page_spec_for, resolve_orientation


class TestResolveOrientation:
    """Tests for resolve_orientation."""

    def test_resolve_when_auto_wide_then_landscape(self):
        assert resolve_orientation(100, 50, "auto") == "landscape"

    def test_resolve_when_auto_tall_then_portrait(self):
        assert resolve_orientation(50, 100, "auto") == "portrait"

    def test_resolve_when_auto_square_then_portrait(self):
        """Ties go to portrait."""
        assert resolve_orientation(100, 100, Orientation.AUTO) == "portrait"

    def test_resolve_when_explicit_then_wins_over_content(self):
        """Caller's explicit choice overrides the content shape."""
        assert resolve_orientation(100, 50, "portrait") == "portrait"
        assert resolve_orientation(50, 100, Orientation.LANDSCAPE) == "landscape"

    def test_resolve_when_unknown_then_raises(self):
        with pytest.raises(ValueError):
            resolve_orientation(100, 50, "sideways")


class TestPageSpecFor:
    """Tests for fixed-format page specs."""

    def test_page_spec_when_portrait_then_a4(self):
        spec = page_spec_for("portrait")
        assert (spec.page_width_mm, spec.page_height_mm) == (210, 297)
        assert spec.margin_mm == 10

    def test_page_spec_when_landscape_then_swapped(self):
        spec = page_spec_for("landscape")
        assert (spec.page_width_mm, spec.page_height_mm) == (297, 210)
        assert spec.orientation == "landscape"

    def test_page_spec_when_auto_then_raises(self):
        """Orientation must be resolved first."""
        with pytest.raises(ValueError, match="resolved"):
            page_spec_for("auto")

    def test_page_spec_when_config_margin_then_used(self):
        spec = page_spec_for("portrait", ExportConfig(margin_mm=5))
        assert spec.usable_width_mm == 200


class TestFitToPage:
    """Tests for fit_to_page."""

    def test_fit_when_wide_image_on_portrait_then_width_binds(self):
        """1600x900 on A4 portrait fills the usable width and is centered."""
        # Act
        p = fit_to_page(1600, 900, 210, 297, 10)

        # Assert
        assert p.w <= 190
        assert p.w == pytest.approx(190)
        assert p.w / p.h == pytest.approx(16 / 9, abs=1e-6)
        assert p.x == (210 - p.w) / 2
        assert p.y == (297 - p.h) / 2

    def test_fit_when_tall_image_then_height_binds(self):
        p = fit_to_page(100, 1000, 210, 297, 10)
        assert p.h == pytest.approx(277)
        assert p.w == pytest.approx(27.7)

    def test_fit_when_small_image_then_scaled_up(self):
        """Tiny rasters are enlarged to fill the usable area."""
        p = fit_to_page(2, 1, 297, 210, 10)
        assert p.w == pytest.approx(277)
        assert p.h == pytest.approx(138.5)

    def test_fit_when_zero_margin_then_fills_page(self):
        p = fit_to_page(210, 297, 210, 297, 0)
        assert (p.x, p.y) == pytest.approx((0, 0))
        assert (p.w, p.h) == pytest.approx((210, 297))

    @pytest.mark.parametrize(
        "args",
        [
            (0, 100, 210, 297, 10),
            (100, -1, 210, 297, 10),
            (100, 100, 0, 297, 10),
            (100, 100, 210, 297, 105),
        ],
    )
    def test_fit_when_invalid_then_raises(self, args):
        with pytest.raises(ValueError):
            fit_to_page(*args)

    def test_fit_when_random_inputs_then_invariants_hold(self):
        """Fits inside the usable area, keeps aspect ratio, and is centered."""
        rng = random.Random(42)
        for _ in range(200):
            img_w, img_h = rng.uniform(1, 5000), rng.uniform(1, 5000)
            page_w, page_h = rng.uniform(50, 500), rng.uniform(50, 500)
            margin = rng.uniform(0, min(page_w, page_h) / 2 - 1)

            p = fit_to_page(img_w, img_h, page_w, page_h, margin)

            assert p.w <= page_w - 2 * margin + 1e-9
            assert p.h <= page_h - 2 * margin + 1e-9
            assert p.w / p.h == pytest.approx(img_w / img_h, rel=1e-9)
            assert p.x == pytest.approx((page_w - p.w) / 2)
            assert p.y == pytest.approx((page_h - p.h) / 2)
