import random

import pytest

from badge_print.models import Margins
from badge_print.validation import (
    has_small_margins,
    validate_badge_fits_on_paper,
    validate_custom_dimensions,
    validate_margins,
)
from conftest import make_config


class TestCustomDimensions:
    @pytest.mark.parametrize("width,height", [(50, 50), (500, 500), (100, 150), (50, 500), (333.3, 72.5)])
    def test_accepts_range_bounds(self, width, height):
        result = validate_custom_dimensions(width, height)
        assert result.valid
        assert result.error is None

    def test_accepts_random_values_in_range(self):
        rng = random.Random(3)
        for _ in range(200):
            assert validate_custom_dimensions(rng.uniform(50, 500), rng.uniform(50, 500)).valid

    @pytest.mark.parametrize("width", [49.99, 0, -10, 500.01, 1000])
    def test_rejects_width_out_of_range(self, width):
        result = validate_custom_dimensions(width, 100)
        assert not result.valid
        assert result.error == "Width must be between 50mm and 500mm"

    @pytest.mark.parametrize("height", [49.99, 0, 500.01])
    def test_rejects_height_out_of_range(self, height):
        result = validate_custom_dimensions(100, height)
        assert not result.valid
        assert result.error == "Height must be between 50mm and 500mm"

    def test_width_reported_first(self):
        assert validate_custom_dimensions(10, 10).error.startswith("Width")


class TestMargins:
    def test_accepts_random_margins_in_range(self):
        rng = random.Random(11)
        for _ in range(200):
            margins = Margins(
                top=rng.uniform(0, 50),
                right=rng.uniform(0, 50),
                bottom=rng.uniform(0, 50),
                left=rng.uniform(0, 50),
            )
            assert validate_margins(margins).valid

    def test_accepts_bounds(self):
        assert validate_margins(Margins(top=0, right=50, bottom=0, left=50)).valid

    @pytest.mark.parametrize("side", ["top", "right", "bottom", "left"])
    def test_rejects_single_margin_over_limit(self, side):
        values = {"top": 5, "right": 5, "bottom": 5, "left": 5, side: 50.5}
        result = validate_margins(Margins(**values))
        assert not result.valid
        assert result.error == f"{side.title()} margin must be between 0mm and 50mm"

    def test_rejects_negative_margin(self):
        assert not validate_margins(Margins(top=5, right=-1, bottom=5, left=5)).valid

    def test_reports_first_violation(self):
        result = validate_margins(Margins(top=5, right=60, bottom=-2, left=5))
        assert result.error.startswith("Right")

    def test_independent_of_paper_size(self):
        # 50mm margins on a 100x150 sheet leave no printable width, yet pass
        config = make_config("Custom", margin=50, custom_width=100, custom_height=150)
        assert validate_margins(config.margins).valid


class TestBadgeFit:
    def test_cr80_badge_fits_a4(self):
        assert validate_badge_fits_on_paper(85.6, 53.98, make_config("A4")).valid

    def test_badge_wider_than_printable_area(self):
        result = validate_badge_fits_on_paper(200, 50, make_config("A4"))
        assert not result.valid
        assert result.error == "Badge size (200.0mm × 50.0mm) exceeds printable area (190.0mm × 277.0mm)"

    def test_badge_taller_than_printable_area(self):
        assert not validate_badge_fits_on_paper(50, 280, make_config("A4")).valid

    def test_exact_fit_is_valid(self):
        assert validate_badge_fits_on_paper(190, 277, make_config("A4")).valid

    def test_cr80_sheet_needs_matching_orientation(self):
        badge = (85.6, 53.98)
        portrait = make_config("CR80", "portrait", margin=2)
        result = validate_badge_fits_on_paper(*badge, portrait)
        assert not result.valid
        assert "(85.6mm × 54.0mm)" in result.error
        assert "(50.0mm × 81.6mm)" in result.error

        assert validate_badge_fits_on_paper(*badge, make_config("CR80", "landscape", margin=0)).valid
        assert not validate_badge_fits_on_paper(*badge, make_config("CR80", "portrait", margin=0)).valid


def test_small_margin_warning():
    assert has_small_margins(Margins(top=10, right=10, bottom=4.9, left=10))
    assert not has_small_margins(Margins(top=5, right=5, bottom=5, left=5))
