# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""Tests for luminance, LRV and contrast."""

import pytest

from protabula.colormath.photometry import (
    contrast_ratio,
    contrast_ratio_from_luminance,
    light_reflectance_value,
    needs_dark_text,
    relative_luminance,
    wcag_rating,
)
from protabula.schema import InvalidColorFormat


class TestLuminance:

    def test_extremes(self):
        assert relative_luminance("#000000") == pytest.approx(0.0)
        assert relative_luminance("#FFFFFF") == pytest.approx(1.0)

    def test_green_brighter_than_red_brighter_than_blue(self):
        assert relative_luminance("#00FF00") > relative_luminance("#FF0000")
        assert relative_luminance("#FF0000") > relative_luminance("#0000FF")

    def test_pure_red_coefficient(self):
        assert relative_luminance("#FF0000") == pytest.approx(0.2126)

    def test_invalid_hex(self):
        with pytest.raises(InvalidColorFormat):
            relative_luminance("nope")


class TestLRV:

    def test_extremes(self):
        assert light_reflectance_value("#000000") == 0.0
        assert light_reflectance_value("#FFFFFF") == 100.0

    def test_orange_red(self):
        assert light_reflectance_value("#FF5733") == 28.3

    def test_one_decimal(self):
        value = light_reflectance_value("#123456")
        assert round(value, 1) == value


class TestContrast:

    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#FFFFFF") == 21.0

    def test_same_color(self):
        assert contrast_ratio("#FF5733", "#FF5733") == 1.0

    def test_symmetric(self):
        assert contrast_ratio("#123456", "#ABCDEF") == contrast_ratio("#ABCDEF", "#123456")

    def test_bounds(self):
        for pair in (("#FF0000", "#00FF00"), ("#777777", "#FFFFFF"), ("#000", "#111")):
            assert 1.0 <= contrast_ratio(*pair) <= 21.0

    def test_from_luminance(self):
        assert contrast_ratio_from_luminance(1.0, 0.0) == 21.0
        assert contrast_ratio_from_luminance(0.0, 1.0) == 21.0


class TestDarkText:

    def test_white_needs_dark_text(self):
        assert needs_dark_text("#FFFFFF")
        assert needs_dark_text("#FFFF00")

    def test_black_needs_light_text(self):
        assert not needs_dark_text("#000000")
        assert not needs_dark_text("#0000FF")


class TestWcagRating:

    @pytest.mark.parametrize("ratio,level", [
        (21.0, "AAA"), (7.0, "AAA"), (6.99, "AA"), (4.5, "AA"),
        (4.49, "AA Large"), (3.0, "AA Large"), (2.99, "Fail"), (1.0, "Fail"),
    ])
    def test_levels(self, ratio, level):
        assert wcag_rating(ratio) == level
