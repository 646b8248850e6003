# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""Tests for byte-level and cylindrical color space conversions."""

import numpy as np
import pytest

from protabula.colormath.colorspace import (
    from_linear_rgb,
    hex_to_cmyk,
    hex_to_hsl,
    hex_to_hsv,
    hex_to_linear_rgb,
    hex_to_rgb_percent,
    hex_to_yiq,
    hue_color_family,
    linear_to_srgb,
    rgb_to_cmyk,
    rgb_to_hsl,
    srgb_to_linear,
    to_linear_rgb,
)
from protabula.schema import CMYKColor, HSLColor, RGBColor


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use the linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-12)

    def test_inverse_clamps(self):
        srgb = linear_to_srgb(np.array([-0.5, 1.5]))
        np.testing.assert_allclose(srgb, [0.0, 1.0])

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_byte_roundtrip(self):
        rng = np.random.RandomState(3)
        for r, g, b in rng.randint(0, 256, size=(200, 3)):
            rgb = RGBColor(int(r), int(g), int(b))
            assert from_linear_rgb(to_linear_rgb(rgb)) == rgb

    def test_linear_extremes(self):
        black = hex_to_linear_rgb("#000000")
        white = hex_to_linear_rgb("#FFFFFF")
        assert black.to_tuple() == (0.0, 0.0, 0.0)
        assert white.to_tuple() == pytest.approx((1.0, 1.0, 1.0))


class TestHSL:

    def test_primaries(self):
        assert hex_to_hsl("#FF0000") == HSLColor(0, 100, 50)
        assert hex_to_hsl("#00FF00") == HSLColor(120, 100, 50)
        assert hex_to_hsl("#0000FF") == HSLColor(240, 100, 50)

    def test_achromatic(self):
        assert hex_to_hsl("#000000") == HSLColor(0, 0, 0)
        assert hex_to_hsl("#FFFFFF") == HSLColor(0, 0, 100)
        hsl = hex_to_hsl("#808080")
        assert hsl.h == 0 and hsl.s == 0
        assert hsl.is_achromatic

    def test_orange_red(self):
        assert hex_to_hsl("#FF5733") == HSLColor(11, 100, 60)

    def test_hue_never_360(self):
        # Hue just below 360 must not round up to 360
        hsl = rgb_to_hsl(RGBColor(255, 0, 1))
        assert 0 <= hsl.h < 360


class TestHSV:

    def test_orange_red(self):
        hsv = hex_to_hsv("#FF5733")
        assert hsv.h == 11
        assert hsv.s == pytest.approx(80.0)
        assert hsv.v == pytest.approx(100.0)

    def test_black(self):
        hsv = hex_to_hsv("#000000")
        assert hsv.to_tuple() == (0, 0.0, 0.0)

    def test_two_decimals(self):
        hsv = hex_to_hsv("#123456")
        assert hsv.v == round(0x56 / 255 * 100, 2)


class TestCMYK:

    def test_black_no_division_by_zero(self):
        assert rgb_to_cmyk(RGBColor(0, 0, 0)) == CMYKColor(0, 0, 0, 100)

    def test_white(self):
        assert hex_to_cmyk("#FFFFFF") == CMYKColor(0, 0, 0, 0)

    def test_orange_red(self):
        assert hex_to_cmyk("#FF5733") == CMYKColor(0, 66, 80, 0)

    def test_pure_cyan(self):
        assert hex_to_cmyk("#00FFFF") == CMYKColor(100, 0, 0, 0)


class TestRGBPercentAndYIQ:

    def test_percent(self):
        pct = hex_to_rgb_percent("#FF5733")
        assert pct.to_tuple() == (100.0, 34.12, 20.0)

    def test_yiq_white(self):
        yiq = hex_to_yiq("#FFFFFF")
        assert yiq.y == pytest.approx(255.0, abs=1e-3)
        assert yiq.i == pytest.approx(0.0, abs=1e-3)
        assert yiq.q == pytest.approx(0.0, abs=1e-3)

    def test_yiq_red(self):
        yiq = hex_to_yiq("#FF0000")
        assert yiq.y == pytest.approx(76.245)
        assert yiq.i == pytest.approx(151.98)
        assert yiq.q == pytest.approx(53.805)


class TestHueFamily:

    @pytest.mark.parametrize("hue,family", [
        (0, "Red"), (14, "Red"), (15, "Orange"), (60, "Yellow"),
        (120, "Green"), (180, "Cyan"), (220, "Blue"), (270, "Purple"),
        (300, "Magenta"), (345, "Red"),
    ])
    def test_families(self, hue, family):
        assert hue_color_family(hue) == family

    def test_wraps(self):
        assert hue_color_family(380) == hue_color_family(20)
        assert hue_color_family(-30) == hue_color_family(330)
