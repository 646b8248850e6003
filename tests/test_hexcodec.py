# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""Tests for hex parsing and normalization."""

import random

import pytest

from protabula.colormath.hexcodec import (
    hex_to_decimal,
    hex_to_rgb,
    normalize_hex,
    parse_hex_to_float,
    rgb_to_hex,
)
from protabula.schema import InvalidColorFormat, RGBColor


class TestNormalizeHex:

    @pytest.mark.parametrize("value", ["abc", "#abc", "AABBCC", "#aabbcc", "  #AaBbCc \n"])
    def test_equivalent_forms(self, value):
        assert normalize_hex(value) == "#AABBCC"

    def test_idempotent(self):
        for value in ("f0a", "#123456", "DeAdBe"):
            once = normalize_hex(value)
            assert normalize_hex(once) == once

    @pytest.mark.parametrize("value", ["12345", "GGGGGG", "", "#", "#12", "1234567", "#ab-cde"])
    def test_invalid_rejected(self, value):
        with pytest.raises(InvalidColorFormat):
            normalize_hex(value)

    def test_error_carries_input(self):
        with pytest.raises(InvalidColorFormat) as exc_info:
            normalize_hex("GGGGGG")
        assert exc_info.value.value == "GGGGGG"
        assert "non-hex" in exc_info.value.reason

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_hex("xyz")

    def test_non_string_rejected(self):
        with pytest.raises(InvalidColorFormat):
            normalize_hex(0xFFFFFF)

    def test_non_ascii_digits_rejected(self):
        # Full-width digits are not hex digits
        with pytest.raises(InvalidColorFormat):
            normalize_hex("１２３４５６")


class TestRgbRoundtrip:

    def test_parse(self):
        assert hex_to_rgb("#FF5733") == RGBColor(255, 87, 51)

    def test_shorthand_parse(self):
        assert hex_to_rgb("#f80") == RGBColor(255, 136, 0)

    def test_format(self):
        assert rgb_to_hex(RGBColor(255, 87, 51)) == "#FF5733"
        assert rgb_to_hex(RGBColor(0, 0, 0)) == "#000000"

    def test_random_roundtrip(self):
        rng = random.Random(7)
        for _ in range(500):
            rgb = RGBColor(rng.randrange(256), rng.randrange(256), rng.randrange(256))
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb

    def test_rgb_hex_property_matches(self):
        rgb = RGBColor(18, 52, 86)
        assert rgb.hex == rgb_to_hex(rgb) == "#123456"


class TestDerivedParsing:

    def test_float_parse(self):
        r, g, b = parse_hex_to_float("#FF0033")
        assert r == pytest.approx(1.0)
        assert g == pytest.approx(0.0)
        assert b == pytest.approx(0.2)

    def test_decimal(self):
        assert hex_to_decimal("#FF5733") == 16734003
        assert hex_to_decimal("#000000") == 0
        assert hex_to_decimal("fff") == 16777215
