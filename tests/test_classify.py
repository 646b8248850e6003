# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""Tests for root color classification."""

import random

import pytest

from protabula.colormath.classify import (
    ClassifierConfig,
    classify,
    classify_by_catalog_number,
    classify_by_hsl,
    classify_by_name,
    classify_root_color,
    nearest_anchor,
)
from protabula.schema import (
    CatalogCategory,
    ColorClassificationInput,
    InvalidColorFormat,
    RootColor,
)


class TestHSLBands:

    @pytest.mark.parametrize("hex_color,expected", [
        ("#FF0000", RootColor.RED),
        ("#0000FF", RootColor.BLUE),
        ("#00FF00", RootColor.GREEN),
        ("#FFFF00", RootColor.YELLOW),
        ("#FFA500", RootColor.ORANGE),
        ("#800080", RootColor.VIOLET),
        ("#FF5733", RootColor.RED),
    ])
    def test_hue_families(self, hex_color, expected):
        assert classify_root_color(hex_color) is expected

    @pytest.mark.parametrize("hex_color,expected", [
        ("#FFFFFF", RootColor.WHITE),
        ("#F4F4F4", RootColor.WHITE),
        ("#000000", RootColor.BLACK),
        ("#0A0A0A", RootColor.BLACK),
        ("#808080", RootColor.GREY),
    ])
    def test_achromatic(self, hex_color, expected):
        assert classify_root_color(hex_color) is expected

    def test_brown(self):
        assert classify_root_color("#6F4E37") is RootColor.BROWN

    def test_beige(self):
        assert classify_root_color("#D8C8A8") is RootColor.BEIGE

    def test_pink(self):
        assert classify_root_color("#FFC0CB") is RootColor.PINK

    def test_rose(self):
        assert classify_root_color("#D36E70") is RootColor.ROSE

    def test_muted_uses_nearest_anchor(self):
        # S=13: too grey for hue bands, too colorful for the achromatic split
        assert classify_by_hsl("#708090") is nearest_anchor("#708090")

    def test_anchor_self_match(self):
        assert nearest_anchor("#CC0605") is RootColor.RED
        assert nearest_anchor("#2271B3") is RootColor.BLUE

    def test_custom_config(self):
        cfg = ClassifierConfig(achromatic_saturation=101)
        assert classify_by_hsl("#FF0000", cfg) is RootColor.GREY

    def test_totality(self):
        rng = random.Random(42)
        for _ in range(1000):
            value = "#" + "".join(f"{rng.randrange(256):02X}" for _ in range(3))
            assert classify_root_color(value) is not RootColor.UNKNOWN


class TestNameRule:

    @pytest.mark.parametrize("name,expected", [
        ("Pastel Rose", RootColor.ROSE),
        ("Signal Red", RootColor.RED),
        ("Green beige", RootColor.BEIGE),
        ("Blue lilac", RootColor.BLUE),
        ("Signal grey", RootColor.GREY),
        ("Grey 4", RootColor.GREY),
        ("Traffic white", RootColor.WHITE),
        ("Jet black", RootColor.BLACK),
        ("Light pink", RootColor.PINK),
        ("Pure orange", RootColor.ORANGE),
        ("Red violet", RootColor.VIOLET),
        ("Olive yellow", RootColor.YELLOW),
        ("Nut brown", RootColor.BROWN),
        ("Sky blue", RootColor.BLUE),
    ])
    def test_keywords(self, name, expected):
        assert classify_by_name(name) is expected

    @pytest.mark.parametrize("name", [None, "", "   ", "Lilac", "Anthracite"])
    def test_no_match(self, name):
        assert classify_by_name(name) is RootColor.UNKNOWN

    @pytest.mark.parametrize("name", ["Weathered bronze", "Stone coloured", "Telegrey 4", "Primrose"])
    def test_keyword_inside_word_ignored(self, name):
        assert classify_by_name(name) is RootColor.UNKNOWN

    def test_keyword_inside_word_falls_back_to_hsl(self):
        assert classify_root_color("#0000FF", name="Weathered bronze") is RootColor.BLUE

    def test_case_insensitive(self):
        assert classify_by_name("SIGNAL YELLOW") is RootColor.YELLOW

    def test_name_beats_hsl(self):
        assert classify_root_color("#FF0000", name="Signal grey") is RootColor.GREY

    def test_unmatched_name_falls_through(self):
        assert classify_root_color("#0000FF", name="Lilac") is RootColor.BLUE


class TestCatalogNumberRule:

    @pytest.mark.parametrize("number,expected", [
        ("1003", RootColor.YELLOW),
        ("2004", RootColor.ORANGE),
        ("RAL 3020", RootColor.RED),
        ("4008", RootColor.VIOLET),
        ("5015", RootColor.BLUE),
        ("6018", RootColor.GREEN),
        ("7004", RootColor.GREY),
        ("8011", RootColor.BROWN),
    ])
    def test_leading_digit(self, number, expected):
        assert classify_by_catalog_number(number, "#808080") is expected

    def test_nine_split_by_lightness(self):
        assert classify_by_catalog_number("9005", "#0A0A0A") is RootColor.BLACK
        assert classify_by_catalog_number("9003", "#F4F4F4") is RootColor.WHITE

    @pytest.mark.parametrize("number", [None, "", "RAL", "X100", "0123"])
    def test_unusable(self, number):
        assert classify_by_catalog_number(number, "#808080") is RootColor.UNKNOWN

    def test_number_beats_name(self):
        result = classify_root_color(
            "#FF0000", name="Signal red", category=CatalogCategory.CLASSIC, number="5015",
        )
        assert result is RootColor.BLUE

    def test_only_classic_numbers(self):
        result = classify_root_color(
            "#0000FF", category=CatalogCategory.DESIGN_PLUS, number="3020",
        )
        assert result is RootColor.BLUE

    def test_classic_without_number(self):
        result = classify_root_color("#0000FF", category=CatalogCategory.CLASSIC)
        assert result is RootColor.BLUE

    def test_classic_unusable_number_falls_through(self):
        result = classify_root_color(
            "#00FF00", category=CatalogCategory.CLASSIC, number="X1",
        )
        assert result is RootColor.GREEN


class TestClassifyInput:

    def test_input_object(self):
        context = ColorClassificationInput(hex="#FFFF00", name="Zinc yellow")
        assert classify(context) is RootColor.YELLOW

    def test_invalid_hex_raises_even_with_name(self):
        with pytest.raises(InvalidColorFormat):
            classify_root_color("#GG0000", name="Signal red")
