# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Root color classification.

Assigns every color exactly one coarse family (``RootColor``). Three
strategies are tried in order; the first that yields a family wins:

1. Catalog number: for CLASSIC numbers the leading digit encodes the family
2. Display name: color keywords in the name ("Signal yellow", "Pastel rose")
3. HSL heuristic: lightness / saturation / hue bands, with a CIEDE2000
   nearest-anchor vote for muted chromatic colors

The ordering of keywords and bands is load-bearing: "rose" is tested
before "red", brown and beige windows before the plain hue ranges.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

import numpy as np

from protabula.colormath.cie import hex_to_lab_array, srgb_uint8_to_lab
from protabula.colormath.colorspace import rgb_to_hsl
from protabula.colormath.difference import ciede2000_batch
from protabula.colormath.hexcodec import hex_to_rgb
from protabula.schema.catalog import CatalogCategory, ColorClassificationInput
from protabula.schema.color_formats import HSLColor, RootColor

logger = logging.getLogger(__name__)


# =============================================================================
# Tables
# =============================================================================

# Leading digit of a CLASSIC catalog number. 9 is resolved by lightness.
_CLASSIC_DIGITS = {
    "1": RootColor.YELLOW,
    "2": RootColor.ORANGE,
    "3": RootColor.RED,
    "4": RootColor.VIOLET,
    "5": RootColor.BLUE,
    "6": RootColor.GREEN,
    "7": RootColor.GREY,
    "8": RootColor.BROWN,
}

# Order matters: more specific / commonly confused words first
NAME_KEYWORDS = (
    ("yellow", RootColor.YELLOW),
    ("orange", RootColor.ORANGE),
    ("violet", RootColor.VIOLET),
    ("green", RootColor.GREEN),
    ("blue", RootColor.BLUE),
    ("grey", RootColor.GREY),
    ("gray", RootColor.GREY),
    ("brown", RootColor.BROWN),
    ("white", RootColor.WHITE),
    ("black", RootColor.BLACK),
    ("pink", RootColor.PINK),
    ("rose", RootColor.ROSE),
    ("beige", RootColor.BEIGE),
    ("red", RootColor.RED),
)

# Representative catalog colors for the nearest-anchor vote
_ANCHORS = (
    (RootColor.YELLOW, (249, 168, 0)),     # Signal yellow
    (RootColor.ORANGE, (244, 70, 17)),     # Pure orange
    (RootColor.RED, (204, 6, 5)),          # Traffic red
    (RootColor.VIOLET, (146, 78, 125)),    # Signal violet
    (RootColor.BLUE, (34, 113, 179)),      # Sky blue
    (RootColor.GREEN, (87, 166, 57)),      # Yellow green
    (RootColor.GREY, (150, 153, 146)),     # Signal grey
    (RootColor.BROWN, (91, 58, 41)),       # Nut brown
    (RootColor.WHITE, (244, 244, 244)),    # Signal white
    (RootColor.BLACK, (10, 10, 10)),       # Jet black
    (RootColor.PINK, (234, 137, 154)),     # Light pink
    (RootColor.ROSE, (211, 110, 112)),     # Rose
    (RootColor.BEIGE, (194, 176, 120)),    # Beige
)

_ANCHOR_COLORS = tuple(color for color, _ in _ANCHORS)
_ANCHOR_LABS = srgb_uint8_to_lab(np.array([rgb for _, rgb in _ANCHORS], dtype=np.uint8))


@dataclass(frozen=True)
class ClassifierConfig:
    """Band thresholds for the HSL heuristic (hue in degrees, S/L in percent)."""

    # Achromatic split
    achromatic_saturation: int = 10   # S below this has no usable hue
    white_lightness: int = 85         # L above this is white
    black_lightness: int = 15         # L below this is black

    # CLASSIC digit 9: white at or above this lightness, black below
    classic_white_lightness: int = 50

    # Brown: orange-red hue, moderate saturation, low lightness
    brown_hue: tuple[int, int] = (10, 50)
    brown_saturation: tuple[int, int] = (15, 70)
    brown_lightness: tuple[int, int] = (10, 45)

    # Beige: yellow-orange hue, low saturation, high lightness
    beige_hue: tuple[int, int] = (25, 65)
    beige_saturation: tuple[int, int] = (10, 45)
    beige_lightness: tuple[int, int] = (55, 90)

    # Pink: magenta-red hue at high lightness (hue wraps through 0)
    pink_hue_from: int = 290
    pink_hue_to: int = 15
    pink_min_lightness: int = 70

    # Rose: magenta-red hue at medium lightness, not fully saturated
    rose_hue_from: int = 320
    rose_hue_to: int = 10
    rose_lightness: tuple[int, int] = (40, 69)
    rose_max_saturation: int = 70

    # Muted chromatic colors are settled by nearest anchor
    muted_saturation: int = 20

    # Hue ranges for everything else, upper bounds exclusive
    hue_ranges: tuple[tuple[int, RootColor], ...] = (
        (15, RootColor.RED),
        (45, RootColor.ORANGE),
        (70, RootColor.YELLOW),
        (170, RootColor.GREEN),
        (260, RootColor.BLUE),
        (330, RootColor.VIOLET),
        (360, RootColor.RED),
    )


def _within(value: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= value <= bounds[1]


def _hue_wraps(hue: int, start: int, end: int) -> bool:
    """True if hue lies in the arc start → 360/0 → end."""
    return hue >= start or hue <= end


# =============================================================================
# Strategy 1: catalog number
# =============================================================================


def _leading_digit(number: str) -> Optional[str]:
    text = number.strip()
    if text[:3].upper() == "RAL":
        text = text[3:].strip()
    if text and text[0].isdigit():
        return text[0]
    return None


def classify_by_catalog_number(
    number: Optional[str],
    hex_color: str,
    config: Optional[ClassifierConfig] = None,
) -> RootColor:
    """
    Root color from the leading digit of a CLASSIC catalog number.

    Digit 9 (whites and blacks) is split by HSL lightness. Returns
    ``RootColor.UNKNOWN`` when there is no usable leading digit.
    """
    if not number:
        return RootColor.UNKNOWN

    digit = _leading_digit(number)
    if digit is None:
        return RootColor.UNKNOWN

    if digit == "9":
        cfg = config or ClassifierConfig()
        hsl = rgb_to_hsl(hex_to_rgb(hex_color))
        if hsl.l >= cfg.classic_white_lightness:
            return RootColor.WHITE
        return RootColor.BLACK

    return _CLASSIC_DIGITS.get(digit, RootColor.UNKNOWN)


# =============================================================================
# Strategy 2: display name
# =============================================================================


def classify_by_name(name: Optional[str]) -> RootColor:
    """
    Root color from keywords in a display name.

    Keywords match whole words only. A last-word pass runs first
    ("Green beige" is beige), then a pass over any word ("Blue lilac" is
    blue, "Weathered bronze" and "Primrose" match nothing).
    Returns ``RootColor.UNKNOWN`` when no keyword matches.
    """
    if name is None or not name.strip():
        return RootColor.UNKNOWN

    lowered = name.strip().lower()

    for keyword, color in NAME_KEYWORDS:
        if re.search(rf"\b{keyword}$", lowered):
            return color

    for keyword, color in NAME_KEYWORDS:
        if re.search(rf"\b{keyword}\b", lowered):
            return color

    return RootColor.UNKNOWN


# =============================================================================
# Strategy 3: HSL heuristic
# =============================================================================


def nearest_anchor(hex_color: str) -> RootColor:
    """Root color whose anchor is closest by CIEDE2000."""
    distances = ciede2000_batch(hex_to_lab_array(hex_color), _ANCHOR_LABS)
    return _ANCHOR_COLORS[int(np.argmin(distances))]


def _classify_hsl(hsl: HSLColor, hex_color: str, cfg: ClassifierConfig) -> RootColor:
    h, s, l = hsl.h, hsl.s, hsl.l  # noqa: E741

    if s < cfg.achromatic_saturation:
        if l > cfg.white_lightness:
            return RootColor.WHITE
        if l < cfg.black_lightness:
            return RootColor.BLACK
        return RootColor.GREY

    if (
        _within(h, cfg.brown_hue)
        and _within(s, cfg.brown_saturation)
        and _within(l, cfg.brown_lightness)
    ):
        return RootColor.BROWN

    if (
        _within(h, cfg.beige_hue)
        and _within(s, cfg.beige_saturation)
        and _within(l, cfg.beige_lightness)
    ):
        return RootColor.BEIGE

    if _hue_wraps(h, cfg.pink_hue_from, cfg.pink_hue_to) and l >= cfg.pink_min_lightness:
        return RootColor.PINK

    if (
        _hue_wraps(h, cfg.rose_hue_from, cfg.rose_hue_to)
        and _within(l, cfg.rose_lightness)
        and s <= cfg.rose_max_saturation
    ):
        return RootColor.ROSE

    if s < cfg.muted_saturation:
        return nearest_anchor(hex_color)

    for upper, color in cfg.hue_ranges:
        if h < upper:
            return color
    return RootColor.RED


def classify_by_hsl(
    hex_color: str,
    config: Optional[ClassifierConfig] = None,
) -> RootColor:
    """
    Root color from HSL bands alone.

    Total: never returns ``RootColor.UNKNOWN`` for a valid hex color.
    """
    cfg = config or ClassifierConfig()
    return _classify_hsl(rgb_to_hsl(hex_to_rgb(hex_color)), hex_color, cfg)


# =============================================================================
# Public entry point
# =============================================================================


def classify(
    context: ColorClassificationInput,
    config: Optional[ClassifierConfig] = None,
) -> RootColor:
    """
    Assign a root color using catalog number, name, then HSL bands.

    Args:
        context: Hex plus optional name / category / number
        config: Heuristic thresholds (uses defaults if None)

    Returns:
        A RootColor other than UNKNOWN

    Raises:
        InvalidColorFormat: If ``context.hex`` is not a valid hex color
    """
    # Validate once up front so a bad hex never hides behind a name match
    hex_to_rgb(context.hex)

    if context.category is CatalogCategory.CLASSIC and context.number:
        from_number = classify_by_catalog_number(context.number, context.hex, config)
        if from_number is not RootColor.UNKNOWN:
            logger.debug("Root color of %s from catalog number %s: %s",
                         context.hex, context.number, from_number.value)
            return from_number

    from_name = classify_by_name(context.name)
    if from_name is not RootColor.UNKNOWN:
        logger.debug("Root color of %s from name %r: %s",
                     context.hex, context.name, from_name.value)
        return from_name

    from_hsl = classify_by_hsl(context.hex, config)
    logger.debug("Root color of %s from HSL bands: %s", context.hex, from_hsl.value)
    return from_hsl


def classify_root_color(
    hex_color: str,
    name: Optional[str] = None,
    category: Optional[CatalogCategory] = None,
    number: Optional[str] = None,
    *,
    config: Optional[ClassifierConfig] = None,
) -> RootColor:
    """Convenience wrapper around ``classify`` taking loose arguments."""
    return classify(
        ColorClassificationInput(hex=hex_color, name=name, category=category, number=number),
        config,
    )
