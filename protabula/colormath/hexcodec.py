# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Hex color parsing and normalization.

This is the only validation boundary of the color core. Everything
downstream assumes its input went through ``normalize_hex`` first.

Accepted forms: ``RGB``, ``#RGB``, ``RRGGBB``, ``#RRGGBB``, any case,
surrounding whitespace ignored. Canonical form: ``#RRGGBB`` uppercase.
"""

from __future__ import annotations

import logging
import string

from protabula.schema.color_formats import RGBColor
from protabula.schema.errors import InvalidColorFormat

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


def normalize_hex(value: str) -> str:
    """
    Normalize a hex color string to ``#RRGGBB``.

    Args:
        value: Hex string like "abc", "#ABC", "aabbcc" or " #AaBbCc "

    Returns:
        Canonical hex string like "#AABBCC"

    Raises:
        InvalidColorFormat: Wrong length or non-hex characters
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value, "expected a string")

    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]

    # Expand shorthand: ABC -> AABBCC
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    if len(digits) != 6:
        logger.debug("Rejected hex color %r: bad length", value)
        raise InvalidColorFormat(
            value, "expected 3 or 6 hex characters (e.g. #ABC or #AABBCC)"
        )

    if not all(ch in _HEX_DIGITS for ch in digits):
        logger.debug("Rejected hex color %r: non-hex characters", value)
        raise InvalidColorFormat(value, "contains non-hex characters")

    return "#" + digits.upper()


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Parse a hex color into an RGB byte triple.

    Raises:
        InvalidColorFormat: If ``hex_color`` is not a valid hex color
    """
    normalized = normalize_hex(hex_color)
    return RGBColor(
        r=int(normalized[1:3], 16),
        g=int(normalized[3:5], 16),
        b=int(normalized[5:7], 16),
    )


def rgb_to_hex(rgb: RGBColor) -> str:
    """Format an RGB triple as canonical ``#RRGGBB``."""
    return f"#{rgb.r:02X}{rgb.g:02X}{rgb.b:02X}"


def parse_hex_to_float(hex_color: str) -> tuple[float, float, float]:
    """Parse a hex color into sRGB floats in [0, 1]."""
    rgb = hex_to_rgb(hex_color)
    return (rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0)


def hex_to_decimal(hex_color: str) -> int:
    """Integer value of the 24-bit hex, e.g. "#FF5733" -> 16734003."""
    return int(normalize_hex(hex_color)[1:], 16)
