# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Photometric quantities: relative luminance, LRV and WCAG contrast.

Luminance uses Rec. 709 coefficients over linear RGB, which is the
WCAG 2.x definition of relative luminance.
"""

from __future__ import annotations

import numpy as np

from protabula.colormath.colorspace import rgb_to_array, srgb_to_linear
from protabula.colormath.hexcodec import hex_to_rgb
from protabula.schema.color_formats import RGBColor

# Rec. 709 luminance coefficients
_REC709 = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

# Luminance above which overlay text should be dark
DARK_TEXT_THRESHOLD = 0.179

# WCAG 2.x contrast thresholds, highest first
_WCAG_LEVELS = (
    (7.0, "AAA"),
    (4.5, "AA"),
    (3.0, "AA Large"),
)


def luminance_from_rgb(rgb: RGBColor) -> float:
    """Relative luminance (0 = black, 1 = white) of an RGB triple."""
    return float(_REC709 @ srgb_to_linear(rgb_to_array(rgb)))


def relative_luminance(hex_color: str) -> float:
    """
    Relative luminance of a hex color.

    Returns:
        Perceptually weighted brightness in [0, 1]
    """
    return luminance_from_rgb(hex_to_rgb(hex_color))


def light_reflectance_value(hex_color: str) -> float:
    """
    Light Reflectance Value (LRV) of a hex color.

    LRV is luminance expressed as a percentage, used in architecture and
    interior design: 0 absorbs all light, 100 reflects all of it.

    Returns:
        LRV in [0, 100], 1 decimal
    """
    return round(relative_luminance(hex_color) * 100, 1)


def needs_dark_text(hex_color: str) -> bool:
    """True if text drawn over this color should be dark rather than light."""
    return relative_luminance(hex_color) > DARK_TEXT_THRESHOLD


def contrast_ratio_from_luminance(l1: float, l2: float) -> float:
    """WCAG contrast ratio for two luminances, 2 decimals, in [1, 21]."""
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return round((lighter + 0.05) / (darker + 0.05), 2)


def contrast_ratio(hex1: str, hex2: str) -> float:
    """
    WCAG contrast ratio between two hex colors.

    Symmetric in its arguments. Black on white is 21.0.
    """
    return contrast_ratio_from_luminance(
        relative_luminance(hex1), relative_luminance(hex2)
    )


def wcag_rating(ratio: float) -> str:
    """
    WCAG conformance level reached by a contrast ratio.

    AA needs 4.5:1 for normal text (3:1 for large text), AAA needs 7:1.
    """
    for minimum, level in _WCAG_LEVELS:
        if ratio >= minimum:
            return level
    return "Fail"
