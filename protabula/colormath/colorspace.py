# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Byte-level and cylindrical color space conversions.

Covers sRGB <-> linear RGB, HSL, HSV, CMYK, RGB percent, YIQ and decimal.
The CIE chain (XYZ, Lab, Luv, Hunter Lab) lives in ``protabula.colormath.cie``.

All functions are pure and total over valid RGB: any byte triple is a
valid color. Input validation happens once, in the hex codec.

Rounding uses Python's ``round`` (half-to-even), applied only to the
outward-facing value types.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from protabula.colormath.hexcodec import hex_to_rgb
from protabula.schema.color_formats import (
    CMYKColor,
    HSLColor,
    HSVColor,
    LinearRGBColor,
    RGBColor,
    RGBPercent,
    YIQColor,
)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: value / 12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Input is clamped to [0,1] first.
    """
    linear = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


def rgb_to_array(rgb: RGBColor) -> NDArray[np.float64]:
    """RGB bytes as a (3,) float array in [0, 1]."""
    return np.array([rgb.r, rgb.g, rgb.b], dtype=np.float64) / 255.0


def to_linear_rgb(rgb: RGBColor) -> LinearRGBColor:
    """Linearize an sRGB byte triple."""
    r, g, b = srgb_to_linear(rgb_to_array(rgb))
    return LinearRGBColor(r=float(r), g=float(g), b=float(b))


def from_linear_rgb(linear: LinearRGBColor) -> RGBColor:
    """
    Encode linear RGB back to sRGB bytes.

    Rounds to the nearest byte so that bytes survive a
    to_linear_rgb / from_linear_rgb roundtrip unchanged.
    """
    srgb = linear_to_srgb(np.array(linear.to_tuple(), dtype=np.float64))
    r, g, b = np.clip(np.rint(srgb * 255.0), 0, 255).astype(int)
    return RGBColor(r=int(r), g=int(g), b=int(b))


# =============================================================================
# HSL / HSV
# =============================================================================


def _hue_degrees(
    r: float, g: float, b: float, max_c: float, delta: float
) -> float:
    """Hue in degrees for a chromatic color (delta > 0)."""
    if max_c == r:
        return ((g - b) / delta + (6 if g < b else 0)) * 60
    if max_c == g:
        return ((b - r) / delta + 2) * 60
    return ((r - g) / delta + 4) * 60


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """
    Convert RGB to HSL.

    Returns:
        HSLColor with hue in integer degrees [0, 360) and saturation /
        lightness as integer percentages. Achromatic colors get h=0, s=0.
    """
    r, g, b = rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    h = 0.0
    s = 0.0
    lightness = (max_c + min_c) / 2

    if delta != 0:
        if lightness > 0.5:
            s = delta / (2 - max_c - min_c)
        else:
            s = delta / (max_c + min_c)
        h = _hue_degrees(r, g, b, max_c, delta)

    return HSLColor(
        h=int(round(h)) % 360,
        s=int(round(s * 100)),
        l=int(round(lightness * 100)),
    )


def rgb_to_hsv(rgb: RGBColor) -> HSVColor:
    """
    Convert RGB to HSV.

    Returns:
        HSVColor with integer hue and saturation / value percentages
        rounded to 2 decimals.
    """
    r, g, b = rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    h = _hue_degrees(r, g, b, max_c, delta) if delta != 0 else 0.0
    s = 0.0 if max_c == 0 else delta / max_c

    return HSVColor(
        h=int(round(h)) % 360,
        s=round(s * 100, 2),
        v=round(max_c * 100, 2),
    )


# =============================================================================
# CMYK / RGB percent / YIQ
# =============================================================================


def rgb_to_cmyk(rgb: RGBColor) -> CMYKColor:
    """
    Convert RGB to naive (profile-free) CMYK.

    Pure black short-circuits to (0, 0, 0, 100) to avoid dividing by zero.
    """
    r, g, b = rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0
    k = 1 - max(r, g, b)

    if k >= 1:
        return CMYKColor(c=0, m=0, y=0, k=100)

    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)

    return CMYKColor(
        c=int(round(c * 100)),
        m=int(round(m * 100)),
        y=int(round(y * 100)),
        k=int(round(k * 100)),
    )


def rgb_to_percent(rgb: RGBColor) -> RGBPercent:
    """Each channel as a percentage of 255, 2 decimals."""
    return RGBPercent(
        r=round(rgb.r / 255.0 * 100, 2),
        g=round(rgb.g / 255.0 * 100, 2),
        b=round(rgb.b / 255.0 * 100, 2),
    )


# NTSC luma / chroma matrix
_YIQ_MATRIX = np.array([
    [0.299, 0.587, 0.114],
    [0.596, -0.274, -0.322],
    [0.211, -0.523, 0.312],
], dtype=np.float64)


def rgb_to_yiq(rgb: RGBColor) -> YIQColor:
    """Convert RGB to YIQ, scaled back by 255 and rounded to 3 decimals."""
    y, i, q = _YIQ_MATRIX @ rgb_to_array(rgb) * 255.0
    return YIQColor(y=round(float(y), 3), i=round(float(i), 3), q=round(float(q), 3))


# =============================================================================
# Hue family
# =============================================================================

# Upper bounds (exclusive) in degrees
_HUE_FAMILIES = (
    (15, "Red"),
    (45, "Orange"),
    (75, "Yellow"),
    (150, "Green"),
    (195, "Cyan"),
    (255, "Blue"),
    (285, "Purple"),
    (330, "Magenta"),
)


def hue_color_family(hue: int) -> str:
    """
    Name the hue family of a hue angle.

    Any integer is accepted and wrapped into [0, 360) first.
    """
    hue = hue % 360
    for upper, family in _HUE_FAMILIES:
        if hue < upper:
            return family
    return "Red"


# =============================================================================
# Convenience: hex → representation
# =============================================================================


def hex_to_hsl(hex_color: str) -> HSLColor:
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hex_to_hsv(hex_color: str) -> HSVColor:
    return rgb_to_hsv(hex_to_rgb(hex_color))


def hex_to_cmyk(hex_color: str) -> CMYKColor:
    return rgb_to_cmyk(hex_to_rgb(hex_color))


def hex_to_rgb_percent(hex_color: str) -> RGBPercent:
    return rgb_to_percent(hex_to_rgb(hex_color))


def hex_to_yiq(hex_color: str) -> YIQColor:
    return rgb_to_yiq(hex_to_rgb(hex_color))


def hex_to_linear_rgb(hex_color: str) -> LinearRGBColor:
    return to_linear_rgb(hex_to_rgb(hex_color))
