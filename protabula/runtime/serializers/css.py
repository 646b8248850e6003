# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
CSS-style display strings for a ColorFormatBundle.

These are the strings shown next to a swatch and copied by users,
e.g. ``rgb(255, 87, 51)`` or ``hsl(11, 100%, 60%)``.
"""

from __future__ import annotations

import json

from protabula.runtime.serializers.base import SerializerFormat, format_number
from protabula.schema import ColorFormatBundle


def rgb_string(bundle: ColorFormatBundle) -> str:
    rgb = bundle.rgb
    return f"rgb({rgb.r}, {rgb.g}, {rgb.b})"


def hsl_string(bundle: ColorFormatBundle) -> str:
    hsl = bundle.hsl
    return f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)"


def hsv_string(bundle: ColorFormatBundle) -> str:
    hsv = bundle.hsv
    return f"hsv({hsv.h}, {format_number(hsv.s)}%, {format_number(hsv.v)}%)"


def cmyk_string(bundle: ColorFormatBundle) -> str:
    cmyk = bundle.cmyk
    return f"cmyk({cmyk.c}%, {cmyk.m}%, {cmyk.y}%, {cmyk.k}%)"


def lab_string(bundle: ColorFormatBundle) -> str:
    lab = bundle.lab
    return f"lab({format_number(lab.L)}% {format_number(lab.a)} {format_number(lab.b)})"


def to_css_strings(bundle: ColorFormatBundle) -> dict[str, str]:
    """
    All display strings for a bundle.

    Returns:
        Mapping with keys hex, rgb, hsl, hsv, cmyk, lab
    """
    return {
        "hex": bundle.hex,
        "rgb": rgb_string(bundle),
        "hsl": hsl_string(bundle),
        "hsv": hsv_string(bundle),
        "cmyk": cmyk_string(bundle),
        "lab": lab_string(bundle),
    }


def to_css_json(
    bundle: ColorFormatBundle,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Display strings as a JSON object."""
    data = to_css_strings(bundle)
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))
