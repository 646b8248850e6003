# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Color science core for Protabula.

Deterministic, side-effect-free color math: hex parsing, color space
conversions, photometry, CIEDE2000, temperature estimates, root color
classification and similar-color ranking.
"""

from protabula.colormath.bundle import build_format_bundle, clear_bundle_cache
from protabula.colormath.classify import ClassifierConfig, classify, classify_root_color
from protabula.colormath.compare import compare_colors
from protabula.colormath.difference import ciede2000, delta_e, delta_e_interpretation
from protabula.colormath.hexcodec import hex_to_rgb, normalize_hex, rgb_to_hex
from protabula.colormath.photometry import (
    contrast_ratio,
    light_reflectance_value,
    needs_dark_text,
    relative_luminance,
)
from protabula.colormath.similarity import find_similar_by_category, rank_similar
from protabula.colormath.temperature import TemperatureConfig, estimate_color_temperature

__all__ = [
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "build_format_bundle",
    "clear_bundle_cache",
    "relative_luminance",
    "light_reflectance_value",
    "needs_dark_text",
    "contrast_ratio",
    "ciede2000",
    "delta_e",
    "delta_e_interpretation",
    "estimate_color_temperature",
    "TemperatureConfig",
    "classify",
    "classify_root_color",
    "ClassifierConfig",
    "rank_similar",
    "find_similar_by_category",
    "compare_colors",
]
