# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Protabula -- Color science core for a color reference catalog.

Deterministic conversions between color representations, photometric
quantities, perceptual color difference and root color classification.

Quick start::

    from protabula import ColorFormatBundle, classify_root_color

    bundle = ColorFormatBundle.from_hex("#FF5733")
    bundle.lab        # LabColor(L=..., a=..., b=...)
    bundle.lrv        # 28.3
    classify_root_color("#FF5733")   # RootColor.RED
"""

from __future__ import annotations

__version__ = "1.0.0"

from protabula.colormath import (
    classify_root_color,
    compare_colors,
    contrast_ratio,
    delta_e,
    estimate_color_temperature,
    light_reflectance_value,
    normalize_hex,
    rank_similar,
    relative_luminance,
)
from protabula.schema import (
    CatalogCategory,
    CatalogColor,
    ColorFormatBundle,
    InvalidColorFormat,
    RootColor,
)

__all__ = [
    # Core API
    "normalize_hex",
    "ColorFormatBundle",
    "relative_luminance",
    "light_reflectance_value",
    "contrast_ratio",
    "delta_e",
    "estimate_color_temperature",
    "classify_root_color",
    "rank_similar",
    "compare_colors",
    # Types (commonly needed)
    "RootColor",
    "CatalogColor",
    "CatalogCategory",
    "InvalidColorFormat",
    # Version
    "__version__",
]
