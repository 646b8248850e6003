# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Schema definitions for the color core.

All types in this module are immutable (frozen dataclasses).
They are derived from a hex color and discarded after use.
"""

from protabula.schema.catalog import (
    CatalogCategory,
    CatalogColor,
    ColorClassificationInput,
    MoodSimilarColor,
    SimilarColor,
    SimilarColorsResult,
    from_slug,
    to_slug,
)
from protabula.schema.color_formats import (
    CMYKColor,
    ColorComparison,
    ColorFormatBundle,
    ColorTemperature,
    HSLColor,
    HSVColor,
    HunterLabColor,
    LabColor,
    LinearRGBColor,
    LuvColor,
    RGBColor,
    RGBPercent,
    RootColor,
    TemperatureClass,
    XYZColor,
    YIQColor,
)
from protabula.schema.errors import InvalidColorFormat

__all__ = [
    # Errors
    "InvalidColorFormat",
    # Enumerations
    "RootColor",
    "TemperatureClass",
    "CatalogCategory",
    # Color representations
    "RGBColor",
    "LinearRGBColor",
    "RGBPercent",
    "HSLColor",
    "HSVColor",
    "CMYKColor",
    "YIQColor",
    "XYZColor",
    "LabColor",
    "LuvColor",
    "HunterLabColor",
    # Derived results
    "ColorTemperature",
    "ColorFormatBundle",
    "ColorComparison",
    # Catalog
    "CatalogColor",
    "ColorClassificationInput",
    "SimilarColor",
    "SimilarColorsResult",
    "MoodSimilarColor",
    "to_slug",
    "from_slug",
]
