# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""Side-by-side comparison of two colors."""

from __future__ import annotations

from typing import Optional

from protabula.colormath.difference import delta_e, delta_e_interpretation
from protabula.colormath.hexcodec import normalize_hex
from protabula.colormath.photometry import contrast_ratio
from protabula.colormath.temperature import TemperatureConfig, estimate_color_temperature
from protabula.schema.color_formats import ColorComparison


def compare_colors(
    hex1: str,
    hex2: str,
    temperature_config: Optional[TemperatureConfig] = None,
) -> ColorComparison:
    """
    Compare two colors: ΔE, its interpretation, contrast and temperatures.

    Raises:
        InvalidColorFormat: If either input is not a valid hex color
    """
    first = normalize_hex(hex1)
    second = normalize_hex(hex2)
    distance = delta_e(first, second)
    return ColorComparison(
        hex1=first,
        hex2=second,
        delta_e=distance,
        interpretation=delta_e_interpretation(distance),
        contrast_ratio=contrast_ratio(first, second),
        temperature1=estimate_color_temperature(first, temperature_config),
        temperature2=estimate_color_temperature(second, temperature_config),
    )
