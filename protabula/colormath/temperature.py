# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Perceived color temperature of surface colors.

This is a heuristic approximation, not a physical measurement: correlated
color temperature only exists for light sources. The estimate maps how
warm or cool a paint color reads onto the familiar Kelvin scale:

- Warm (reds, oranges, yellows): below 4200K
- Neutral (greys, muted colors): 4200K-5800K
- Cool (blues, cyans): above 5800K

Inputs are CIE Lab coordinates. The b* axis (blue → yellow) carries most
of the warmth, positive a* (red) adds to it. Low-chroma, very dark and
very light colors are pulled toward 5000K.

Exact Kelvin values are approximate and may change between releases;
the ordering (achromatic → neutral, yellow/red → warm, blue → cool) is
the stable part.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from protabula.colormath.cie import hex_to_lab_array
from protabula.colormath.difference import LabLike, as_lab_array
from protabula.schema.color_formats import ColorTemperature, TemperatureClass

MIN_KELVIN = 2700
MAX_KELVIN = 7500


@dataclass(frozen=True)
class TemperatureConfig:
    """Tuning for the temperature heuristic."""

    # Below this chroma a color counts as achromatic
    achromatic_chroma: float = 8.0

    # Achromatic colors: Kelvin from lightness only, kept in a narrow band
    neutral_base_kelvin: float = 4800.0
    neutral_kelvin_per_lightness: float = 12.0  # lighter greys read cooler
    neutral_min_kelvin: float = 4200.0
    neutral_max_kelvin: float = 5400.0

    # Warmth = b* + red_weight * max(a*, 0)
    red_weight: float = 0.5

    # Kelvin = pivot - (linear_slope * w + quadratic_slope * w * |w|)
    pivot_kelvin: float = 5000.0
    linear_slope: float = 25.0
    quadratic_slope: float = 0.15

    # Chroma at which the estimate is no longer damped
    full_chroma: float = 30.0

    # Lightness outside [dark_lightness, light_lightness] is damped,
    # by at most lightness_damping at pure black or white
    dark_lightness: float = 20.0
    light_lightness: float = 85.0
    lightness_damping: float = 0.5

    # Classification boundaries
    warm_below: int = 4200
    cool_above: int = 5800


def _classify(kelvin: int, cfg: TemperatureConfig) -> TemperatureClass:
    if kelvin < cfg.warm_below:
        return TemperatureClass.WARM
    if kelvin > cfg.cool_above:
        return TemperatureClass.COOL
    return TemperatureClass.NEUTRAL


def _lightness_factor(L: float, cfg: TemperatureConfig) -> float:
    """1.0 for mid lightness, falling linearly toward black and white."""
    if L < cfg.dark_lightness:
        excess = (cfg.dark_lightness - max(L, 0.0)) / cfg.dark_lightness
    elif L > cfg.light_lightness:
        excess = (min(L, 100.0) - cfg.light_lightness) / (100.0 - cfg.light_lightness)
    else:
        return 1.0
    return 1.0 - cfg.lightness_damping * excess


def estimate_temperature_from_lab(
    lab: LabLike,
    config: Optional[TemperatureConfig] = None,
) -> ColorTemperature:
    """
    Estimate the perceived temperature of a Lab color.

    Args:
        lab: Lab color (LabColor or (L, a, b) sequence)
        config: Heuristic settings (uses defaults if None)

    Returns:
        ColorTemperature with Kelvin in [2700, 7500]
    """
    cfg = config or TemperatureConfig()
    L, a, b = (float(v) for v in as_lab_array(lab))
    chroma = float(np.hypot(a, b))

    if chroma < cfg.achromatic_chroma:
        kelvin = cfg.neutral_base_kelvin + (L - 50.0) * cfg.neutral_kelvin_per_lightness
        kelvin = min(max(kelvin, cfg.neutral_min_kelvin), cfg.neutral_max_kelvin)
        return ColorTemperature(kelvin=int(round(kelvin)), classification=TemperatureClass.NEUTRAL)

    warmth = b + cfg.red_weight * max(a, 0.0)
    shift = cfg.linear_slope * warmth + cfg.quadratic_slope * warmth * abs(warmth)
    raw_kelvin = cfg.pivot_kelvin - shift

    # Damp toward the pivot for muted, very dark and very light colors
    chroma_factor = min(chroma / cfg.full_chroma, 1.0)
    blend = chroma_factor * _lightness_factor(L, cfg)
    kelvin = cfg.pivot_kelvin + (raw_kelvin - cfg.pivot_kelvin) * blend

    kelvin_int = int(round(min(max(kelvin, MIN_KELVIN), MAX_KELVIN)))
    return ColorTemperature(kelvin=kelvin_int, classification=_classify(kelvin_int, cfg))


def estimate_color_temperature(
    hex_color: str,
    config: Optional[TemperatureConfig] = None,
) -> ColorTemperature:
    """
    Estimate the perceived temperature of a hex color.

    Raises:
        InvalidColorFormat: If ``hex_color`` is not a valid hex color
    """
    return estimate_temperature_from_lab(hex_to_lab_array(hex_color), config)
