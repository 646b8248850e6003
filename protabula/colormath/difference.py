# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Perceptual color difference (CIEDE2000).

Reference:
- Sharma, Wu, Dalal (2005), "The CIEDE2000 Color-Difference Formula:
  Implementation Notes, Supplementary Test Data, and Mathematical
  Observations"

Reference thresholds (CIEDE2000 ΔE, 0-100 scale):
- ΔE < 1: imperceptible
- ΔE < 2: just noticeable on close inspection
- ΔE < 5: small difference
- ΔE < 10: clearly different
- ΔE >= 10: very different colors
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from protabula.colormath.cie import hex_to_lab_array
from protabula.schema.color_formats import LabColor

LabLike = Union[LabColor, Sequence[float], NDArray[np.float64]]

# Upper bounds (exclusive), fixed
_INTERPRETATIONS = (
    (1.0, "Imperceptible"),
    (2.0, "Just noticeable"),
    (5.0, "Small difference"),
    (10.0, "Clear difference"),
)

_POW25_7 = 25.0 ** 7


def as_lab_array(lab: LabLike) -> NDArray[np.float64]:
    if isinstance(lab, LabColor):
        return np.array(lab.to_tuple(), dtype=np.float64)
    return np.asarray(lab, dtype=np.float64)


def ciede2000_array(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
    kL: float = 1.0,
    kC: float = 1.0,
    kH: float = 1.0,
) -> NDArray[np.float64]:
    """
    Vectorized CIEDE2000 for arrays of Lab colors.

    Args:
        lab1: Array of shape (..., 3) with (L, a, b)
        lab2: Array broadcastable against lab1
        kL, kC, kH: Parametric weighting factors (1.0 for reference conditions)

    Returns:
        Array of ΔE values with the broadcast leading shape
    """
    lab1 = np.asarray(lab1, dtype=np.float64)
    lab2 = np.asarray(lab2, dtype=np.float64)

    L1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    L2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    # 1. Adjusted a' and chroma
    c_bar = (np.hypot(a1, b1) + np.hypot(a2, b2)) / 2.0
    c_bar7 = c_bar ** 7
    g = 0.5 * (1.0 - np.sqrt(c_bar7 / (c_bar7 + _POW25_7)))

    a1p = (1.0 + g) * a1
    a2p = (1.0 + g) * a2
    c1p = np.hypot(a1p, b1)
    c2p = np.hypot(a2p, b2)

    h1p = np.degrees(np.arctan2(b1, a1p)) % 360.0
    h2p = np.degrees(np.arctan2(b2, a2p)) % 360.0

    # 2. Differences
    delta_Lp = L2 - L1
    delta_Cp = c2p - c1p

    chroma_product = c1p * c2p
    achromatic = chroma_product == 0.0
    dh = h2p - h1p
    delta_hp = np.where(
        achromatic,
        0.0,
        np.where(
            np.abs(dh) <= 180.0,
            dh,
            np.where(dh > 180.0, dh - 360.0, dh + 360.0),
        ),
    )
    delta_Hp = 2.0 * np.sqrt(chroma_product) * np.sin(np.radians(delta_hp / 2.0))

    # 3. Means
    L_bar = (L1 + L2) / 2.0
    C_bar = (c1p + c2p) / 2.0

    h_sum = h1p + h2p
    h_bar = np.where(
        achromatic,
        h_sum,
        np.where(
            np.abs(h1p - h2p) <= 180.0,
            h_sum / 2.0,
            np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
        ),
    )

    # 4. Weighting functions
    t = (
        1.0
        - 0.17 * np.cos(np.radians(h_bar - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * h_bar))
        + 0.32 * np.cos(np.radians(3.0 * h_bar + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * h_bar - 63.0))
    )
    delta_theta = 30.0 * np.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    C_bar7 = C_bar ** 7
    r_c = 2.0 * np.sqrt(C_bar7 / (C_bar7 + _POW25_7))

    L_offset = (L_bar - 50.0) ** 2
    s_l = 1.0 + (0.015 * L_offset) / np.sqrt(20.0 + L_offset)
    s_c = 1.0 + 0.045 * C_bar
    s_h = 1.0 + 0.015 * C_bar * t
    r_t = -np.sin(np.radians(2.0 * delta_theta)) * r_c

    # 5. Combine
    term_L = delta_Lp / (kL * s_l)
    term_C = delta_Cp / (kC * s_c)
    term_H = delta_Hp / (kH * s_h)

    squared = term_L ** 2 + term_C ** 2 + term_H ** 2 + r_t * term_C * term_H
    return np.sqrt(np.maximum(squared, 0.0))


def ciede2000(lab1: LabLike, lab2: LabLike) -> float:
    """
    CIEDE2000 distance between two Lab colors.

    Symmetric, non-negative and zero for identical coordinates.
    Unrounded; use ``delta_e`` for the 2-decimal display value.
    """
    return float(ciede2000_array(as_lab_array(lab1), as_lab_array(lab2)))


def ciede2000_batch(
    reference: LabLike,
    labs: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Distances from one reference Lab color to N Lab colors.

    Args:
        reference: Single Lab color
        labs: Array of shape (N, 3)

    Returns:
        Array of shape (N,) with ΔE values
    """
    labs = np.asarray(labs, dtype=np.float64).reshape(-1, 3)
    return ciede2000_array(as_lab_array(reference)[np.newaxis, :], labs)


def delta_e(hex1: str, hex2: str) -> float:
    """
    CIEDE2000 distance between two hex colors, rounded to 2 decimals.

    Lab values are used unrounded so display rounding happens once.
    """
    return round(ciede2000(hex_to_lab_array(hex1), hex_to_lab_array(hex2)), 2)


def delta_e_interpretation(value: float) -> str:
    """Qualitative label for a ΔE value (fixed buckets)."""
    for upper, label in _INTERPRETATIONS:
        if value < upper:
            return label
    return "Very different"
