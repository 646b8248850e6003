# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
CIE color space conversions.

Conversion chain: sRGB → Linear RGB → XYZ (D50) → Lab / Luv / Hunter Lab

sRGB is defined relative to D65. XYZ values are chromatically adapted to
the D50 reference white with the Bradford transform, so every CIE output
of this module is relative to D50.

References:
- sRGB primaries: IEC 61966-2-1
- Bradford adaptation and CIE formulas: http://www.brucelindbloom.com/
- Hunter Lab constants: HunterLab Applications Note AN-1005

Array functions accept shape (..., 3) and are vectorised. Scalar helpers
return rounded value types (3 decimals, XYZ scaled x100).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from protabula.colormath.colorspace import rgb_to_array, srgb_to_linear
from protabula.colormath.hexcodec import hex_to_rgb
from protabula.schema.color_formats import (
    HunterLabColor,
    LabColor,
    LuvColor,
    RGBColor,
    XYZColor,
)


# =============================================================================
# Reference whites and matrices
# =============================================================================

# ASTM E308-01 reference whites (Y normalized to 1)
D65_WHITE = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)
D50_WHITE = np.array([0.96422, 1.0, 0.82521], dtype=np.float64)

# sRGB primaries as (x, y) chromaticities
_SRGB_PRIMARIES = ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06))

# Bradford cone response matrix
_BRADFORD = np.array([
    [0.8951, 0.2664, -0.1614],
    [-0.7502, 1.7135, 0.0367],
    [0.0389, -0.0685, 1.0296],
], dtype=np.float64)

# CIE constants (exact rational forms)
_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def _rgb_to_xyz_matrix(
    primaries: tuple[tuple[float, float], ...],
    white: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Build the linear RGB → XYZ matrix for a working space."""
    columns = np.array([
        [x / y, 1.0, (1.0 - x - y) / y]
        for x, y in primaries
    ], dtype=np.float64).T
    scale = np.linalg.solve(columns, white)
    return columns * scale


def _bradford_matrix(
    source_white: NDArray[np.float64],
    target_white: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Chromatic adaptation matrix from source to target white."""
    source_cone = _BRADFORD @ source_white
    target_cone = _BRADFORD @ target_white
    return np.linalg.inv(_BRADFORD) @ np.diag(target_cone / source_cone) @ _BRADFORD


# Linear sRGB (D65) → XYZ adapted to D50
_SRGB_TO_XYZ_D50 = _bradford_matrix(D65_WHITE, D50_WHITE) @ _rgb_to_xyz_matrix(
    _SRGB_PRIMARIES, D65_WHITE
)


# =============================================================================
# Linear RGB → XYZ
# =============================================================================


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear sRGB to CIE XYZ relative to D50.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values (white Y = 1.0)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _SRGB_TO_XYZ_D50)


# =============================================================================
# XYZ → Lab / Luv / Hunter Lab
# =============================================================================


def xyz_to_lab(
    xyz: NDArray[np.float64],
    white: NDArray[np.float64] = D50_WHITE,
) -> NDArray[np.float64]:
    """
    Convert XYZ to CIE L*a*b*.

    Args:
        xyz: Array of shape (..., 3), white Y = 1.0
        white: Reference white (default D50)

    Returns:
        Array of shape (..., 3) with (L, a, b), L in [0, 100]
    """
    ratios = np.asarray(xyz, dtype=np.float64) / white
    f = np.where(
        ratios > _EPSILON,
        np.cbrt(ratios),
        (_KAPPA * ratios + 16.0) / 116.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return np.stack([L, a, b], axis=-1)


def _uv_prime(xyz: NDArray[np.float64]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """CIE 1976 u', v' chromaticity; zero where X + 15Y + 3Z is zero."""
    X, Y, Z = xyz[..., 0], xyz[..., 1], xyz[..., 2]
    denom = X + 15.0 * Y + 3.0 * Z
    safe = np.where(denom == 0.0, 1.0, denom)
    u = np.where(denom == 0.0, 0.0, 4.0 * X / safe)
    v = np.where(denom == 0.0, 0.0, 9.0 * Y / safe)
    return u, v


def xyz_to_luv(
    xyz: NDArray[np.float64],
    white: NDArray[np.float64] = D50_WHITE,
) -> NDArray[np.float64]:
    """
    Convert XYZ to CIE L*u*v*.

    Args:
        xyz: Array of shape (..., 3), white Y = 1.0
        white: Reference white (default D50)

    Returns:
        Array of shape (..., 3) with (L, u, v)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    yr = xyz[..., 1] / white[1]

    L = np.where(yr > _EPSILON, 116.0 * np.cbrt(yr) - 16.0, _KAPPA * yr)

    u_prime, v_prime = _uv_prime(xyz)
    uw_prime, vw_prime = _uv_prime(white)

    u = 13.0 * L * (u_prime - uw_prime)
    v = 13.0 * L * (v_prime - vw_prime)
    # Black has undefined chromaticity
    u = np.where(L == 0.0, 0.0, u)
    v = np.where(L == 0.0, 0.0, v)
    return np.stack([L, u, v], axis=-1)


def xyz_to_hunter_lab(
    xyz: NDArray[np.float64],
    white: NDArray[np.float64] = D50_WHITE,
) -> NDArray[np.float64]:
    """
    Convert XYZ to Hunter Lab.

    Ka and Kb are derived from the reference white; a and b are 0 for black.

    Returns:
        Array of shape (..., 3) with (L, a, b), L in [0, 100]
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    ka = 100.0 * (175.0 / 198.04) * (white[0] + white[1])
    kb = 100.0 * (70.0 / 218.11) * (white[1] + white[2])

    xr = xyz[..., 0] / white[0]
    yr = xyz[..., 1] / white[1]
    zr = xyz[..., 2] / white[2]

    sqrt_yr = np.sqrt(np.maximum(yr, 0.0))
    safe = np.where(sqrt_yr == 0.0, 1.0, sqrt_yr)

    L = 100.0 * sqrt_yr
    a = np.where(sqrt_yr == 0.0, 0.0, ka * (xr - yr) / safe)
    b = np.where(sqrt_yr == 0.0, 0.0, kb * (yr - zr) / safe)
    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Convenience: sRGB → CIE (full chain)
# =============================================================================


def srgb_to_xyz(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """sRGB [0,1] → XYZ (D50, white Y = 1.0)."""
    return linear_rgb_to_xyz(srgb_to_linear(srgb))


def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CIE Lab (D50).

    Full chain: sRGB → Linear RGB → XYZ → Lab
    """
    return xyz_to_lab(srgb_to_xyz(srgb))


def srgb_uint8_to_lab(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert uint8 sRGB values [0,255] of shape (..., 3) to Lab."""
    return srgb_to_lab(np.asarray(pixels, dtype=np.float64) / 255.0)


def hex_to_lab_array(hex_color: str) -> NDArray[np.float64]:
    """Unrounded Lab (3,) array for a hex color; input to ΔE and temperature."""
    return srgb_to_lab(rgb_to_array(hex_to_rgb(hex_color)))


def _round3(values: NDArray[np.float64]) -> tuple[float, float, float]:
    # + 0.0 folds negative zero into zero
    return tuple(round(float(v), 3) + 0.0 for v in values)  # type: ignore[return-value]


def rgb_to_xyz(rgb: RGBColor) -> XYZColor:
    """XYZ (D50) scaled x100, 3 decimals."""
    x, y, z = _round3(srgb_to_xyz(rgb_to_array(rgb)) * 100.0)
    return XYZColor(x=x, y=y, z=z)


def rgb_to_lab(rgb: RGBColor) -> LabColor:
    """CIE Lab (D50), 3 decimals."""
    L, a, b = _round3(srgb_to_lab(rgb_to_array(rgb)))
    return LabColor(L=L, a=a, b=b)


def rgb_to_luv(rgb: RGBColor) -> LuvColor:
    """CIE Luv (D50), 3 decimals."""
    L, u, v = _round3(xyz_to_luv(srgb_to_xyz(rgb_to_array(rgb))))
    return LuvColor(L=L, u=u, v=v)


def rgb_to_hunter_lab(rgb: RGBColor) -> HunterLabColor:
    """Hunter Lab (D50), 3 decimals."""
    L, a, b = _round3(xyz_to_hunter_lab(srgb_to_xyz(rgb_to_array(rgb))))
    return HunterLabColor(L=L, a=a, b=b)


def hex_to_xyz(hex_color: str) -> XYZColor:
    return rgb_to_xyz(hex_to_rgb(hex_color))


def hex_to_lab(hex_color: str) -> LabColor:
    return rgb_to_lab(hex_to_rgb(hex_color))


def hex_to_luv(hex_color: str) -> LuvColor:
    return rgb_to_luv(hex_to_rgb(hex_color))


def hex_to_hunter_lab(hex_color: str) -> HunterLabColor:
    return rgb_to_hunter_lab(hex_to_rgb(hex_color))
