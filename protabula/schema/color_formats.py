# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Color value types for the Protabula color core.

Design principles:
- Immutable: All types are frozen dataclasses
- Derived: Every value is computed from a normalized hex (or RGB triple)
- Display-ready: Outward-facing fields carry the rounding the site shows

Rounding conventions:
- HSL: integer degrees / integer percent
- HSV: integer hue, saturation and value with 2 decimals
- CMYK: integer percent
- RGB percent: 2 decimals
- XYZ (x100), Lab, Luv, Hunter Lab, YIQ: 3 decimals
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Enumerations
# =============================================================================


class RootColor(Enum):
    """
    Coarse color family used for browsing and filtering.

    Closed set. ``UNKNOWN`` only appears as an intermediate result inside
    the classifier; the public classifier always resolves to a real family.
    """
    UNKNOWN = "Unknown"
    YELLOW = "Yellow"
    RED = "Red"
    GREEN = "Green"
    ORANGE = "Orange"
    VIOLET = "Violet"
    BLUE = "Blue"
    GREY = "Grey"
    BROWN = "Brown"
    WHITE = "White"
    BLACK = "Black"
    PINK = "Pink"
    ROSE = "Rose"
    BEIGE = "Beige"


class TemperatureClass(Enum):
    """Perceived warmth bucket of a surface color."""
    WARM = "Warm"
    NEUTRAL = "Neutral"
    COOL = "Cool"


# =============================================================================
# Byte / cylindrical color types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    An sRGB color as three bytes.

    Attributes:
        r, g, b: Channel values (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channel values are bytes."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"RGB channel {name} must be 0-255, got {value}")

    @property
    def hex(self) -> str:
        """Canonical ``#RRGGBB`` form."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True, slots=True)
class LinearRGBColor:
    """
    Linear-light RGB, the intermediate used for luminance.

    Attributes:
        r, g, b: Linear channel values (0.0-1.0)
    """
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Linear channel {name} must be 0-1, got {value}")

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True, slots=True)
class RGBPercent:
    """RGB channels as percentages (0-100, 2 decimals)."""
    r: float
    g: float
    b: float

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    Hue / saturation / lightness.

    Attributes:
        h: Hue in integer degrees [0, 360)
        s: Saturation percent (0-100)
        l: Lightness percent (0-100)
    """
    h: int
    s: int
    l: int  # noqa: E741

    def __post_init__(self) -> None:
        """Validate HSL ranges."""
        if not 0 <= self.h < 360:
            raise ValueError(f"Hue must be 0-359, got {self.h}")
        if not 0 <= self.s <= 100:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0 <= self.l <= 100:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    @property
    def is_achromatic(self) -> bool:
        """True when the color has no hue (max == min)."""
        return self.s == 0

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.h, self.s, self.l)

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True, slots=True)
class HSVColor:
    """
    Hue / saturation / value.

    Attributes:
        h: Hue in integer degrees [0, 360)
        s: Saturation percent, 2 decimals
        v: Value percent, 2 decimals
    """
    h: int
    s: float
    v: float

    def __post_init__(self) -> None:
        if not 0 <= self.h < 360:
            raise ValueError(f"Hue must be 0-359, got {self.h}")

    def to_tuple(self) -> tuple[int, float, float]:
        return (self.h, self.s, self.v)

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "v": self.v}


@dataclass(frozen=True, slots=True)
class CMYKColor:
    """Process-color approximation, each channel an integer percent."""
    c: int
    m: int
    y: int
    k: int

    def __post_init__(self) -> None:
        for name in ("c", "m", "y", "k"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"CMYK channel {name} must be 0-100, got {value}")

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.c, self.m, self.y, self.k)

    def to_dict(self) -> dict:
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}


@dataclass(frozen=True, slots=True)
class YIQColor:
    """NTSC luma / chroma, scaled back to the 0-255 range."""
    y: float
    i: float
    q: float

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.y, self.i, self.q)

    def to_dict(self) -> dict:
        return {"y": self.y, "i": self.i, "q": self.q}


# =============================================================================
# CIE color types (always derived, D50 reference white)
# =============================================================================


@dataclass(frozen=True, slots=True)
class XYZColor:
    """CIE XYZ tristimulus values, scaled x100 (white Y = 100)."""
    x: float
    y: float
    z: float

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True, slots=True)
class LabColor:
    """
    CIE L*a*b*.

    Attributes:
        L: Lightness (0 = black, 100 = white)
        a: Green (-) to red (+) axis
        b: Blue (-) to yellow (+) axis
    """
    L: float
    a: float
    b: float

    @property
    def chroma(self) -> float:
        """Distance from the neutral axis, sqrt(a^2 + b^2)."""
        return (self.a ** 2 + self.b ** 2) ** 0.5

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.L, self.a, self.b)

    def to_dict(self) -> dict:
        return {"L": self.L, "a": self.a, "b": self.b}


@dataclass(frozen=True, slots=True)
class LuvColor:
    """CIE L*u*v*."""
    L: float
    u: float
    v: float

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.L, self.u, self.v)

    def to_dict(self) -> dict:
        return {"L": self.L, "u": self.u, "v": self.v}


@dataclass(frozen=True, slots=True)
class HunterLabColor:
    """Hunter L, a, b."""
    L: float
    a: float
    b: float

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.L, self.a, self.b)

    def to_dict(self) -> dict:
        return {"L": self.L, "a": self.a, "b": self.b}


# =============================================================================
# Derived results
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorTemperature:
    """
    Approximate perceived temperature of a surface color.

    This is a heuristic, not a correlated color temperature: CCT only
    applies to light sources.

    Attributes:
        kelvin: Estimate in Kelvin, clamped to 2700-7500
        classification: Warm / Neutral / Cool
    """
    kelvin: int
    classification: TemperatureClass

    def __post_init__(self) -> None:
        if not 2700 <= self.kelvin <= 7500:
            raise ValueError(f"Kelvin must be 2700-7500, got {self.kelvin}")

    def to_dict(self) -> dict:
        return {"kelvin": self.kelvin, "classification": self.classification.value}


@dataclass(frozen=True, slots=True)
class ColorFormatBundle:
    """
    Read-only snapshot of one color in every supported representation.

    A pure function of the normalized hex, so instances are safe to share
    and to cache by that hex. Build through ``ColorFormatBundle.from_hex``.

    Attributes:
        hex: Canonical ``#RRGGBB``
        rgb: Byte triple
        rgb_percent: Channels as percentages
        hsl, hsv, cmyk: Display color models
        xyz, lab, luv, hunter_lab: CIE spaces under D50
        yiq: NTSC luma/chroma
        decimal: 24-bit integer value of the hex
        lrv: Light Reflectance Value (0-100, 1 decimal)
    """
    hex: str
    rgb: RGBColor
    rgb_percent: RGBPercent
    hsl: HSLColor
    hsv: HSVColor
    cmyk: CMYKColor
    xyz: XYZColor
    lab: LabColor
    luv: LuvColor
    hunter_lab: HunterLabColor
    yiq: YIQColor
    decimal: int
    lrv: float

    @classmethod
    def from_hex(cls, hex_color: str) -> ColorFormatBundle:
        """
        Build (or fetch the cached) bundle for a hex color.

        Raises:
            InvalidColorFormat: If ``hex_color`` is not a valid hex color
        """
        # Import here to avoid circular imports
        from protabula.colormath.bundle import build_format_bundle
        return build_format_bundle(hex_color)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "rgb_percent": self.rgb_percent.to_dict(),
            "hsl": self.hsl.to_dict(),
            "hsv": self.hsv.to_dict(),
            "cmyk": self.cmyk.to_dict(),
            "xyz": self.xyz.to_dict(),
            "lab": self.lab.to_dict(),
            "luv": self.luv.to_dict(),
            "hunter_lab": self.hunter_lab.to_dict(),
            "yiq": self.yiq.to_dict(),
            "decimal": self.decimal,
            "lrv": self.lrv,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


@dataclass(frozen=True, slots=True)
class ColorComparison:
    """
    Side-by-side metrics for two colors.

    Attributes:
        hex1, hex2: Normalized inputs
        delta_e: CIEDE2000 distance, 2 decimals
        interpretation: Qualitative bucket for ``delta_e``
        contrast_ratio: WCAG contrast ratio (1-21), 2 decimals
        temperature1, temperature2: Perceived temperature of each color
    """
    hex1: str
    hex2: str
    delta_e: float
    interpretation: str
    contrast_ratio: float
    temperature1: ColorTemperature
    temperature2: ColorTemperature

    def to_dict(self) -> dict:
        return {
            "hex1": self.hex1,
            "hex2": self.hex2,
            "delta_e": self.delta_e,
            "interpretation": self.interpretation,
            "contrast_ratio": self.contrast_ratio,
            "temperature1": self.temperature1.to_dict(),
            "temperature2": self.temperature2.to_dict(),
        }
