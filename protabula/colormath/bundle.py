# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
ColorFormatBundle construction and memoisation.

A bundle is a pure function of the normalized hex, so it is cached per
hex. The cache computes each key at most once, even under concurrent
callers.
"""

from __future__ import annotations

import logging
import threading

from protabula.colormath.cie import rgb_to_hunter_lab, rgb_to_lab, rgb_to_luv, rgb_to_xyz
from protabula.colormath.colorspace import (
    rgb_to_cmyk,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_percent,
    rgb_to_yiq,
)
from protabula.colormath.hexcodec import hex_to_decimal, hex_to_rgb, normalize_hex
from protabula.colormath.photometry import luminance_from_rgb
from protabula.schema.color_formats import ColorFormatBundle
from protabula.schema.errors import InvalidColorFormat

logger = logging.getLogger(__name__)


def compute_format_bundle(hex_color: str) -> ColorFormatBundle:
    """
    Compute every representation of a hex color, bypassing the cache.

    Raises:
        InvalidColorFormat: If ``hex_color`` is not a valid hex color
    """
    normalized = normalize_hex(hex_color)
    rgb = hex_to_rgb(normalized)
    return ColorFormatBundle(
        hex=normalized,
        rgb=rgb,
        rgb_percent=rgb_to_percent(rgb),
        hsl=rgb_to_hsl(rgb),
        hsv=rgb_to_hsv(rgb),
        cmyk=rgb_to_cmyk(rgb),
        xyz=rgb_to_xyz(rgb),
        lab=rgb_to_lab(rgb),
        luv=rgb_to_luv(rgb),
        hunter_lab=rgb_to_hunter_lab(rgb),
        yiq=rgb_to_yiq(rgb),
        decimal=hex_to_decimal(normalized),
        lrv=round(luminance_from_rgb(rgb) * 100, 1),
    )


class BundleCache:
    """
    Thread-safe bundle cache keyed by normalized hex.

    Computation runs under the lock, which gives at-most-once semantics
    per key; bundles are cheap so contention is not a concern.

    Args:
        max_entries: Upper bound on cached bundles (0 disables caching)
    """

    def __init__(self, max_entries: int = 4096) -> None:
        self._max_entries = max_entries
        self._entries: dict[str, ColorFormatBundle] = {}
        self._lock = threading.Lock()

    def get(self, hex_color: str) -> ColorFormatBundle:
        normalized = normalize_hex(hex_color)
        if self._max_entries <= 0:
            return compute_format_bundle(normalized)

        with self._lock:
            bundle = self._entries.get(normalized)
            if bundle is None:
                logger.debug("Bundle cache miss for %s", normalized)
                bundle = compute_format_bundle(normalized)
                if len(self._entries) >= self._max_entries:
                    # Evict the oldest insertion
                    self._entries.pop(next(iter(self._entries)))
                self._entries[normalized] = bundle
            return bundle

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, hex_color: object) -> bool:
        try:
            normalized = normalize_hex(hex_color)
        except InvalidColorFormat:
            return False
        with self._lock:
            return normalized in self._entries


_default_cache = BundleCache()


def build_format_bundle(hex_color: str) -> ColorFormatBundle:
    """
    Bundle for a hex color, served from the shared cache.

    Raises:
        InvalidColorFormat: If ``hex_color`` is not a valid hex color
    """
    return _default_cache.get(hex_color)


def clear_bundle_cache() -> None:
    """Drop all cached bundles."""
    _default_cache.clear()
