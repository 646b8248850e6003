# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""Error types raised by the color core."""

from __future__ import annotations


class InvalidColorFormat(ValueError):
    """
    Raised when a hex color string cannot be normalized.

    This is the only error the color core raises for user input. Every
    conversion downstream of the hex codec trusts its numeric input.

    Attributes:
        value: The offending input, exactly as supplied by the caller
        reason: Short description of what was wrong with it
    """

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid hex color {value!r}: {reason}")
