# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""Base types and helpers shared by serializers."""

from __future__ import annotations

from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


def format_number(value: float) -> str:
    """Render a float without trailing zeros ("12.5", "100", "-3.125")."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
