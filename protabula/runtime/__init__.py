# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Presentation runtime for Protabula.

Turns color core results into display formats consumed by the page
and API layers:

1. Context Block -- XML / JSON / Markdown snapshot of a bundle
2. CSS Strings -- ``rgb(...)``, ``hsl(...)`` and friends

The runtime never modifies the values it formats.
"""

from protabula.runtime.serializers import (
    BlockFormat,
    SerializerFormat,
    to_context_block,
    to_css_json,
    to_css_strings,
)

__all__ = [
    "to_context_block",
    "to_css_strings",
    "to_css_json",
    "BlockFormat",
    "SerializerFormat",
]
