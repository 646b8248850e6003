# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Serializers for ColorFormatBundle output.

All serializers preserve the bundle values exactly; they only format.
"""

from protabula.runtime.serializers.base import SerializerFormat
from protabula.runtime.serializers.block import BlockFormat, to_context_block
from protabula.runtime.serializers.css import to_css_json, to_css_strings

__all__ = [
    "SerializerFormat",
    "BlockFormat",
    "to_context_block",
    "to_css_strings",
    "to_css_json",
]
