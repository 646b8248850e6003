# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Context block serializer.

Formats a ColorFormatBundle as a structured block (XML, JSON, or Markdown)
for embedding in pages, API responses or documentation.
"""

from __future__ import annotations

import json
from enum import Enum

from protabula.runtime.serializers.base import format_number
from protabula.schema import ColorFormatBundle


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


# Bundle fields rendered as <name k="v" .../> elements, in display order
_XML_ELEMENTS = (
    "rgb",
    "rgb_percent",
    "hsl",
    "hsv",
    "cmyk",
    "xyz",
    "lab",
    "luv",
    "hunter_lab",
    "yiq",
)


def to_context_block(
    bundle: ColorFormatBundle,
    *,
    format: BlockFormat = BlockFormat.XML,
    tag_name: str = "color_formats",
) -> str:
    """Serialize a ColorFormatBundle as a context block.

    Args:
        bundle: The bundle to serialize.
        format: Block format (XML, JSON, or MARKDOWN).
        tag_name: XML/markdown tag name for the block.

    Returns:
        Formatted block string.

    Example (XML)::

        <color_formats hex="#FF5733" decimal="16734003" lrv="28.3">
          <rgb r="255" g="87" b="51"/>
          <hsl h="11" s="100" l="60"/>
          <cmyk c="0" m="66" y="80" k="0"/>
          ...
        </color_formats>
    """
    if format == BlockFormat.XML:
        return _to_xml(bundle, tag_name)
    elif format == BlockFormat.JSON:
        return _to_json(bundle, tag_name)
    else:
        return _to_markdown(bundle, tag_name)


def _attr(value: object) -> str:
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def _to_xml(bundle: ColorFormatBundle, tag_name: str) -> str:
    """Generate XML block."""
    lines = [
        f'<{tag_name} hex="{bundle.hex}" decimal="{bundle.decimal}" '
        f'lrv="{format_number(bundle.lrv)}">'
    ]
    for name in _XML_ELEMENTS:
        attrs = " ".join(
            f'{key}="{_attr(value)}"'
            for key, value in getattr(bundle, name).to_dict().items()
        )
        lines.append(f"  <{name} {attrs}/>")
    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _to_json(bundle: ColorFormatBundle, tag_name: str) -> str:
    """Generate JSON block with wrapper."""
    return json.dumps({tag_name: bundle.to_dict()}, indent=2)


def _to_markdown(bundle: ColorFormatBundle, tag_name: str) -> str:
    """Generate markdown block with code fence."""
    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        json.dumps(bundle.to_dict(), indent=2),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)
