# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Catalog-facing types.

The color catalog itself (loading, localisation, descriptions) lives
outside the color core. These types describe the slice of a catalog
record the core consumes: hex, display name, category and number.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CatalogCategory(Enum):
    """
    Catalog numbering scheme a color belongs to.

    Only ``CLASSIC`` numbers encode the color family in their leading digit.
    """
    CLASSIC = "classic"
    DESIGN_PLUS = "design_plus"
    EFFECT = "effect"


@dataclass(frozen=True, slots=True)
class ColorClassificationInput:
    """
    Everything the root-color classifier may use.

    Only ``hex`` is required; the catalog metadata is an optional hint.

    Attributes:
        hex: Hex color string in any accepted form
        name: Display name, e.g. "Signal yellow"
        category: Numbering scheme of ``number``
        number: Catalog number, e.g. "1003" or "RAL 1003"
    """
    hex: str
    name: Optional[str] = None
    category: Optional[CatalogCategory] = None
    number: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CatalogColor:
    """
    A catalog record as provided by the catalog loader.

    Attributes:
        hex: Hex color string
        name: English display name
        category: Catalog the record belongs to
        number: Catalog number (unique within a category)
        tags: Free-form mood / usage tags
    """
    hex: str
    name: Optional[str] = None
    category: Optional[CatalogCategory] = None
    number: Optional[str] = None
    tags: tuple[str, ...] = ()

    @property
    def slug(self) -> str:
        """URL-friendly number (spaces replaced with underscores)."""
        return to_slug(self.number or "")

    @property
    def title(self) -> str:
        """Display title, e.g. "RAL 1003 Signal yellow"."""
        if not self.name:
            return f"RAL {self.number}"
        return f"RAL {self.number} {self.name}"

    def is_same_record(self, other: CatalogColor) -> bool:
        """True if both refer to the same catalog entry."""
        if self is other:
            return True
        if not self.number or not other.number:
            return False
        return self.number == other.number and self.category == other.category

    def to_classification_input(self) -> ColorClassificationInput:
        return ColorClassificationInput(
            hex=self.hex,
            name=self.name,
            category=self.category,
            number=self.number,
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "name": self.name,
            "category": self.category.value if self.category is not None else None,
            "number": self.number,
            "tags": list(self.tags),
        }


def to_slug(number: str) -> str:
    """Convert a catalog number to a URL slug ("000 15 00" -> "000_15_00")."""
    return number.replace(" ", "_")


def from_slug(slug: str) -> str:
    """Convert a URL slug back to a catalog number."""
    return slug.replace("_", " ")


# =============================================================================
# Similarity results
# =============================================================================


@dataclass(frozen=True, slots=True)
class SimilarColor:
    """
    A candidate with its CIEDE2000 distance to the reference color.

    Lower is more similar; values under 5 are perceptually very close.
    """
    color: CatalogColor
    distance: float

    def to_dict(self) -> dict:
        return {"color": self.color.to_dict(), "distance": self.distance}


@dataclass(frozen=True, slots=True)
class SimilarColorsResult:
    """Similar colors partitioned by catalog category, each sorted by distance."""
    classic: tuple[SimilarColor, ...] = ()
    design_plus: tuple[SimilarColor, ...] = ()
    effect: tuple[SimilarColor, ...] = ()

    def for_category(self, category: CatalogCategory) -> tuple[SimilarColor, ...]:
        return {
            CatalogCategory.CLASSIC: self.classic,
            CatalogCategory.DESIGN_PLUS: self.design_plus,
            CatalogCategory.EFFECT: self.effect,
        }[category]

    def to_dict(self) -> dict:
        return {
            "classic": [s.to_dict() for s in self.classic],
            "design_plus": [s.to_dict() for s in self.design_plus],
            "effect": [s.to_dict() for s in self.effect],
        }


@dataclass(frozen=True, slots=True)
class MoodSimilarColor:
    """
    A candidate sharing mood tags with the reference color.

    Attributes:
        color: The candidate record
        shared_tags: Tags present on both colors, in the reference's order
        jaccard_index: |shared| / |union|, 0-1
    """
    color: CatalogColor
    shared_tags: tuple[str, ...]
    jaccard_index: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.jaccard_index <= 1.0:
            raise ValueError(f"Jaccard index must be 0-1, got {self.jaccard_index}")

    @property
    def shared_tag_count(self) -> int:
        return len(self.shared_tags)
