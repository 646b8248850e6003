# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""
Similar color search over catalog records.

Candidates are ranked by CIEDE2000 distance to the reference color.
Sorting is stable, so equal distances keep the caller's input order.
The reference record itself is always excluded (matched by identity or
by catalog number within the same category), never by distance: a
different record with the same hex stays in the results at distance 0.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from protabula.colormath.cie import hex_to_lab_array
from protabula.colormath.classify import classify
from protabula.colormath.difference import ciede2000_batch
from protabula.schema.catalog import (
    CatalogCategory,
    CatalogColor,
    MoodSimilarColor,
    SimilarColor,
    SimilarColorsResult,
)


def _labs(colors: Sequence[CatalogColor]) -> NDArray[np.float64]:
    """Stack candidate Lab values into an (N, 3) array."""
    return np.array([hex_to_lab_array(c.hex) for c in colors], dtype=np.float64).reshape(-1, 3)


def rank_similar(
    reference: CatalogColor,
    candidates: Sequence[CatalogColor],
    *,
    max_results: int = 5,
    category: Optional[CatalogCategory] = None,
) -> tuple[SimilarColor, ...]:
    """
    Rank candidates by perceptual distance to a reference color.

    Args:
        reference: The color to compare against
        candidates: Records to rank (the reference may be among them)
        max_results: Cap on returned results
        category: If given, only candidates from this category are ranked

    Returns:
        At most ``max_results`` SimilarColor, nearest first. Ties keep
        input order.
    """
    if max_results <= 0:
        return ()

    pool = [
        c for c in candidates
        if not reference.is_same_record(c)
        and (category is None or c.category == category)
    ]
    if not pool:
        return ()

    distances = ciede2000_batch(hex_to_lab_array(reference.hex), _labs(pool))
    order = np.argsort(distances, kind="stable")[:max_results]

    return tuple(
        SimilarColor(color=pool[i], distance=float(distances[i]))
        for i in order
    )


def find_similar_by_category(
    reference: CatalogColor,
    candidates: Sequence[CatalogColor],
    max_per_category: int = 5,
) -> SimilarColorsResult:
    """Nearest colors from each catalog category, ranked independently."""
    return SimilarColorsResult(
        classic=rank_similar(
            reference, candidates,
            max_results=max_per_category, category=CatalogCategory.CLASSIC,
        ),
        design_plus=rank_similar(
            reference, candidates,
            max_results=max_per_category, category=CatalogCategory.DESIGN_PLUS,
        ),
        effect=rank_similar(
            reference, candidates,
            max_results=max_per_category, category=CatalogCategory.EFFECT,
        ),
    )


def find_similar_in_category(
    reference: CatalogColor,
    candidates: Sequence[CatalogColor],
    max_count: int = 10,
) -> tuple[SimilarColor, ...]:
    """Nearest colors from the reference's own category."""
    return rank_similar(
        reference, candidates,
        max_results=max_count, category=reference.category,
    )


def find_same_root_color_in_category(
    reference: CatalogColor,
    candidates: Sequence[CatalogColor],
) -> tuple[CatalogColor, ...]:
    """All colors of the reference's category sharing its root color, input order kept."""
    root = classify(reference.to_classification_input())
    return tuple(
        c for c in candidates
        if not reference.is_same_record(c)
        and c.category == reference.category
        and classify(c.to_classification_input()) is root
    )


def find_similar_by_mood(
    reference: CatalogColor,
    candidates: Sequence[CatalogColor],
    min_shared_tags: int = 2,
    max_count: int = 8,
) -> tuple[MoodSimilarColor, ...]:
    """
    Colors sharing mood tags with the reference, ranked by Jaccard index.

    Ordered by Jaccard index, then shared tag count, both descending.
    Returns an empty tuple when the reference has no tags.
    """
    if not reference.tags:
        return ()

    reference_tags = set(reference.tags)
    matches: list[MoodSimilarColor] = []

    for c in candidates:
        if reference.is_same_record(c) or not c.tags:
            continue
        tags = set(c.tags)
        shared = tuple(t for t in dict.fromkeys(reference.tags) if t in tags)
        if len(shared) < min_shared_tags:
            continue
        union = len(reference_tags | tags)
        matches.append(MoodSimilarColor(
            color=c,
            shared_tags=shared,
            jaccard_index=len(shared) / union if union else 0.0,
        ))

    matches.sort(key=lambda m: (-m.jaccard_index, -m.shared_tag_count))
    return tuple(matches[:max_count])
