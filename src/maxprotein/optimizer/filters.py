"""Candidate filtering ahead of subset selection."""

from __future__ import annotations

from typing import Sequence

from maxprotein.models import Food


def filter_foods(
    source: Sequence[Food],
    min_kcal: int,
    max_kcal: int,
    limit: int,
) -> list[Food]:
    """Select the foods worth optimizing over.

    Drops foods whose calories fall outside ``(min_kcal, max_kcal]`` (with
    ``min_kcal >= 0`` this removes zero-calorie foods) and keeps only the
    first ``limit`` matches, so the result stays small enough for
    exhaustive search.

    Args:
        source: Foods to filter, in the order they should be considered
        min_kcal: Exclusive lower calorie bound
        max_kcal: Inclusive upper calorie bound
        limit: Maximum number of foods to return

    Returns:
        New list of matching foods in source order
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    result: list[Food] = []
    for food in source:
        if len(result) == limit:
            break
        if min_kcal < food.kcal <= max_kcal:
            result.append(food)
    return result
