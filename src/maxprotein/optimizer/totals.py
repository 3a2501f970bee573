"""Calorie and protein totals over a collection of foods."""

from __future__ import annotations

from typing import Iterable

from maxprotein.models import Food


def sum_foods(foods: Iterable[Food]) -> tuple[int, int]:
    """Return ``(total_kcal, total_protein_g)`` for the given foods."""
    total_kcal = 0
    total_protein_g = 0
    for food in foods:
        total_kcal += food.kcal
        total_protein_g += food.protein_g
    return total_kcal, total_protein_g
