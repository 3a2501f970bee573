"""Exhaustive max-protein search over every subset of the candidates."""

from __future__ import annotations

from typing import Optional, Sequence

from maxprotein.models import CandidateLimitError, Food
from maxprotein.optimizer.totals import sum_foods

# Subsets are indexed by a 64-bit mask
MAX_EXHAUSTIVE_FOODS = 64


def subset_for_mask(foods: Sequence[Food], mask: int) -> list[Food]:
    """Return the foods whose index bit is set in ``mask``."""
    return [food for j, food in enumerate(foods) if (mask >> j) & 1]


def exhaustive_max_protein(foods: Sequence[Food], total_kcal: int) -> list[Food]:
    """Find the subset with the most protein that fits the calorie budget.

    Evaluates all ``2**n`` subsets in increasing mask order, so the cost is
    O(n * 2**n). Keep ``n`` small (under ~25 for interactive use) by
    running the candidates through ``filter_foods`` first.

    Among subsets with equal protein the first one enumerated is kept.

    Args:
        foods: Candidate foods, fewer than MAX_EXHAUSTIVE_FOODS
        total_kcal: Calorie budget

    Returns:
        The optimal subset in candidate order. Empty if no subset fits,
        which only happens for a negative budget.

    Raises:
        CandidateLimitError: If there are MAX_EXHAUSTIVE_FOODS or more foods
    """
    n = len(foods)
    if n >= MAX_EXHAUSTIVE_FOODS:
        raise CandidateLimitError(n, MAX_EXHAUSTIVE_FOODS)

    best: Optional[list[Food]] = None
    best_protein_g = 0

    for mask in range(1 << n):
        candidate = subset_for_mask(foods, mask)
        candidate_kcal, candidate_protein_g = sum_foods(candidate)
        if candidate_kcal > total_kcal:
            continue
        if best is None or candidate_protein_g > best_protein_g:
            best = candidate
            best_protein_g = candidate_protein_g

    return best if best is not None else []
