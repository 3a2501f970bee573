"""Greedy max-protein heuristic."""

from __future__ import annotations

import logging
from typing import Sequence

from maxprotein.models import Food

_logger = logging.getLogger(__name__)


def greedy_max_protein(foods: Sequence[Food], total_kcal: int) -> list[Food]:
    """Choose foods by descending protein while they fit the calorie budget.

    Each round takes the remaining food with the most protein (the earliest
    one on ties) out of the pool. It is kept if it fits in what is left of
    the budget and dropped for good otherwise, even if later rounds would
    have freed room for it. The result never exceeds ``total_kcal`` but is
    not guaranteed to be optimal.

    Args:
        foods: Candidate foods
        total_kcal: Calorie budget

    Returns:
        Chosen foods in the order they were picked
    """
    todo = list(foods)
    result: list[Food] = []
    remaining_kcal = total_kcal

    while todo:
        best_index = 0
        for index in range(1, len(todo)):
            if todo[index].protein_g > todo[best_index].protein_g:
                best_index = index

        food = todo.pop(best_index)
        if food.kcal <= remaining_kcal:
            result.append(food)
            remaining_kcal -= food.kcal
        else:
            _logger.debug(
                "Rejected %r (%d kcal, %d kcal left)",
                food.description,
                food.kcal,
                remaining_kcal,
            )

    return result
