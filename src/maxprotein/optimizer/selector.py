"""Entry point that runs a selector and packages the result."""

from __future__ import annotations

import logging
import time
from typing import Sequence, Union

from maxprotein.models import Food, SelectionMethod, SelectionResult
from maxprotein.optimizer.exhaustive import exhaustive_max_protein
from maxprotein.optimizer.greedy import greedy_max_protein
from maxprotein.optimizer.totals import sum_foods

_logger = logging.getLogger(__name__)


def select_max_protein(
    foods: Sequence[Food],
    total_kcal: int,
    method: Union[SelectionMethod, str] = SelectionMethod.GREEDY,
) -> SelectionResult:
    """Run one of the max-protein selectors over a candidate set.

    Args:
        foods: Candidate foods (already filtered)
        total_kcal: Calorie budget
        method: SelectionMethod or its string value

    Returns:
        SelectionResult with the chosen foods, their totals and timing

    Raises:
        CandidateLimitError: If exhaustive search is given too many foods
        ValueError: If method is not a known SelectionMethod
    """
    method = SelectionMethod(method)
    n = len(foods)
    _logger.debug(
        "Running %s selection over %d foods with %d kcal budget",
        method.value,
        n,
        total_kcal,
    )

    start_time = time.time()
    if method is SelectionMethod.EXHAUSTIVE:
        chosen = exhaustive_max_protein(foods, total_kcal)
        evaluations = 1 << n
    else:
        chosen = greedy_max_protein(foods, total_kcal)
        evaluations = n
    elapsed = time.time() - start_time

    kcal, protein_g = sum_foods(chosen)
    _logger.debug(
        "%s picked %d foods: %d kcal, %d g protein in %.3fs",
        method.value,
        len(chosen),
        kcal,
        protein_g,
        elapsed,
    )

    return SelectionResult(
        method=method,
        total_kcal_budget=total_kcal,
        foods=chosen,
        total_kcal=kcal,
        total_protein_g=protein_g,
        candidate_count=n,
        solver_info={
            "elapsed_seconds": elapsed,
            "evaluations": evaluations,
        },
    )
