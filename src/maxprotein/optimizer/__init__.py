"""Max-protein subset selection."""

from maxprotein.optimizer.exhaustive import MAX_EXHAUSTIVE_FOODS, exhaustive_max_protein
from maxprotein.optimizer.filters import filter_foods
from maxprotein.optimizer.greedy import greedy_max_protein
from maxprotein.optimizer.selector import select_max_protein
from maxprotein.optimizer.totals import sum_foods

__all__ = [
    "MAX_EXHAUSTIVE_FOODS",
    "exhaustive_max_protein",
    "filter_foods",
    "greedy_max_protein",
    "select_max_protein",
    "sum_foods",
]
