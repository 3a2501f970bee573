"""Max-protein food selection under a calorie budget."""

from maxprotein.models import (
    CandidateLimitError,
    Food,
    FoodDataError,
    MaxProteinError,
    SelectionMethod,
    SelectionResult,
)

__all__ = [
    "CandidateLimitError",
    "Food",
    "FoodDataError",
    "MaxProteinError",
    "SelectionMethod",
    "SelectionResult",
]
