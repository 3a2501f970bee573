"""Data models for foods and selection results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SelectionMethod(Enum):
    """Subset selection algorithms."""

    GREEDY = "greedy"
    EXHAUSTIVE = "exhaustive"


@dataclass(frozen=True)
class Food:
    """One food item from the USDA database.

    Values are per 100 g sample. ``amount`` and ``amount_g`` describe one
    household serving, e.g. "1 cup" weighing 125 g.
    """

    description: str
    amount: str
    amount_g: int
    kcal: int
    protein_g: int

    def __post_init__(self) -> None:
        if not self.description:
            raise ValueError("Food description must be non-empty")
        if not self.amount:
            raise ValueError("Food amount must be non-empty")
        for name in ("amount_g", "kcal", "protein_g"):
            if getattr(self, name) < 0:
                raise ValueError(
                    f"Food {name} must be non-negative, got {getattr(self, name)}"
                )


@dataclass
class SelectionResult:
    """Complete output from a selector run."""

    method: SelectionMethod
    total_kcal_budget: int
    foods: list[Food]
    total_kcal: int
    total_protein_g: int
    candidate_count: int
    solver_info: dict = field(default_factory=dict)  # elapsed_seconds, evaluations


# Custom exceptions


class MaxProteinError(Exception):
    """Base exception for maxprotein errors."""

    pass


class FoodDataError(MaxProteinError):
    """Raised when a food data file cannot be read."""

    pass


class CandidateLimitError(MaxProteinError, ValueError):
    """Raised when a candidate set is too large for exhaustive search."""

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Exhaustive search needs fewer than {limit} candidates, got {count}"
        )
        self.count = count
        self.limit = limit
