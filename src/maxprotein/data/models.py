"""Food records and the exceptions shared across maxprotein."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple


class MaxProteinError(Exception):
    """Base exception for maxprotein errors."""

    pass


class InvalidFoodError(MaxProteinError, ValueError):
    """Raised when a FoodRecord would violate its field invariants."""

    pass


class InvalidBudgetError(MaxProteinError, ValueError):
    """Raised when a selector is given a negative calorie budget."""

    pass


class CandidateLimitError(MaxProteinError, ValueError):
    """Raised when exhaustive search is given too many candidates."""

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Exhaustive search requires fewer than {limit} candidates, got {count}"
        )
        self.count = count
        self.limit = limit


class AbbrevFormatError(MaxProteinError):
    """Raised when a USDA ABBREV file is malformed."""

    pass


@dataclass(frozen=True)
class FoodRecord:
    """One food item in the USDA database.

    All quantities describe one reference sample of the food.

    Attributes:
        description: Human-readable description, e.g. "all-purpose wheat flour"
        amount_label: Human-readable sample amount, e.g. "1 cup"
        sample_mass_g: Grams in one sample
        energy_kcal: Kilocalories in one sample
        protein_g: Grams of protein in one sample
    """

    description: str
    amount_label: str
    sample_mass_g: int
    energy_kcal: int
    protein_g: int

    def __post_init__(self) -> None:
        for name in ("description", "amount_label"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidFoodError(f"{name} must be a non-empty string")

        for name in ("sample_mass_g", "energy_kcal", "protein_g"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidFoodError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
            if value < 0:
                raise InvalidFoodError(f"{name} must be non-negative, got {value}")


# Ordered list of shared FoodRecord references.
FoodVector = list[FoodRecord]


class FoodTotals(NamedTuple):
    """Summed energy and protein of a group of foods."""

    kcal: int
    protein_g: int


def sum_foods(foods: Iterable[FoodRecord]) -> FoodTotals:
    """Compute the total kilocalories and protein of foods."""
    kcal = 0
    protein_g = 0
    for food in foods:
        kcal += food.energy_kcal
        protein_g += food.protein_g
    return FoodTotals(kcal, protein_g)
