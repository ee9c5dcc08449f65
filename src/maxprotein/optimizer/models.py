"""Data models for selection runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from maxprotein.data.models import FoodRecord, sum_foods


class SelectionMethod(Enum):
    """Available selection algorithms."""

    GREEDY = "greedy"
    EXHAUSTIVE = "exhaustive"


@dataclass
class SelectionResult:
    """Complete output of one selection run.

    Calorie and protein totals are derived from foods on access.
    """

    method: SelectionMethod
    foods: list[FoodRecord]
    total_kcal: int  # The budget the run was given
    candidate_count: int
    elapsed_seconds: float
    solver_info: dict[str, Any] = field(default_factory=dict)

    @property
    def kcal(self) -> int:
        return sum_foods(self.foods).kcal

    @property
    def protein_g(self) -> int:
        return sum_foods(self.foods).protein_g

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "method": self.method.value,
            "candidate_count": self.candidate_count,
            "budget_kcal": self.total_kcal,
            "elapsed_seconds": self.elapsed_seconds,
            "foods": [
                {
                    "description": f.description,
                    "amount": f.amount_label,
                    "amount_g": f.sample_mass_g,
                    "kcal": f.energy_kcal,
                    "protein_g": f.protein_g,
                }
                for f in self.foods
            ],
            "total_kcal": self.kcal,
            "total_protein_g": self.protein_g,
            "solver_info": self.solver_info,
        }
