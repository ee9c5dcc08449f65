"""maxprotein: pick foods that maximize protein within a calorie budget."""

from maxprotein.data.models import FoodRecord, FoodTotals, sum_foods
from maxprotein.optimizer import (
    SelectionMethod,
    SelectionResult,
    exhaustive_max_protein,
    greedy_max_protein,
    run_selection,
)

__all__ = [
    "FoodRecord",
    "FoodTotals",
    "sum_foods",
    "SelectionMethod",
    "SelectionResult",
    "greedy_max_protein",
    "exhaustive_max_protein",
    "run_selection",
]
__version__ = "0.1.0"
