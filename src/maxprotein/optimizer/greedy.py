"""Greedy protein selection."""

from __future__ import annotations

from typing import Sequence

from maxprotein.data.models import FoodRecord, InvalidBudgetError


def greedy_max_protein(
    foods: Sequence[FoodRecord],
    total_kcal: int,
) -> list[FoodRecord]:
    """Choose foods by repeatedly taking the highest-protein item left.

    Each round picks the remaining food with the greatest protein (the first
    one in list order on ties). It is kept if it still fits within the
    calorie budget, and dropped from consideration either way, so a food
    rejected for being too large is never revisited.

    Args:
        foods: Candidate foods, in tie-breaking order
        total_kcal: Calorie budget, must be non-negative

    Returns:
        Chosen foods in the order they were picked

    Raises:
        InvalidBudgetError: If total_kcal is negative
    """
    if total_kcal < 0:
        raise InvalidBudgetError(f"Calorie budget must be non-negative, got {total_kcal}")

    todo = list(foods)
    result: list[FoodRecord] = []
    result_kcal = 0

    while todo:
        best_index = 0
        for i in range(1, len(todo)):
            if todo[i].protein_g > todo[best_index].protein_g:
                best_index = i

        best = todo.pop(best_index)
        if result_kcal + best.energy_kcal <= total_kcal:
            result.append(best)
            result_kcal += best.energy_kcal

    return result
