"""Bound a food list to a small candidate set."""

from __future__ import annotations

from typing import Sequence

from maxprotein.data.models import FoodRecord


def filter_foods(
    source: Sequence[FoodRecord],
    min_kcal: int,
    max_kcal: int,
    total_size: int,
) -> list[FoodRecord]:
    """Select the first total_size foods within a calorie range.

    Zero-calorie foods are always dropped since they cannot affect a
    calorie budget. The result shares records with source.

    Args:
        source: Foods to filter, in order
        min_kcal: Minimum kilocalories per sample (inclusive)
        max_kcal: Maximum kilocalories per sample (inclusive)
        total_size: Maximum number of foods to return

    Returns:
        Matching foods in source order
    """
    filtered: list[FoodRecord] = []
    for food in source:
        if len(filtered) >= total_size:
            break
        if food.energy_kcal != 0 and min_kcal <= food.energy_kcal <= max_kcal:
            filtered.append(food)
    return filtered
