"""Timed dispatch of the selection algorithms."""

from __future__ import annotations

import time
from typing import Iterable, Optional, Sequence

from maxprotein.data.filters import filter_foods
from maxprotein.data.models import FoodRecord
from maxprotein.optimizer.exhaustive import (
    exhaustive_max_protein,
    exhaustive_max_protein_vectorized,
)
from maxprotein.optimizer.greedy import greedy_max_protein
from maxprotein.optimizer.models import SelectionMethod, SelectionResult


def run_selection(
    foods: Sequence[FoodRecord],
    total_kcal: int,
    method: SelectionMethod = SelectionMethod.GREEDY,
    vectorized: bool = False,
) -> SelectionResult:
    """Run one selection algorithm and time it.

    Args:
        foods: Candidate foods
        total_kcal: Calorie budget
        method: Which algorithm to run
        vectorized: Use the numpy exhaustive search (ignored for greedy)

    Returns:
        SelectionResult with the chosen foods and elapsed time
    """
    solver_info: dict[str, object] = {"solver": method.value}

    start_time = time.time()
    if method == SelectionMethod.GREEDY:
        chosen = greedy_max_protein(foods, total_kcal)
    elif vectorized:
        chosen = exhaustive_max_protein_vectorized(foods, total_kcal)
        solver_info["solver"] = "exhaustive_numpy"
        solver_info["subsets_evaluated"] = 1 << len(foods)
    else:
        chosen = exhaustive_max_protein(foods, total_kcal)
        solver_info["subsets_evaluated"] = 1 << len(foods)
    elapsed = time.time() - start_time

    return SelectionResult(
        method=method,
        foods=chosen,
        total_kcal=total_kcal,
        candidate_count=len(foods),
        elapsed_seconds=elapsed,
        solver_info=solver_info,
    )


def run_benchmark(
    source: Sequence[FoodRecord],
    sizes: Iterable[int],
    total_kcal: int,
    min_kcal: int,
    max_kcal: int,
    methods: Optional[Sequence[SelectionMethod]] = None,
    vectorized: bool = False,
) -> list[SelectionResult]:
    """Time each method on growing candidate lists drawn from source.

    For every size n the source is filtered down to its first n foods in
    the calorie range, and each method runs on that same list.

    Returns:
        One SelectionResult per (size, method) pair, sizes in the given order
    """
    if methods is None:
        methods = list(SelectionMethod)

    results: list[SelectionResult] = []
    for size in sizes:
        foods = filter_foods(source, min_kcal, max_kcal, size)
        for method in methods:
            results.append(run_selection(foods, total_kcal, method, vectorized))
    return results
