"""Exhaustive protein selection over every subset of the candidates."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from maxprotein.data.models import (
    CandidateLimitError,
    FoodRecord,
    InvalidBudgetError,
    sum_foods,
)

# Subsets are encoded as bitmasks in a 64-bit integer.
MAX_CANDIDATES = 64


def _check_preconditions(foods: Sequence[FoodRecord], total_kcal: int) -> None:
    if len(foods) >= MAX_CANDIDATES:
        raise CandidateLimitError(len(foods), MAX_CANDIDATES)
    if total_kcal < 0:
        raise InvalidBudgetError(f"Calorie budget must be non-negative, got {total_kcal}")


def _subset(foods: Sequence[FoodRecord], bits: int) -> list[FoodRecord]:
    """Return the foods whose bit is set in bits, in candidate order."""
    return [food for j, food in enumerate(foods) if (bits >> j) & 1]


def exhaustive_max_protein(
    foods: Sequence[FoodRecord],
    total_kcal: int,
) -> list[FoodRecord]:
    """Find the highest-protein subset of foods that fits the calorie budget.

    Every subset is enumerated as a bitmask from 0 to 2**n - 1, where bit j
    includes foods[j]. A subset replaces the best one found so far only if it
    fits the budget and has strictly more protein, so among equally good
    subsets the one with the lowest mask wins. The empty subset is the
    starting best.

    Runs in O(2**n * n) time; callers must keep n small.

    Args:
        foods: Candidate foods, fewer than MAX_CANDIDATES of them
        total_kcal: Calorie budget, must be non-negative

    Returns:
        The optimal subset, in candidate order

    Raises:
        CandidateLimitError: If there are MAX_CANDIDATES or more foods
        InvalidBudgetError: If total_kcal is negative
    """
    _check_preconditions(foods, total_kcal)

    n = len(foods)
    best: list[FoodRecord] = []
    best_protein = 0

    for bits in range(1 << n):
        candidate = _subset(foods, bits)
        totals = sum_foods(candidate)
        if totals.kcal <= total_kcal and totals.protein_g > best_protein:
            best = candidate
            best_protein = totals.protein_g

    return best


def _inclusion_matrix(start: int, stop: int, n: int) -> np.ndarray:
    """Return the 0/1 matrix of masks start..stop-1 over n foods.

    Masks are built as uint64 so that stop may reach 2**63.
    """
    masks = np.uint64(start) + np.arange(stop - start, dtype=np.uint64)
    shifts = np.arange(n, dtype=np.uint64)
    return ((masks[:, None] >> shifts) & np.uint64(1)).astype(np.int64)


def exhaustive_max_protein_vectorized(
    foods: Sequence[FoodRecord],
    total_kcal: int,
    chunk_size: int = 1 << 16,
) -> list[FoodRecord]:
    """Numpy version of exhaustive_max_protein.

    Masks are evaluated chunk_size at a time as a 0/1 inclusion matrix.
    Returns exactly the subset exhaustive_max_protein would, including its
    lowest-mask tie-breaking.
    """
    _check_preconditions(foods, total_kcal)
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    n = len(foods)
    if n == 0:
        return []

    kcal = np.array([food.energy_kcal for food in foods], dtype=np.int64)
    protein = np.array([food.protein_g for food in foods], dtype=np.int64)

    best_bits = 0
    best_protein = 0
    n_masks = 1 << n

    for start in range(0, n_masks, chunk_size):
        stop = min(start + chunk_size, n_masks)
        included = _inclusion_matrix(start, stop, n)

        chunk_kcal = included @ kcal
        chunk_protein = included @ protein
        # Infeasible masks can never beat the running best, which is >= 0
        scores = np.where(chunk_kcal <= total_kcal, chunk_protein, -1)

        # argmax returns the first (lowest) mask among ties
        i = int(np.argmax(scores))
        if scores[i] > best_protein:
            best_protein = int(scores[i])
            best_bits = start + i

    return _subset(foods, best_bits)
