"""Protein-maximizing food selectors."""

from maxprotein.optimizer.exhaustive import (
    MAX_CANDIDATES,
    exhaustive_max_protein,
    exhaustive_max_protein_vectorized,
)
from maxprotein.optimizer.greedy import greedy_max_protein
from maxprotein.optimizer.models import SelectionMethod, SelectionResult
from maxprotein.optimizer.runner import run_benchmark, run_selection

__all__ = [
    "MAX_CANDIDATES",
    "SelectionMethod",
    "SelectionResult",
    "greedy_max_protein",
    "exhaustive_max_protein",
    "exhaustive_max_protein_vectorized",
    "run_selection",
    "run_benchmark",
]
