"""Food records, USDA loading and candidate filtering."""

from maxprotein.data.abbrev_loader import load_usda_abbrev
from maxprotein.data.filters import filter_foods
from maxprotein.data.models import FoodRecord, FoodTotals, FoodVector, sum_foods

__all__ = [
    "FoodRecord",
    "FoodTotals",
    "FoodVector",
    "sum_foods",
    "load_usda_abbrev",
    "filter_foods",
]
