"""Load foods from the USDA National Nutrient Database ABBREV file."""

from __future__ import annotations

import csv
import math
import re
from pathlib import Path
from typing import Optional

import pandas as pd

from maxprotein.data.models import AbbrevFormatError, FoodRecord, InvalidFoodError

# Leading decimal number of a field; trailing text is ignored
_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class AbbrevLoader:
    """Parses the caret-delimited SR ABBREV.txt format into FoodRecords.

    Text fields are wrapped in tildes, e.g. ``~BUTTER,WITH SALT~``. Rows with
    a missing or malformed field are skipped, but a file whose rows are wider
    or narrower than FIELD_COUNT is not an ABBREV file and fails the whole
    load. Individual short rows are padded with missing fields by pandas and
    so fall under the skip rule; blank lines are ignored.
    """

    FIELD_COUNT = 53

    DESCRIPTION_FIELD = 1
    KCAL_FIELD = 3
    PROTEIN_FIELD = 4
    AMOUNT_G_FIELD = 48
    AMOUNT_FIELD = 49

    def __init__(self, path: Path):
        """Initialize the loader.

        Args:
            path: Path to ABBREV.txt
        """
        self.path = Path(path)
        self._validate_path()

    def _validate_path(self) -> None:
        if not self.path.exists():
            raise FileNotFoundError(
                f"USDA database '{self.path}' not found. Download the SR28 "
                f"ABBREV.txt file from https://www.ars.usda.gov/"
            )

    def load(self) -> list[FoodRecord]:
        """Load every valid food in file order.

        Returns:
            List of FoodRecords

        Raises:
            AbbrevFormatError: If the file does not have FIELD_COUNT columns
        """
        try:
            df = pd.read_csv(
                self.path,
                sep="^",
                header=None,
                dtype=str,
                keep_default_na=False,
                quoting=csv.QUOTE_NONE,
                encoding="latin-1",
            )
        except pd.errors.EmptyDataError:
            return []
        except pd.errors.ParserError as e:
            raise AbbrevFormatError(f"{self.path}: {e}") from e

        if df.shape[1] != self.FIELD_COUNT:
            raise AbbrevFormatError(
                f"{self.path}: expected {self.FIELD_COUNT} fields per row, "
                f"found {df.shape[1]}"
            )

        foods: list[FoodRecord] = []
        for _, row in df.iterrows():
            food = self._parse_row(row)
            if food is not None:
                foods.append(food)

        return foods

    def _parse_row(self, row: pd.Series) -> Optional[FoodRecord]:
        description = _remove_tildes(row[self.DESCRIPTION_FIELD])
        amount = _remove_tildes(row[self.AMOUNT_FIELD])
        amount_g = _parse_mil(row[self.AMOUNT_G_FIELD])
        kcal = _parse_mil(row[self.KCAL_FIELD])
        protein_g = _parse_mil(row[self.PROTEIN_FIELD])

        if None in (description, amount, amount_g, kcal, protein_g):
            return None

        try:
            return FoodRecord(
                description=description,
                amount_label=amount,
                sample_mass_g=amount_g,
                energy_kcal=kcal,
                protein_g=protein_g,
            )
        except InvalidFoodError:
            return None


def _remove_tildes(field: str) -> Optional[str]:
    """Strip the tildes around a text field, or None if it has none."""
    if not isinstance(field, str) or len(field) < 3:
        return None
    if not field.startswith("~") or not field.endswith("~"):
        return None
    return field[1:-1]


def _parse_mil(field: str) -> Optional[int]:
    """Parse the leading number of a field and round it half away from zero.

    Text after the number is ignored, so "100abc" reads as 100. A field that
    does not start with a number gives None.
    """
    if not isinstance(field, str):
        return None
    match = _NUMBER_PREFIX.match(field)
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        return None
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded) if value >= 0 else -int(rounded)


def load_usda_abbrev(path: Path) -> list[FoodRecord]:
    """Convenience function to load foods from an ABBREV file.

    Args:
        path: Path to ABBREV.txt

    Returns:
        List of valid FoodRecords in file order
    """
    return AbbrevLoader(path).load()
