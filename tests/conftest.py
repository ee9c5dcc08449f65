"""Pytest fixtures for maxprotein tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from maxprotein.config import settings as settings_module
from maxprotein.config.settings import Settings
from maxprotein.data.models import FoodRecord

ABBREV_FIELD_COUNT = 53


def _make_food(description: str, kcal: int, protein_g: int, amount_g: int = 100) -> FoodRecord:
    """Build a FoodRecord with a default sample amount."""
    return FoodRecord(
        description=description,
        amount_label="1 cup",
        sample_mass_g=amount_g,
        energy_kcal=kcal,
        protein_g=protein_g,
    )


def _make_abbrev_line(
    ndb_no: str,
    description: str,
    kcal: str,
    protein_g: str,
    amount_g: str = "100",
    amount: str = "~1 cup~",
) -> str:
    """Build one caret-delimited ABBREV row with the given values."""
    fields = ["0"] * ABBREV_FIELD_COUNT
    fields[0] = f"~{ndb_no}~"
    fields[1] = description
    fields[3] = kcal
    fields[4] = protein_g
    fields[48] = amount_g
    fields[49] = amount
    fields[51] = "~~"
    return "^".join(fields)


@pytest.fixture
def food():
    """Factory for FoodRecords: food(description, kcal, protein_g)."""
    return _make_food


@pytest.fixture
def abbrev_line():
    """Factory for caret-delimited ABBREV rows."""
    return _make_abbrev_line


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Isolate tests from any config file in the home directory."""
    settings = Settings()
    monkeypatch.setattr(settings_module, "_settings", settings)
    return settings


@pytest.fixture
def scenario_foods(food):
    """The three-food example: X(200 kcal, 10 g), Y(300, 20), Z(100, 5)."""
    x = food("X", kcal=200, protein_g=10)
    y = food("Y", kcal=300, protein_g=20)
    z = food("Z", kcal=100, protein_g=5)
    return x, y, z


@pytest.fixture
def abbrev_path(tmp_path, abbrev_line) -> Path:
    """Write a small ABBREV file and return its path."""
    lines = [
        abbrev_line("01001", "~BUTTER,WITH SALT~", "717", "0.85", "227", "~1 cup~"),
        abbrev_line("05062", "~CHICKEN,BROILERS,BREAST~", "165", "31.02", "140", "~1 breast~"),
        abbrev_line("11090", "~BROCCOLI,RAW~", "34", "2.82", "91", "~1 cup chopped~"),
        abbrev_line("14555", "~WATER,BTLD,GENERIC~", "0", "0", "237", "~1 cup~"),
        abbrev_line("01123", "~EGG,WHL,RAW,FRSH~", "143", "12.56", "50", "~1 large~"),
        # No amount string: skipped
        abbrev_line("99999", "~MYSTERY FOOD~", "100", "5", "0", ""),
        abbrev_line("20037", "~RICE,BROWN,MEDIUM-GRAIN,CKD~", "112", "2.32", "195", "~1 cup~"),
    ]
    path = tmp_path / "ABBREV.txt"
    path.write_text("\r\n".join(lines) + "\r\n", encoding="latin-1")
    return path
