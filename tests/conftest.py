"""Pytest fixtures for maxprotein tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from maxprotein.config.settings import reload_settings
from maxprotein.models import Food

ABBREV_FIELDS = 53


def make_abbrev_line(
    description: str = "~CHICKEN,BREAST,ROASTED~",
    kcal: str = "165",
    protein: str = "31.02",
    amount_g: str = "140",
    amount: str = "~1 cup~",
    n_fields: int = ABBREV_FIELDS,
) -> str:
    """Build one '^'-delimited ABBREV row with the given key fields."""
    fields = ["0"] * n_fields
    fields[0] = "~05064~"
    fields[1] = description
    fields[3] = kcal
    fields[4] = protein
    fields[48] = amount_g
    fields[49] = amount
    return "^".join(fields)


def write_abbrev(path: Path, lines: list[str]) -> Path:
    """Write ABBREV rows to a file."""
    path.write_text("\n".join(lines) + "\n", encoding="latin-1")
    return path


@pytest.fixture
def abbrev_file(tmp_path):
    """ABBREV file with five valid foods and four malformed rows."""
    lines = [
        make_abbrev_line("~BUTTER,WITH SALT~", "717", "0.85", "14.2", "~1 tbsp~"),
        make_abbrev_line("~CHICKEN,BREAST,ROASTED~", "165", "31.02", "140", "~1 cup~"),
        make_abbrev_line("~EGG,WHL,RAW~", "143", "12.56", "50", "~1 large~"),
        make_abbrev_line("~WATER,TAP~", "0", "0", "237", "~1 cup~"),
        # Missing household amount
        make_abbrev_line("~CHEESE,BRIE~", "334", "20.75", "", ""),
        # Description not wrapped in tildes
        make_abbrev_line("TOFU,RAW", "76", "8.08", "126", "~0.5 cup~"),
        # Non-numeric energy
        make_abbrev_line("~LENTILS,CKD~", "n/a", "9.02", "198", "~1 cup~"),
        # Empty amount text
        make_abbrev_line("~OATS~", "389", "16.89", "81", "~~"),
        make_abbrev_line("~RICE,WHITE,CKD~", "130.5", "2.5", "158", "~1 cup~"),
    ]
    return write_abbrev(tmp_path / "ABBREV.txt", lines)


@pytest.fixture
def scenario_foods():
    """Three foods where greedy misses the optimum under a 400 kcal budget."""
    return [
        Food("item1", "1 serving", 100, kcal=200, protein_g=20),
        Food("item2", "1 serving", 100, kcal=300, protein_g=25),
        Food("item3", "1 serving", 100, kcal=150, protein_g=10),
    ]


@pytest.fixture
def sample_foods():
    """A handful of realistic foods (per 100 g)."""
    return [
        Food("Chicken breast, roasted", "1 cup", 140, 165, 31),
        Food("Brown rice, cooked", "1 cup", 195, 123, 3),
        Food("Broccoli, raw", "1 cup", 91, 34, 3),
        Food("Eggs, whole, raw", "1 large", 50, 143, 13),
        Food("Olive oil", "1 tbsp", 14, 884, 0),
        Food("Water, tap", "1 cup", 237, 0, 0),
        Food("Cheddar cheese", "1 oz", 28, 403, 25),
    ]


def make_random_foods(n: int, seed: int = 0) -> list[Food]:
    """Generate n foods with random calories and protein."""
    rng = random.Random(seed)
    return [
        Food(f"food {i}", "100 g", 100, rng.randint(0, 600), rng.randint(0, 40))
        for i in range(n)
    ]


@pytest.fixture
def random_foods():
    """Factory for reproducible random food lists."""
    return make_random_foods


@pytest.fixture
def abbrev_line():
    """Factory for single ABBREV rows."""
    return make_abbrev_line


@pytest.fixture
def abbrev_writer(tmp_path):
    """Write ABBREV rows to tmp_path/ABBREV.txt and return the path."""

    def _write(lines: list[str]) -> Path:
        return write_abbrev(tmp_path / "ABBREV.txt", lines)

    return _write


@pytest.fixture(autouse=True)
def default_settings(tmp_path):
    """Run every test with default settings, ignoring any user config file."""
    reload_settings(tmp_path / "no-config.yaml")
    yield
    reload_settings(tmp_path / "no-config.yaml")
