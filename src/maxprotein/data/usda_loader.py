"""Load foods from the USDA SR "ABBREV" flat file."""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Optional

import pandas as pd

from maxprotein.models import Food, FoodDataError

_logger = logging.getLogger(__name__)

# Column positions in ABBREV.txt
DESCRIPTION_COL = 1
KCAL_COL = 3
PROTEIN_COL = 4
AMOUNT_G_COL = 48
AMOUNT_COL = 49
MAX_FIELDS = 53


def strip_tildes(field: object) -> Optional[str]:
    """Return the text inside a ``~text~`` field, or None if malformed."""
    if not isinstance(field, str):
        return None
    if len(field) < 3 or field[0] != "~" or field[-1] != "~":
        return None
    return field[1:-1]


def parse_amount(field: object) -> Optional[int]:
    """Parse a numeric field and round it half away from zero.

    Returns None for empty or non-numeric fields.
    """
    if not isinstance(field, str):
        return None
    try:
        value = float(field)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class AbbrevLoader:
    """Reads valid foods out of a USDA ABBREV file."""

    def __init__(self, path: Path):
        """Initialize the loader.

        Args:
            path: Path to ABBREV.txt
        """
        self.path = Path(path)
        self._validate_path()

    def _validate_path(self) -> None:
        """Ensure the data file exists."""
        if not self.path.is_file():
            raise FoodDataError(
                f"Food data file '{self.path}' not found. "
                f"Download the SR28 ABBREV file from "
                f"https://www.ars.usda.gov/northeast-area/beltsville-md-bhnrc/"
            )

    def load(self) -> list[Food]:
        """Parse the file into foods.

        Rows with a missing or malformed description, amount, gram weight,
        energy or protein value are skipped.

        Returns:
            Foods in file order

        Raises:
            FoodDataError: If the file cannot be read or has too many fields
        """
        try:
            df = pd.read_csv(
                self.path,
                sep="^",
                header=None,
                dtype=str,
                names=list(range(MAX_FIELDS + 1)),
                keep_default_na=False,
                quoting=csv.QUOTE_NONE,
                encoding="latin-1",
            )
        except pd.errors.EmptyDataError:
            _logger.warning("Food data file %s is empty", self.path)
            return []
        except (pd.errors.ParserError, OSError) as e:
            raise FoodDataError(f"Could not read {self.path}: {e}") from e

        # Short rows are padded with NaN; anything in the extra column is an overlong row
        overflow = df[MAX_FIELDS]
        overlong = overflow.notna() & (overflow != "")
        if overlong.any():
            line = int(overlong.to_numpy().argmax()) + 1
            raise FoodDataError(
                f"{self.path} line {line} has more than {MAX_FIELDS} fields, "
                f"expected at most {MAX_FIELDS}"
            )

        foods: list[Food] = []
        skipped = 0
        for row in df.itertuples(index=False, name=None):
            food = self._parse_row(row)
            if food is None:
                skipped += 1
                continue
            foods.append(food)

        _logger.info("Loaded %d foods from %s (%d skipped)", len(foods), self.path, skipped)
        return foods

    def _parse_row(self, row: tuple) -> Optional[Food]:
        """Build a Food from one row, or None if the row is invalid."""
        description = strip_tildes(row[DESCRIPTION_COL])
        amount = strip_tildes(row[AMOUNT_COL])
        amount_g = parse_amount(row[AMOUNT_G_COL])
        kcal = parse_amount(row[KCAL_COL])
        protein_g = parse_amount(row[PROTEIN_COL])

        fields = {
            "description": description,
            "amount": amount,
            "amount_g": amount_g,
            "kcal": kcal,
            "protein_g": protein_g,
        }
        bad = [name for name, value in fields.items() if value is None]
        if bad:
            _logger.debug(
                "Skipping row %r: malformed %s", row[DESCRIPTION_COL], ", ".join(bad)
            )
            return None
        try:
            return Food(description, amount, amount_g, kcal, protein_g)
        except ValueError as e:
            _logger.debug("Skipping %r: %s", description, e)
            return None


def load_usda_abbrev(path: Path) -> list[Food]:
    """Convenience function to load foods from an ABBREV file.

    Args:
        path: Path to ABBREV.txt

    Returns:
        List of valid foods
    """
    return AbbrevLoader(path).load()
