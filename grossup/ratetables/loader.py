"""Rate-table loading.

Tables are JSON files of the shape described by TaxRateTable. Floats are
parsed straight to Decimal so rates like 0.0145 stay exact. Each call reads
and validates the file again; callers that solve many scenarios should load
once and pass the table around.
"""

import json
import logging
import re
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from grossup.exceptions import RateTableError
from grossup.models.rates import TaxRateTable

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent
DEFAULT_TAX_YEAR = 2025

_FILE_PATTERN = re.compile(r"^tax-data-(\d{4})\.json$")


def bundled_path(year: int) -> Path:
    return DATA_DIR / f"tax-data-{year}.json"


def available_years() -> list[int]:
    """Tax years with a bundled rate table, ascending."""
    years = []
    for path in DATA_DIR.glob("tax-data-*.json"):
        match = _FILE_PATTERN.match(path.name)
        if match:
            years.append(int(match.group(1)))
    return sorted(years)


def load_rate_table(year: int = DEFAULT_TAX_YEAR) -> TaxRateTable:
    """Load the bundled rate table for a tax year."""
    path = bundled_path(year)
    if not path.exists():
        available = ", ".join(str(y) for y in available_years()) or "none"
        raise RateTableError(path, f"No tax data available for year {year} (available: {available})", year=year)
    table = load_rate_table_file(path)
    if table.year != year:
        raise RateTableError(path, f"File declares year {table.year}, expected {year}", year=year)
    return table


def load_rate_table_file(path: Path) -> TaxRateTable:
    """Load and validate a rate table from any JSON file."""
    try:
        raw = json.loads(path.read_text(), parse_float=Decimal)
    except FileNotFoundError:
        raise RateTableError(path, "File not found")
    except json.JSONDecodeError as exc:
        raise RateTableError(path, f"Invalid JSON: {exc}")

    try:
        table = TaxRateTable.model_validate(raw)
    except ValidationError as exc:
        logger.error("Rate table %s failed validation:\n%s", path, exc)
        raise RateTableError(path, f"{exc.error_count()} validation error(s)")

    logger.info("Loaded %d rate table version %s from %s", table.year, table.version, path)
    return table
