"""Bundled tax rate tables and their loader."""

from grossup.ratetables.loader import (
    DEFAULT_TAX_YEAR,
    available_years,
    load_rate_table,
    load_rate_table_file,
)

__all__ = [
    "DEFAULT_TAX_YEAR",
    "available_years",
    "load_rate_table",
    "load_rate_table_file",
]
