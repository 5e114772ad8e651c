"""Custom exceptions for GrossUp."""

from pathlib import Path


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class DataValidationError(TaxComputationError):
    """Raised when input data fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class ScenarioValidationError(DataValidationError):
    """Raised when a scenario is missing a required selector (work or residence state)."""

    def __init__(self, scenario_id: str, field: str, message: str):
        self.scenario_id = scenario_id
        super().__init__(field, message)


class RateTableError(TaxComputationError):
    """Raised when a tax rate table cannot be found or fails validation."""

    def __init__(self, source: str | Path, message: str, year: int | None = None):
        self.source = str(source)
        self.year = year
        super().__init__(f"Rate table error for {self.source}: {message}")
