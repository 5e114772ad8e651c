"""Data models for GrossUp."""

from grossup.models.enums import FilingStatus
from grossup.models.rates import UNBOUNDED, PayrollRates, SDIPolicy, TaxBracket, TaxRateTable
from grossup.models.results import (
    BatchResult,
    CalculationResult,
    ConvergenceWarning,
    IncomeTaxBreakdown,
    PayrollTaxBreakdown,
    ScenarioError,
)
from grossup.models.scenario import NO_CITY, ScenarioInputs

__all__ = [
    "BatchResult",
    "CalculationResult",
    "ConvergenceWarning",
    "FilingStatus",
    "IncomeTaxBreakdown",
    "NO_CITY",
    "PayrollRates",
    "PayrollTaxBreakdown",
    "SDIPolicy",
    "ScenarioError",
    "ScenarioInputs",
    "TaxBracket",
    "TaxRateTable",
    "UNBOUNDED",
]
