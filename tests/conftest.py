"""Shared test fixtures for GrossUp."""

import copy
from decimal import Decimal

import pytest

from grossup.models.rates import TaxRateTable
from grossup.models.scenario import NO_CITY, ScenarioInputs
from grossup.ratetables import load_rate_table

# Small, hand-computable table:
#   federal (single/MFS/HOH): 10% to 10k, 20% to 50k, 30% above
#   federal (MFJ):            10% to 20k, 20% to 100k, 30% above
#   AA: flat 5%, city "Metro" flat 1%      BB: flat 3%
#   CC: 2% to 10k, 6% above                ZZ: no tax of any kind
#   Social Security 6.2% to 100k; Medicare 1.45% + 0.9% over threshold
#   SDI: AA 1% capped at 50k wages / $400, BB $0.60 weekly,
#        CC 1% uncapped, DD 1% to 50k wages
SYNTHETIC_TABLE = {
    "year": 2025,
    "version": "test",
    "lastUpdated": "2025-01-01",
    "federal": {
        status: [
            {"rate": "0.10", "maxIncome": "10000"},
            {"rate": "0.20", "maxIncome": "50000"},
            {"rate": "0.30", "maxIncome": "-1"},
        ]
        for status in ("single", "marriedSeparately", "headOfHousehold")
    }
    | {
        "marriedJointly": [
            {"rate": "0.10", "maxIncome": "20000"},
            {"rate": "0.20", "maxIncome": "100000"},
            {"rate": "0.30", "maxIncome": "-1"},
        ]
    },
    "state": {
        "AA": [{"rate": "0.05", "maxIncome": "-1"}],
        "BB": [{"rate": "0.03", "maxIncome": "-1"}],
        "CC": [
            {"rate": "0.02", "maxIncome": "10000"},
            {"rate": "0.06", "maxIncome": "-1"},
        ],
    },
    "city": {
        "AA": {"Metro": [{"rate": "0.01", "maxIncome": "-1"}]},
    },
    "fica": {
        "socialSecurityRate": "0.062",
        "socialSecurityLimit": "100000",
        "medicareRate": "0.0145",
        "medicareAdditionalRate": "0.009",
        "medicareAdditionalThresholds": {
            "single": "200000",
            "marriedJointly": "250000",
            "marriedSeparately": "125000",
            "headOfHousehold": "200000",
        },
    },
    "sdi": {
        "AA": {"rate": "0.01", "maxWage": "50000", "maxContribution": "400", "maxWeeklyDeduction": None},
        "BB": {"rate": "0", "maxWage": None, "maxContribution": None, "maxWeeklyDeduction": "0.60"},
        "CC": {"rate": "0.01", "maxWage": None, "maxContribution": None, "maxWeeklyDeduction": None},
        "DD": {"rate": "0.01", "maxWage": "50000", "maxContribution": None, "maxWeeklyDeduction": None},
    },
}


@pytest.fixture
def synthetic_table_data() -> dict:
    """JSON-shaped copy of the synthetic table, safe to mutate."""
    return copy.deepcopy(SYNTHETIC_TABLE)


@pytest.fixture
def synthetic_rates() -> TaxRateTable:
    return TaxRateTable.model_validate(SYNTHETIC_TABLE)


@pytest.fixture(scope="session")
def rates_2025() -> TaxRateTable:
    return load_rate_table(2025)


@pytest.fixture
def make_scenario():
    """Factory: make_scenario("CA", "CA", city="N/A", retirement_401k=Decimal(...))."""

    def _make(
        work_state: str,
        residence_state: str,
        city: str = NO_CITY,
        **benefits: Decimal,
    ) -> ScenarioInputs:
        return ScenarioInputs(
            id=f"test-{work_state}-{residence_state}-{city}",
            work_state=work_state,
            residence_state=residence_state,
            work_city=city,
            **benefits,
        )

    return _make
