"""Tax rate reference-data models.

Field aliases follow the camelCase keys of the bundled rate-table JSON files
(see grossup/ratetables/). Models are frozen and bracket tables are tuples,
so solves can share a loaded table. The outer state and city mappings are
plain dicts; nothing in the package mutates them.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from grossup.models.enums import FilingStatus

# Sentinel ceiling for the top (unbounded) bracket.
UNBOUNDED = Decimal("-1")


class TaxBracket(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rate: Decimal = Field(ge=0, le=1)
    max_income: Decimal = Field(alias="maxIncome")

    @property
    def is_unbounded(self) -> bool:
        return self.max_income == UNBOUNDED

    @property
    def ceiling(self) -> Decimal:
        """Upper bound of the bracket, +Infinity for the unbounded sentinel."""
        return Decimal("Infinity") if self.is_unbounded else self.max_income


def _check_bracket_table(brackets: tuple[TaxBracket, ...], label: str) -> tuple[TaxBracket, ...]:
    prev = Decimal("0")
    for i, bracket in enumerate(brackets):
        if bracket.is_unbounded:
            if i != len(brackets) - 1:
                raise ValueError(f"{label}: unbounded bracket must be last")
            continue
        if bracket.max_income < prev:
            raise ValueError(
                f"{label}: bracket ceilings must be non-decreasing "
                f"({bracket.max_income} < {prev})"
            )
        prev = bracket.max_income
    return brackets


def _check_all_statuses(mapping: dict, label: str) -> dict:
    missing = [status.value for status in FilingStatus if status not in mapping]
    if missing:
        raise ValueError(f"{label}: missing filing status(es) {', '.join(missing)}")
    return mapping


class PayrollRates(BaseModel):
    """Social Security + Medicare (FICA) employee rates."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    social_security_rate: Decimal = Field(alias="socialSecurityRate", ge=0, le=1)
    social_security_limit: Decimal = Field(alias="socialSecurityLimit", ge=0)
    medicare_rate: Decimal = Field(alias="medicareRate", ge=0, le=1)
    medicare_additional_rate: Decimal = Field(alias="medicareAdditionalRate", ge=0, le=1)
    medicare_additional_thresholds: dict[FilingStatus, Decimal] = Field(
        alias="medicareAdditionalThresholds"
    )

    @field_validator("medicare_additional_thresholds")
    @classmethod
    def _all_thresholds_present(cls, v: dict[FilingStatus, Decimal]) -> dict[FilingStatus, Decimal]:
        return _check_all_statuses(v, "medicareAdditionalThresholds")


class SDIPolicy(BaseModel):
    """State disability / paid-leave contribution policy.

    Either a flat weekly deduction (max_weekly_deduction set, annualized x 52)
    or a percentage of wages with optional wage and contribution caps.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rate: Decimal = Field(default=Decimal("0"), ge=0, le=1)
    max_wage: Decimal | None = Field(default=None, alias="maxWage")
    max_contribution: Decimal | None = Field(default=None, alias="maxContribution")
    max_weekly_deduction: Decimal | None = Field(default=None, alias="maxWeeklyDeduction")

    @property
    def is_flat_weekly(self) -> bool:
        return self.max_weekly_deduction is not None


class TaxRateTable(BaseModel):
    """One tax year's complete reference data."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    year: int
    version: str
    last_updated: str = Field(alias="lastUpdated")
    federal: dict[FilingStatus, tuple[TaxBracket, ...]]
    state: dict[str, tuple[TaxBracket, ...]] = Field(default_factory=dict)
    city: dict[str, dict[str, tuple[TaxBracket, ...]]] = Field(default_factory=dict)
    fica: PayrollRates
    sdi: dict[str, SDIPolicy] = Field(default_factory=dict)

    @field_validator("federal")
    @classmethod
    def _federal_complete(
        cls, v: dict[FilingStatus, tuple[TaxBracket, ...]]
    ) -> dict[FilingStatus, tuple[TaxBracket, ...]]:
        _check_all_statuses(v, "federal")
        for status, brackets in v.items():
            _check_bracket_table(brackets, f"federal[{status.value}]")
        return v

    @field_validator("state")
    @classmethod
    def _state_ordered(cls, v: dict[str, tuple[TaxBracket, ...]]) -> dict[str, tuple[TaxBracket, ...]]:
        for code, brackets in v.items():
            _check_bracket_table(brackets, f"state[{code}]")
        return v

    @field_validator("city")
    @classmethod
    def _city_ordered(
        cls, v: dict[str, dict[str, tuple[TaxBracket, ...]]]
    ) -> dict[str, dict[str, tuple[TaxBracket, ...]]]:
        for code, cities in v.items():
            for name, brackets in cities.items():
                _check_bracket_table(brackets, f"city[{code}][{name}]")
        return v

    @property
    def states(self) -> list[str]:
        """State codes with any income-tax or SDI data."""
        return sorted(set(self.state) | set(self.sdi) | set(self.city))
