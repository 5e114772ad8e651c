"""Scenario input model: where the income is earned and what comes out pre-tax."""

import uuid
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# Work-city sentinel meaning "no city selected".
NO_CITY = "N/A"


class ScenarioInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    work_state: str = ""
    residence_state: str = ""
    work_city: str = NO_CITY
    # Pre-tax benefit deductions (annual)
    health_insurance: Decimal = Field(default=Decimal("0"), ge=0)
    dental_vision: Decimal = Field(default=Decimal("0"), ge=0)
    hsa: Decimal = Field(default=Decimal("0"), ge=0)
    fsa: Decimal = Field(default=Decimal("0"), ge=0)
    retirement_401k: Decimal = Field(default=Decimal("0"), ge=0)
    other_pretax: Decimal = Field(default=Decimal("0"), ge=0)

    @property
    def total_benefits(self) -> Decimal:
        return (
            self.health_insurance + self.dental_vision + self.hsa
            + self.fsa + self.retirement_401k + self.other_pretax
        )

    @property
    def has_city(self) -> bool:
        return bool(self.work_city) and self.work_city != NO_CITY

    @property
    def label(self) -> str:
        """Short WORK/RESIDENCE[/CITY] label for display."""
        text = f"{self.work_state or '?'}/{self.residence_state or '?'}"
        if self.has_city:
            text += f"/{self.work_city}"
        return text
