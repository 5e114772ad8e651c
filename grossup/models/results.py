"""Solver output models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from grossup.models.enums import FilingStatus


class IncomeTaxBreakdown(BaseModel):
    """Income taxes for one gross-income guess, all on the same taxable income."""

    taxable_income: Decimal
    federal_tax: Decimal
    state_tax_work: Decimal
    state_tax_residence: Decimal
    city_tax: Decimal

    @property
    def total(self) -> Decimal:
        return self.federal_tax + self.state_tax_work + self.state_tax_residence + self.city_tax


class PayrollTaxBreakdown(BaseModel):
    social_security_tax: Decimal
    medicare_tax: Decimal

    @property
    def total(self) -> Decimal:
        return self.social_security_tax + self.medicare_tax


class ConvergenceWarning(BaseModel):
    """Non-fatal: the iteration budget ran out before net income hit the target."""

    iterations: int
    difference: Decimal
    message: str


class CalculationResult(BaseModel):
    scenario_id: str
    filing_status: FilingStatus
    gross_income: Decimal
    # Income taxes
    federal_tax: Decimal
    state_tax_work: Decimal
    state_tax_residence: Decimal
    city_tax: Decimal
    # Payroll
    social_security_tax: Decimal
    medicare_tax: Decimal
    sdi_tax: Decimal
    # Totals
    total_benefits: Decimal
    total_tax: Decimal
    net_income: Decimal
    # Echoed scenario
    work_state: str
    residence_state: str
    work_city: str
    target_net_income: Decimal
    # Solver diagnostics
    iterations: int
    converged: bool
    convergence_warning: ConvergenceWarning | None = None

    @property
    def effective_tax_rate(self) -> Decimal:
        if self.gross_income <= 0:
            return Decimal("0")
        return self.total_tax / self.gross_income


class ScenarioError(BaseModel):
    """A scenario that could not be solved within a batch."""

    index: int  # 1-based position in the batch
    scenario_id: str
    message: str


class BatchResult(BaseModel):
    results: list[CalculationResult] = Field(default_factory=list)
    errors: list[ScenarioError] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def all_failed(self) -> bool:
        return not self.results and bool(self.errors)
