"""Gross-income solver.

Inverts the tax model: finds the gross wage whose net pay (gross minus all
taxes minus pre-tax benefits) equals a target. Net income is piecewise
linear in gross income with slope jumps at every bracket, wage-cap and surtax
boundary, so instead of Newton's method this uses a damped fixed-point
iteration:

    guess <- guess - DAMPING_FACTOR * (net(guess) - target)

Each step moves by a fraction of the current error. The first guess assumes a
flat INITIAL_TAX_RATE_ESTIMATE effective rate, which overshoots for most
inputs since taxes only grow with income.
"""

import logging
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from grossup.engines.jurisdiction import stack_income_taxes
from grossup.engines.payroll import compute_payroll_tax, compute_sdi_tax
from grossup.exceptions import ScenarioValidationError
from grossup.models.enums import FilingStatus
from grossup.models.rates import TaxRateTable
from grossup.models.results import (
    BatchResult,
    CalculationResult,
    ConvergenceWarning,
    ScenarioError,
)
from grossup.models.scenario import ScenarioInputs

logger = logging.getLogger(__name__)

# Tunables
MAX_ITERATIONS = 150
TOLERANCE = Decimal("0.50")  # dollars of net income
DAMPING_FACTOR = Decimal("0.7")
INITIAL_TAX_RATE_ESTIMATE = Decimal("0.4")

CENT = Decimal("0.01")


def _round_currency(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class GrossIncomeSolver:
    """Solves for the gross income that yields a target net income."""

    def __init__(
        self,
        max_iterations: int = MAX_ITERATIONS,
        tolerance: Decimal = TOLERANCE,
        damping_factor: Decimal = DAMPING_FACTOR,
        initial_tax_rate: Decimal = INITIAL_TAX_RATE_ESTIMATE,
    ) -> None:
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        self.max_iterations = max_iterations
        self.tolerance = tolerance
        self.damping_factor = damping_factor
        self.initial_tax_rate = initial_tax_rate
        self.warnings: list[str] = []

    def solve(
        self,
        target_net: Decimal,
        scenario: ScenarioInputs,
        filing_status: FilingStatus,
        rates: TaxRateTable,
    ) -> CalculationResult:
        """Find the gross income for one scenario.

        Raises ScenarioValidationError if the work or residence state is
        missing. Running out of iterations is not an error: the last
        evaluated guess is returned with a ConvergenceWarning attached.
        """
        self.warnings = []
        self._validate(scenario)

        total_benefits = scenario.total_benefits
        guess = target_net + total_benefits + target_net * self.initial_tax_rate

        for iteration in range(1, self.max_iterations + 1):
            guess = max(guess, Decimal("0"))

            payroll = compute_payroll_tax(guess, filing_status, rates.fica)
            sdi_tax = compute_sdi_tax(guess, scenario.work_state, rates.sdi)
            income_taxes = stack_income_taxes(guess, scenario, filing_status, rates)

            total_tax = income_taxes.total + payroll.total + sdi_tax
            net = guess - total_tax - total_benefits
            difference = net - target_net

            logger.debug(
                "Scenario %s iteration %d: gross=%.2f net=%.2f difference=%.2f",
                scenario.id, iteration, guess, net, difference,
            )

            if abs(difference) <= self.tolerance:
                converged = True
                break

            if iteration < self.max_iterations:
                guess -= difference * self.damping_factor
        else:
            converged = False

        warning = None
        if not converged:
            message = (
                f"Failed to converge after {iteration} iterations for scenario "
                f"{scenario.label}. Last difference: {difference:.2f}"
            )
            logger.warning(message)
            self.warnings.append(message)
            warning = ConvergenceWarning(
                iterations=iteration,
                difference=_round_currency(difference),
                message=message,
            )

        federal_tax = _round_currency(income_taxes.federal_tax)
        state_tax_work = _round_currency(income_taxes.state_tax_work)
        state_tax_residence = _round_currency(income_taxes.state_tax_residence)
        city_tax = _round_currency(income_taxes.city_tax)
        social_security_tax = _round_currency(payroll.social_security_tax)
        medicare_tax = _round_currency(payroll.medicare_tax)
        sdi = _round_currency(sdi_tax)
        gross_income = _round_currency(guess)
        benefits = _round_currency(total_benefits)

        # Totals are summed from the rounded parts so the breakdown adds up exactly.
        rounded_total_tax = (
            federal_tax + state_tax_work + state_tax_residence + city_tax
            + social_security_tax + medicare_tax + sdi
        )

        return CalculationResult(
            scenario_id=scenario.id,
            filing_status=filing_status,
            gross_income=gross_income,
            federal_tax=federal_tax,
            state_tax_work=state_tax_work,
            state_tax_residence=state_tax_residence,
            city_tax=city_tax,
            social_security_tax=social_security_tax,
            medicare_tax=medicare_tax,
            sdi_tax=sdi,
            total_benefits=benefits,
            total_tax=rounded_total_tax,
            net_income=gross_income - rounded_total_tax - benefits,
            work_state=scenario.work_state,
            residence_state=scenario.residence_state,
            work_city=scenario.work_city,
            target_net_income=_round_currency(target_net),
            iterations=iteration,
            converged=converged,
            convergence_warning=warning,
        )

    @staticmethod
    def _validate(scenario: ScenarioInputs) -> None:
        if not scenario.work_state.strip():
            raise ScenarioValidationError(
                scenario.id, "work_state", "Work state must be selected."
            )
        if not scenario.residence_state.strip():
            raise ScenarioValidationError(
                scenario.id, "residence_state", "Residence state must be selected."
            )


def solve_scenarios(
    target_net: Decimal,
    scenarios: Iterable[ScenarioInputs],
    filing_status: FilingStatus,
    rates: TaxRateTable,
    solver: GrossIncomeSolver | None = None,
) -> BatchResult:
    """Solve several scenarios independently.

    A scenario that fails validation is reported in ``errors`` and does not
    stop the rest of the batch.
    """
    solver = solver or GrossIncomeSolver()
    batch = BatchResult()

    for index, scenario in enumerate(scenarios, start=1):
        try:
            result = solver.solve(target_net, scenario, filing_status, rates)
        except ScenarioValidationError as exc:
            logger.info("Skipping scenario %d (%s): %s", index, scenario.id, exc)
            batch.errors.append(
                ScenarioError(index=index, scenario_id=scenario.id, message=str(exc))
            )
            continue
        batch.results.append(result)
        batch.warnings.extend(solver.warnings)

    return batch
