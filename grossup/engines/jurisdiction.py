"""Stacks federal, state and city income tax for one gross-income figure.

Multi-state handling is a simplified reciprocity credit: when the residence
state differs from the work state, the residence state only collects the
amount by which its own tax exceeds what was already paid to the work state.
Real reciprocity agreements vary per state pair; this is a planning
approximation.
"""

from decimal import Decimal

from grossup.engines.income_tax import apply_brackets
from grossup.models.enums import FilingStatus
from grossup.models.rates import TaxRateTable
from grossup.models.results import IncomeTaxBreakdown
from grossup.models.scenario import ScenarioInputs


def stack_income_taxes(
    gross_income: Decimal,
    scenario: ScenarioInputs,
    filing_status: FilingStatus,
    rates: TaxRateTable,
) -> IncomeTaxBreakdown:
    """Compute every income-tax component against gross minus pre-tax benefits."""
    taxable_income = max(gross_income - scenario.total_benefits, Decimal("0"))

    federal_tax = apply_brackets(taxable_income, rates.federal.get(filing_status))

    state_tax_work = apply_brackets(taxable_income, rates.state.get(scenario.work_state))

    state_tax_residence = Decimal("0")
    if scenario.residence_state != scenario.work_state:
        full_residence_tax = apply_brackets(
            taxable_income, rates.state.get(scenario.residence_state)
        )
        state_tax_residence = max(full_residence_tax - state_tax_work, Decimal("0"))

    city_tax = Decimal("0")
    if scenario.has_city:
        city_brackets = rates.city.get(scenario.work_state, {}).get(scenario.work_city)
        if city_brackets:
            city_tax = apply_brackets(taxable_income, city_brackets)

    return IncomeTaxBreakdown(
        taxable_income=taxable_income,
        federal_tax=federal_tax,
        state_tax_work=state_tax_work,
        state_tax_residence=state_tax_residence,
        city_tax=city_tax,
    )
