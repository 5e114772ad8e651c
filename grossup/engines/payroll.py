"""Payroll tax evaluation: FICA (Social Security + Medicare) and state SDI/PFML.

Both are levied on gross wages. Pre-tax benefits reduce income tax only and
are not subtracted here.
"""

from decimal import Decimal

from grossup.models.enums import FilingStatus
from grossup.models.rates import PayrollRates, SDIPolicy
from grossup.models.results import PayrollTaxBreakdown

WEEKS_PER_YEAR = 52


def compute_payroll_tax(
    gross_income: Decimal, filing_status: FilingStatus, payroll: PayrollRates
) -> PayrollTaxBreakdown:
    """Compute employee Social Security and Medicare tax.

    Social Security stops at the wage base. Medicare has no cap, and wages
    above the filing-status threshold also pay the Additional Medicare Tax
    (Form 8959).
    """
    income = max(gross_income, Decimal("0"))

    ss_wages = min(income, payroll.social_security_limit)
    social_security_tax = ss_wages * payroll.social_security_rate

    threshold = payroll.medicare_additional_thresholds[filing_status]
    excess_wages = max(income - threshold, Decimal("0"))
    medicare_tax = (
        income * payroll.medicare_rate
        + excess_wages * payroll.medicare_additional_rate
    )

    return PayrollTaxBreakdown(
        social_security_tax=social_security_tax,
        medicare_tax=medicare_tax,
    )


def compute_sdi_tax(
    gross_income: Decimal, work_state: str, sdi_rates: dict[str, SDIPolicy]
) -> Decimal:
    """Compute the work state's disability / paid-leave contribution.

    States without a policy owe nothing. Flat-weekly states (e.g. NY, HI)
    owe the weekly maximum for every week of the year regardless of wages.
    """
    policy = sdi_rates.get(work_state)
    if policy is None:
        return Decimal("0")

    if policy.is_flat_weekly:
        return max(policy.max_weekly_deduction * WEEKS_PER_YEAR, Decimal("0"))

    income = max(gross_income, Decimal("0"))
    taxable_wage = income
    if policy.max_wage is not None:
        taxable_wage = min(income, policy.max_wage)

    sdi_tax = taxable_wage * policy.rate
    if policy.max_contribution is not None:
        sdi_tax = min(sdi_tax, policy.max_contribution)

    return max(sdi_tax, Decimal("0"))
