"""Progressive (marginal-rate) income tax evaluation."""

from collections.abc import Sequence
from decimal import Decimal

from grossup.models.rates import TaxBracket


def apply_brackets(income: Decimal, brackets: Sequence[TaxBracket] | None) -> Decimal:
    """Apply progressive tax brackets to income.

    Each bracket taxes the slice of income between the previous bracket's
    ceiling and its own. A missing or empty table means no tax.
    """
    if not brackets or income <= 0:
        return Decimal("0")

    tax = Decimal("0")
    prev_bound = Decimal("0")

    for bracket in brackets:
        if income <= prev_bound:
            break
        upper_bound = bracket.ceiling
        taxable_in_bracket = min(income, upper_bound) - prev_bound
        if taxable_in_bracket > 0:
            tax += taxable_in_bracket * bracket.rate
        if bracket.is_unbounded:
            break
        prev_bound = upper_bound

    return max(tax, Decimal("0"))
