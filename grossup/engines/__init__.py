"""Tax computation engines."""

from grossup.engines.income_tax import apply_brackets
from grossup.engines.jurisdiction import stack_income_taxes
from grossup.engines.payroll import compute_payroll_tax, compute_sdi_tax
from grossup.engines.solver import GrossIncomeSolver, solve_scenarios

__all__ = [
    "GrossIncomeSolver",
    "apply_brackets",
    "compute_payroll_tax",
    "compute_sdi_tax",
    "solve_scenarios",
    "stack_income_taxes",
]
