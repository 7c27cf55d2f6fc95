"""refinance — compare an existing mortgage against a proposed refinance."""

from refinance.financial.calculators import (
    compare,
    monthly_payment,
    simulate,
    solve_rate_for_target_interest,
    solve_rate_for_target_payment,
)
from refinance.financial.models import ComparisonResult, LoanSnapshot, LoanSpec, SimulationResult

__version__ = "0.1.0"

__all__ = [
    "ComparisonResult",
    "LoanSnapshot",
    "LoanSpec",
    "SimulationResult",
    "__version__",
    "compare",
    "monthly_payment",
    "simulate",
    "solve_rate_for_target_interest",
    "solve_rate_for_target_payment",
]
