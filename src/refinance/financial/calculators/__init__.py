"""Financial calculators — amortization, rate solving, refinance comparison."""

from .amortization import add_months, months_elapsed, simulate
from .comparison import break_even_months, compare
from .payment import monthly_payment, payment_at_rate
from .rate_solver import solve_rate_for_target_interest, solve_rate_for_target_payment

__all__ = [
    "add_months",
    "break_even_months",
    "compare",
    "monthly_payment",
    "months_elapsed",
    "payment_at_rate",
    "simulate",
    "solve_rate_for_target_interest",
    "solve_rate_for_target_payment",
]
