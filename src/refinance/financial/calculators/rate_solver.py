"""Bisection search for the interest rate that hits a target.

Total interest and the level monthly payment both rise strictly with the
rate for a fixed principal and term, so halving the bracket converges
without derivatives. Results are tolerance-bounded approximations: when
the iteration cap runs out the final midpoint is returned as-is.
"""

from collections.abc import Callable

from loguru import logger

from .payment import payment_at_rate

MIN_RATE = 0.0
MAX_RATE = 20.0  # Percent
MAX_ITERATIONS = 100
RATE_TOLERANCE = 0.0001  # Stop once the bracket is this narrow
INTEREST_TOLERANCE = 10.0  # Currency units of total interest
PAYMENT_TOLERANCE = 0.01  # Currency units of monthly payment


def _bisect(
    evaluate: Callable[[float], float],
    target: float,
    tolerance: float,
    min_rate: float,
    max_rate: float,
    max_iterations: int,
    rate_tolerance: float,
) -> float:
    """Find the rate where increasing ``evaluate(rate)`` is within ``tolerance`` of ``target``."""
    low = min_rate
    high = max_rate
    iterations = 0

    while iterations < max_iterations and high - low > rate_tolerance:
        mid = (low + high) / 2
        value = evaluate(mid)

        if abs(value - target) < tolerance:
            return mid

        if value < target:
            low = mid
        else:
            high = mid

        iterations += 1

    best = (low + high) / 2
    logger.debug(f"Rate search stopped after {iterations} iterations at {best:.5f}% (target {target:,.2f})")
    return best


def solve_rate_for_target_interest(
    loan_amount: float,
    term_years: int,
    target_total_cost: float,
    *,
    min_rate: float = MIN_RATE,
    max_rate: float = MAX_RATE,
    max_iterations: int = MAX_ITERATIONS,
    rate_tolerance: float = RATE_TOLERANCE,
    tolerance: float = INTEREST_TOLERANCE,
) -> float:
    """Annual rate (percent) at which the loan costs ``target_total_cost`` in total.

    Args:
        loan_amount: Principal
        term_years: Loan term in years
        target_total_cost: Desired principal plus lifetime interest

    Returns:
        The rate in percent, or 0 when the target is below the principal
    """
    if target_total_cost < loan_amount:
        return 0.0

    num_payments = term_years * 12
    target_interest = target_total_cost - loan_amount

    def total_interest(rate: float) -> float:
        return payment_at_rate(loan_amount, rate, num_payments) * num_payments - loan_amount

    return _bisect(total_interest, target_interest, tolerance, min_rate, max_rate, max_iterations, rate_tolerance)


def solve_rate_for_target_payment(
    loan_amount: float,
    term_years: int,
    target_monthly_payment: float,
    *,
    min_rate: float = MIN_RATE,
    max_rate: float = MAX_RATE,
    max_iterations: int = MAX_ITERATIONS,
    rate_tolerance: float = RATE_TOLERANCE,
    tolerance: float = PAYMENT_TOLERANCE,
) -> float:
    """Annual rate (percent) whose level payment equals ``target_monthly_payment``.

    A target at or below the zero-interest payment returns 0.
    """
    num_payments = term_years * 12
    if target_monthly_payment <= loan_amount / num_payments:
        return 0.0

    def payment(rate: float) -> float:
        return payment_at_rate(loan_amount, rate, num_payments)

    return _bisect(payment, target_monthly_payment, tolerance, min_rate, max_rate, max_iterations, rate_tolerance)
