"""Existing loan versus proposed refinance.

Simulates both loans against the same "today" and derives the payment,
interest and total-cost differences, the break-even point for closing
costs, and a target rate that would meet a savings goal.
"""

import math
from datetime import date

from loguru import logger

from ..models import ComparisonResult, LoanSpec
from .amortization import simulate
from .rate_solver import solve_rate_for_target_interest

DEFAULT_SAVINGS_GOAL = 0.20  # Save 20% of the original loan's remaining interest


def break_even_months(closing_costs: float, payment_delta: float) -> int:
    """Months of lower payments needed to recover closing costs.

    Zero when there are no closing costs or the new payment is not lower.
    """
    if closing_costs <= 0 or payment_delta >= 0:
        return 0
    return math.ceil(closing_costs / abs(payment_delta))


def compare(
    original: LoanSpec,
    proposed: LoanSpec,
    as_of: date | None = None,
    savings_goal: float = DEFAULT_SAVINGS_GOAL,
    **solver_options,
) -> ComparisonResult:
    """Compare two loans.

    Args:
        original: The existing loan
        proposed: The refinance offer; its closing costs count against it
        as_of: The date treated as "today" for both loans
        savings_goal: Fraction of the original interest the suggested rate should save
        **solver_options: Passed to ``solve_rate_for_target_interest`` (bounds, tolerances)

    Returns:
        ComparisonResult with deltas expressed as proposed minus original
    """
    as_of = as_of or date.today()
    original_result = simulate(original, as_of)
    proposed_result = simulate(proposed, as_of)

    payment_delta = proposed.monthly_payment - original.monthly_payment
    interest_delta = proposed_result.total_interest_paid - original_result.total_interest_paid
    total_paid_delta = proposed_result.total_amount_paid - original_result.total_amount_paid

    total_cost_with_closing = proposed_result.total_amount_paid + proposed.closing_costs
    net_savings = original_result.total_amount_paid - total_cost_with_closing

    target_total_interest = original_result.total_interest_paid * (1 - savings_goal)
    target_total_cost = proposed.principal + target_total_interest
    suggested_rate = solve_rate_for_target_interest(
        proposed.principal,
        proposed.term_years,
        target_total_cost,
        **solver_options,
    )

    logger.debug(
        f"Compared loans: payment delta {payment_delta:,.2f}, net savings {net_savings:,.2f}, "
        f"suggested rate {suggested_rate:.3f}%"
    )

    return ComparisonResult(
        original=original_result,
        proposed=proposed_result,
        payment_delta=payment_delta,
        interest_delta=interest_delta,
        total_paid_delta=total_paid_delta,
        total_cost_with_closing=total_cost_with_closing,
        net_savings=net_savings,
        break_even_months=break_even_months(proposed.closing_costs, payment_delta),
        suggested_rate=suggested_rate,
        closing_costs=proposed.closing_costs,
    )
