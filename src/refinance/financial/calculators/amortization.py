"""Month-by-month amortization of a single loan.

Walks the balance forward from the loan's start date, applying interest,
the scheduled principal portion, recurring extra payments and a one-time
lump sum. For a loan that has already started, the walk also reconstructs
today's balance from the payment history and splits the totals into
past and prospective figures.

Pure math — no I/O, and "today" is an explicit argument.
"""

from datetime import date

from dateutil.relativedelta import relativedelta
from loguru import logger

from ..models import LoanSpec, SimulationResult

# Iteration cap as a multiple of the contractual horizon
SAFETY_CAP_FACTOR = 2


def months_elapsed(start_date: date, as_of: date, horizon_months: int | None = None) -> int:
    """Whole calendar months between the start date and ``as_of``.

    Day of month is ignored. Clamped to ``[0, horizon_months]``.
    """
    elapsed = max(0, (as_of.year - start_date.year) * 12 + (as_of.month - start_date.month))
    if horizon_months is not None:
        elapsed = min(elapsed, horizon_months)
    return elapsed


def add_months(start_date: date, months: int) -> date:
    """Calendar month arithmetic; the day is clamped to the target month's end."""
    return start_date + relativedelta(months=months)


def simulate(spec: LoanSpec, as_of: date | None = None) -> SimulationResult:
    """Simulate a loan and report its outcome relative to ``as_of``.

    Args:
        spec: Loan terms
        as_of: The date treated as "today". Defaults to ``date.today()``.

    Returns:
        SimulationResult. When the loan started before this month, interest,
        extra payments and total paid cover only the months after today;
        otherwise they are lifetime totals. ``amortizes`` is False when the
        payment never retires the balance within twice the loan term.
    """
    as_of = as_of or date.today()
    monthly_rate = spec.annual_rate_percent / 100 / 12
    horizon = spec.horizon_months
    elapsed = months_elapsed(spec.start_date, as_of, horizon)
    principal_and_interest = spec.principal_and_interest

    balance = spec.principal

    if elapsed == 0 and spec.one_time_payment > 0:
        balance = max(0.0, balance - spec.one_time_payment)
        if balance == 0:
            return SimulationResult(
                total_interest_paid=0.0,
                total_amount_paid=spec.principal,
                total_extra_payment=0.0,
                months_to_payout=0,
                total_months=0,
                payoff_date=spec.start_date,
                remaining_balance=spec.principal,
                months_elapsed=0,
            )

    total_interest = 0.0
    total_extra = 0.0
    future_interest = 0.0  # From today forward
    future_extra = 0.0
    remaining_balance: float | None = None
    month = 0

    while balance > 0 and month < horizon * SAFETY_CAP_FACTOR:
        month += 1

        # A lump sum in the current month is already reflected in today's balance
        if elapsed > 0 and month == elapsed and spec.one_time_payment > 0:
            balance = max(0.0, balance - spec.one_time_payment)
            if balance == 0:
                remaining_balance = 0.0
                break

        interest = balance * monthly_rate
        # An unpaid interest shortfall is not capitalized
        principal_portion = max(0.0, principal_and_interest - interest)

        if elapsed == 0 or month <= elapsed or spec.continue_extra_payments:
            extra = spec.extra_payment
        else:
            extra = 0.0

        prospective = month > elapsed

        if principal_portion + extra >= balance:
            final_extra = max(0.0, balance - principal_portion)
            total_interest += interest
            total_extra += final_extra
            if prospective:
                future_interest += interest
                future_extra += final_extra
            balance = 0.0
            if month == elapsed:
                remaining_balance = 0.0
            break

        balance -= principal_portion + extra
        total_interest += interest
        total_extra += extra

        if prospective:
            future_interest += interest
            future_extra += extra

        if month == elapsed:
            remaining_balance = balance

    amortizes = balance <= 0
    if not amortizes:
        logger.warning(
            f"Payment of {principal_and_interest:,.2f} does not amortize "
            f"{spec.principal:,.2f} at {spec.annual_rate_percent}% within {month} months"
        )

    if elapsed == 0:
        # Not started yet, or started this month: everything is still ahead
        remaining_balance = spec.principal
        future_interest = total_interest
        future_extra = total_extra
        total_paid = spec.principal + total_interest
        months_to_payout = month
    else:
        if remaining_balance is None:
            # Paid off before today
            remaining_balance = balance
        total_paid = remaining_balance + future_interest
        months_to_payout = max(0, month - elapsed)

    logger.debug(
        f"Simulated {month} months (elapsed {elapsed}): balance today {remaining_balance:,.2f}, "
        f"interest ahead {future_interest:,.2f}"
    )

    return SimulationResult(
        total_interest_paid=future_interest,
        total_amount_paid=total_paid,
        total_extra_payment=future_extra,
        months_to_payout=months_to_payout,
        total_months=month,
        payoff_date=add_months(spec.start_date, month),
        remaining_balance=remaining_balance,
        months_elapsed=elapsed,
        amortizes=amortizes,
    )
