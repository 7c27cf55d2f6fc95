"""Default loan inputs and explicit recomputation steps.

Editing one field of a loan can make another stale: the contractual
payment follows principal, term, rate and escrow, and the proposed loan's
principal follows the existing loan's balance today. Callers apply these
functions after each edit; nothing recomputes implicitly.
"""

from dataclasses import replace
from datetime import date

from .calculators.amortization import simulate
from .calculators.payment import monthly_payment
from .models import LoanSnapshot, LoanSpec


def default_original_loan(today: date | None = None) -> LoanSpec:
    """A typical 30-year loan starting today."""
    return LoanSpec(
        principal=300_000,
        term_years=30,
        annual_rate_percent=6.5,
        start_date=today or date.today(),
        monthly_payment=2_100,
        escrow=400,
    )


def default_proposed_loan(today: date | None = None) -> LoanSpec:
    return replace(default_original_loan(today), annual_rate_percent=5.5, monthly_payment=2_000)


def default_snapshot(today: date | None = None) -> LoanSnapshot:
    return LoanSnapshot(original=default_original_loan(today), proposed=default_proposed_loan(today))


def sync_monthly_payment(spec: LoanSpec) -> LoanSpec:
    """Return ``spec`` with its payment reset to the standard P&I plus escrow, to the cent."""
    if spec.principal <= 0:
        return spec
    principal_and_interest = monthly_payment(spec.principal, spec.term_years, spec.annual_rate_percent)
    return replace(spec, monthly_payment=round(principal_and_interest + spec.escrow, 2))


def carry_remaining_balance(original: LoanSpec, proposed: LoanSpec, as_of: date | None = None) -> LoanSpec:
    """Return ``proposed`` refinancing exactly what is still owed on ``original`` today."""
    remaining = simulate(original, as_of).remaining_balance
    return replace(proposed, principal=round(remaining, 2))
