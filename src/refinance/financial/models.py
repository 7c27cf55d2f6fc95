"""Loan data models.

``LoanSpec`` is the input to every calculation; ``SimulationResult`` and
``ComparisonResult`` are derived and never stored. ``LoanSnapshot`` is the
one shape that is persisted: the existing loan and the proposed refinance.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from .formatting import format_currency, format_percent, format_years

# camelCase keys written by the web calculator, accepted on read
_LEGACY_KEYS = {
    "loanAmount": "principal",
    "loanLengthYears": "term_years",
    "interestRate": "annual_rate_percent",
    "startDate": "start_date",
    "monthlyPayment": "monthly_payment",
    "extraPayment": "extra_payment",
    "oneTimeExtraPayments": "one_time_payment",
    "closingCosts": "closing_costs",
    "continueExtraPayments": "continue_extra_payments",
}


@dataclass(frozen=True)
class LoanSpec:
    """Terms of one mortgage loan.

    Attributes:
        principal: Original loan amount.
        term_years: Loan length in years.
        annual_rate_percent: Annual rate in percent (6.5 means 6.5%).
        start_date: Date the payment schedule begins.
        monthly_payment: Contractual payment including escrow.
        escrow: Monthly tax/insurance passthrough, excluded from amortization.
        extra_payment: Recurring monthly principal-only payment.
        one_time_payment: Lump-sum principal reduction, applied once.
        closing_costs: Refinance costs; only meaningful for a proposed loan.
        continue_extra_payments: Whether extra payments made so far keep going
            after today. Only matters for a loan that has already started.
    """

    principal: float
    term_years: int
    annual_rate_percent: float
    start_date: date
    monthly_payment: float
    escrow: float = 0.0
    extra_payment: float = 0.0
    one_time_payment: float = 0.0
    closing_costs: float = 0.0
    continue_extra_payments: bool = True

    def __post_init__(self):
        if self.principal < 0:
            raise ValueError(f"Principal must be >= 0, got {self.principal}")
        if self.term_years < 1:
            raise ValueError(f"Term must be at least 1 year, got {self.term_years}")
        if self.annual_rate_percent < 0:
            raise ValueError(f"Interest rate must be >= 0, got {self.annual_rate_percent}")
        for field_name in ["monthly_payment", "escrow", "extra_payment", "one_time_payment", "closing_costs"]:
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be >= 0, got {getattr(self, field_name)}")

    @property
    def principal_and_interest(self) -> float:
        """Contractual payment minus escrow."""
        return self.monthly_payment - self.escrow

    @property
    def horizon_months(self) -> int:
        return self.term_years * 12

    def to_dict(self) -> dict[str, Any]:
        return {
            "principal": self.principal,
            "term_years": self.term_years,
            "annual_rate_percent": self.annual_rate_percent,
            "start_date": self.start_date.isoformat(),
            "monthly_payment": self.monthly_payment,
            "escrow": self.escrow,
            "extra_payment": self.extra_payment,
            "one_time_payment": self.one_time_payment,
            "closing_costs": self.closing_costs,
            "continue_extra_payments": self.continue_extra_payments,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LoanSpec:
        """Build a LoanSpec from a JSON-style dict.

        Accepts both snake_case keys and the camelCase keys of snapshots
        written by the web calculator. Missing optional fields default.
        """
        values = {_LEGACY_KEYS.get(key, key): value for key, value in data.items()}
        start = values.get("start_date")
        if isinstance(start, str):
            # Web snapshots may carry a full ISO timestamp
            start = date.fromisoformat(start[:10])
        if not isinstance(start, date):
            raise ValueError(f"start_date must be a date or ISO string, got {start!r}")

        return cls(
            principal=float(values["principal"]),
            term_years=int(values["term_years"]),
            annual_rate_percent=float(values["annual_rate_percent"]),
            start_date=start,
            monthly_payment=float(values["monthly_payment"]),
            escrow=float(values.get("escrow") or 0),
            extra_payment=float(values.get("extra_payment") or 0),
            one_time_payment=float(values.get("one_time_payment") or 0),
            closing_costs=float(values.get("closing_costs") or 0),
            continue_extra_payments=bool(values.get("continue_extra_payments", True)),
        )


@dataclass
class SimulationResult:
    """Outcome of simulating one loan.

    Money figures are prospective (from today on) when the loan has already
    started (``months_elapsed > 0``), otherwise lifetime totals.
    """

    total_interest_paid: float
    total_amount_paid: float
    total_extra_payment: float
    months_to_payout: int
    total_months: int
    payoff_date: date
    remaining_balance: float  # As of today
    months_elapsed: int
    amortizes: bool = True  # False: payment never retires the balance within the horizon cap

    @property
    def years_to_payout(self) -> float:
        return self.months_to_payout / 12


@dataclass
class ComparisonResult:
    """Existing loan versus proposed refinance.

    Deltas are proposed minus original, so negative values are savings.
    """

    original: SimulationResult
    proposed: SimulationResult
    payment_delta: float
    interest_delta: float
    total_paid_delta: float
    total_cost_with_closing: float
    net_savings: float
    break_even_months: int
    suggested_rate: float
    closing_costs: float = 0.0

    @property
    def amortizes(self) -> bool:
        return self.original.amortizes and self.proposed.amortizes

    def format_table(self) -> str:
        """Format comparison as text table."""
        lines = []
        lines.append("=" * 66)
        lines.append("  Refinance Comparison")
        lines.append("=" * 66)
        lines.append(f"{'':<24} {'Original':>20} {'Proposed':>20}")
        lines.append("-" * 66)

        rows = [
            ("Balance today", lambda r: format_currency(r.remaining_balance)),
            ("Interest to pay", lambda r: format_currency(r.total_interest_paid)),
            ("Total to pay", lambda r: format_currency(r.total_amount_paid)),
            ("Extra principal", lambda r: format_currency(r.total_extra_payment)),
            ("Time to payoff", lambda r: format_years(r.years_to_payout)),
            ("Payoff date", lambda r: r.payoff_date.isoformat()),
        ]
        for label, render in rows:
            lines.append(f"{label:<24} {render(self.original):>20} {render(self.proposed):>20}")

        lines.append("-" * 66)
        lines.append(f"Monthly payment change: {format_currency(self.payment_delta)}")
        lines.append(f"Interest change:        {format_currency(self.interest_delta)}")
        lines.append(f"Total paid change:      {format_currency(self.total_paid_delta)}")

        if self.closing_costs > 0:
            lines.append(f"\nClosing costs: {format_currency(self.closing_costs)}")
            lines.append(f"Total cost with closing: {format_currency(self.total_cost_with_closing)}")
            if self.break_even_months > 0:
                lines.append(f"Break-even: {self.break_even_months} months")
        lines.append(f"Net savings: {format_currency(self.net_savings)}")
        lines.append(f"Suggested target rate: {format_percent(self.suggested_rate)}")

        for name, result in (("Original", self.original), ("Proposed", self.proposed)):
            if not result.amortizes:
                lines.append(f"\nWARNING: {name} loan payment does not amortize within the loan horizon")

        return "\n".join(lines)


@dataclass
class LoanSnapshot:
    """The saved pair of loans."""

    original: LoanSpec
    proposed: LoanSpec

    def to_dict(self) -> dict[str, Any]:
        return {"originalLoan": self.original.to_dict(), "newLoan": self.proposed.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LoanSnapshot:
        return cls(
            original=LoanSpec.from_dict(data["originalLoan"]),
            proposed=LoanSpec.from_dict(data["newLoan"]),
        )
