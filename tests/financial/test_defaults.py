"""Tests for refinance.financial.defaults."""

from dataclasses import replace
from datetime import date

import pytest

from refinance.financial.calculators.amortization import simulate
from refinance.financial.defaults import (
    carry_remaining_balance,
    default_original_loan,
    default_proposed_loan,
    default_snapshot,
    sync_monthly_payment,
)

TODAY = date(2026, 10, 18)


class TestDefaults:
    def test_original(self):
        loan = default_original_loan(TODAY)
        assert loan.principal == 300_000
        assert loan.term_years == 30
        assert loan.annual_rate_percent == 6.5
        assert loan.start_date == TODAY
        assert loan.monthly_payment == 2_100
        assert loan.escrow == 400

    def test_proposed(self):
        loan = default_proposed_loan(TODAY)
        assert loan.annual_rate_percent == 5.5
        assert loan.monthly_payment == 2_000

    def test_snapshot(self):
        snapshot = default_snapshot(TODAY)
        assert snapshot.original == default_original_loan(TODAY)
        assert snapshot.proposed == default_proposed_loan(TODAY)


class TestSyncMonthlyPayment:
    def test_standard_payment_plus_escrow(self):
        loan = sync_monthly_payment(default_original_loan(TODAY))
        assert loan.monthly_payment == pytest.approx(2_296.20)

    def test_zero_principal_unchanged(self):
        loan = replace(default_original_loan(TODAY), principal=0)
        assert sync_monthly_payment(loan) is loan


class TestCarryRemainingBalance:
    def test_fresh_loan_carries_full_principal(self):
        proposed = carry_remaining_balance(default_original_loan(TODAY), default_proposed_loan(TODAY), TODAY)
        assert proposed.principal == 300_000
        assert proposed.annual_rate_percent == 5.5

    def test_existing_loan_carries_todays_balance(self):
        original = sync_monthly_payment(replace(default_original_loan(TODAY), start_date=date(2021, 10, 1)))
        proposed = carry_remaining_balance(original, default_proposed_loan(TODAY), TODAY)

        assert proposed.principal == pytest.approx(simulate(original, TODAY).remaining_balance, abs=0.01)
        assert proposed.principal < 300_000
