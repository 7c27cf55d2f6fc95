"""Tests for refinance.financial.calculators.payment."""

import pytest

from refinance.financial.calculators.payment import monthly_payment, payment_at_rate


class TestMonthlyPayment:
    def test_standard_mortgage(self):
        # $300k, 6.5%, 30 years -> $1,896.20/mo
        assert monthly_payment(300_000, 30, 6.5) == pytest.approx(1_896.20, abs=0.01)

    def test_higher_rate(self):
        # $500k, 7%, 30 years -> ~$3,327/mo
        assert monthly_payment(500_000, 30, 7) == pytest.approx(3_327, rel=0.01)

    def test_zero_rate_spreads_principal(self):
        assert monthly_payment(120_000, 10, 0) == pytest.approx(1_000)

    def test_zero_principal(self):
        assert monthly_payment(0, 30, 6.5) == 0

    @pytest.mark.parametrize("rate", [0, 0.01, 2.5, 6.5, 12, 20])
    @pytest.mark.parametrize("term", [1, 15, 30])
    def test_payments_cover_principal(self, rate, term):
        principal = 250_000
        assert monthly_payment(principal, term, rate) * 12 * term >= principal - 1e-6

    def test_payment_rises_with_rate(self):
        payments = [payment_at_rate(200_000, rate, 360) for rate in (0, 3, 6, 9)]
        assert payments == sorted(payments)
        assert len(set(payments)) == 4
