"""Level-payment formula for fully amortizing loans."""


def payment_at_rate(principal: float, annual_rate_percent: float, num_payments: int) -> float:
    """Level monthly payment that retires ``principal`` in ``num_payments`` months.

    M = P * r(1+r)^n / ((1+r)^n - 1), with r the monthly rate; a zero rate
    spreads the principal evenly.
    """
    monthly_rate = annual_rate_percent / 100 / 12
    if monthly_rate == 0:
        return principal / num_payments

    growth = (1 + monthly_rate) ** num_payments
    return principal * (monthly_rate * growth) / (growth - 1)


def monthly_payment(principal: float, term_years: int, annual_rate_percent: float) -> float:
    """Calculate the principal and interest payment for a loan.

    Args:
        principal: Loan amount
        term_years: Loan term in years
        annual_rate_percent: Annual interest rate in percent (e.g., 6.5 for 6.5%)

    Returns:
        Monthly principal and interest payment, excluding escrow
    """
    return payment_at_rate(principal, annual_rate_percent, term_years * 12)
