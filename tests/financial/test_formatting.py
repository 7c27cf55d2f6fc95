"""Tests for refinance.financial.formatting."""

from refinance.financial.formatting import format_currency, format_percent, format_years


def test_currency():
    assert format_currency(1_234.5) == "$1,234.50"
    assert format_currency(0) == "$0.00"


def test_negative_currency():
    assert format_currency(-150) == "-$150.00"
    assert format_currency(-0.001) == "$0.00"


def test_percent():
    assert format_percent(5.125) == "5.125%"
    assert format_percent(6.5) == "6.500%"


def test_years():
    assert format_years(2.5) == "2 years, 6 months"
    assert format_years(30) == "30 years, 0 months"
    assert format_years(0) == "0 years, 0 months"


def test_years_rounding_carries():
    assert format_years(1.999) == "2 years, 0 months"
