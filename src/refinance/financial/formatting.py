"""Display helpers for money, rates and durations."""


def format_currency(value: float) -> str:
    """Format as US dollars with cents, e.g. ``-$1,234.56``."""
    sign = "-" if value < 0 and round(abs(value), 2) > 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_percent(value: float) -> str:
    """Format a percent figure (5.125 -> ``5.125%``)."""
    return f"{value:.3f}%"


def format_years(years: float) -> str:
    """Format fractional years as ``"N years, M months"``."""
    whole_years = int(years)
    months = round((years - whole_years) * 12)
    if months == 12:
        whole_years += 1
        months = 0
    return f"{whole_years} years, {months} months"
