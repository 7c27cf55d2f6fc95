"""refinance payment — live payment preview."""

from __future__ import annotations

import click


@click.command()
@click.argument("principal", type=click.FloatRange(min=0))
@click.argument("term_years", type=click.IntRange(min=1))
@click.argument("rate", type=click.FloatRange(min=0))
@click.option("--escrow", type=click.FloatRange(min=0), default=0.0, show_default=True, help="Monthly escrow.")
def payment(principal: float, term_years: int, rate: float, escrow: float) -> None:
    """Show the monthly payment for PRINCIPAL over TERM_YEARS at RATE percent."""
    from refinance.financial.calculators.payment import monthly_payment
    from refinance.financial.formatting import format_currency

    principal_and_interest = monthly_payment(principal, term_years, rate)
    click.echo(f"Principal & interest: {format_currency(principal_and_interest)}")
    if escrow:
        click.echo(f"Escrow:               {format_currency(escrow)}")
    click.echo(f"Monthly payment:      {format_currency(principal_and_interest + escrow)}")
