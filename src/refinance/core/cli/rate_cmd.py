"""refinance rate — rate needed for a target monthly payment."""

from __future__ import annotations

import click


@click.command()
@click.argument("principal", type=click.FloatRange(min=0))
@click.argument("term_years", type=click.IntRange(min=1))
@click.argument("target_payment", type=click.FloatRange(min=0))
@click.pass_obj
def rate(config, principal: float, term_years: int, target_payment: float) -> None:
    """Find the rate at which PRINCIPAL over TERM_YEARS costs TARGET_PAYMENT per month (P&I only)."""
    from refinance.financial.calculators.rate_solver import solve_rate_for_target_payment
    from refinance.financial.formatting import format_currency, format_percent

    solver = config.validated().solver
    found = solve_rate_for_target_payment(
        principal,
        term_years,
        target_payment,
        min_rate=solver.min_rate,
        max_rate=solver.max_rate,
        max_iterations=solver.max_iterations,
        rate_tolerance=solver.rate_tolerance,
        tolerance=solver.payment_tolerance,
    )
    click.echo(f"Rate for {format_currency(target_payment)}/mo: {format_percent(found)}")
    if found >= solver.max_rate - solver.rate_tolerance:
        click.echo(f"Target needs a rate at or above the {format_percent(solver.max_rate)} search limit.")
