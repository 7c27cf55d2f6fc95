"""refinance compare — print the comparison for the saved loans."""

from __future__ import annotations

import click


@click.command()
@click.option("--as-of", "as_of", help="Treat this date (YYYY-MM-DD) as today.")
@click.option("--carry-balance", is_flag=True, help="Set the proposed principal to the original loan's balance today.")
@click.option("--sync-payments", is_flag=True, help="Reset both payments to standard P&I plus escrow.")
@click.option("--save", is_flag=True, help="Write the recomputed loans back to the snapshot.")
@click.option("--force", is_flag=True, help="Allow --save to replace a snapshot that could not be read.")
@click.pass_obj
def compare(config, as_of: str | None, carry_balance: bool, sync_payments: bool, save: bool, force: bool) -> None:
    """Compare the existing loan against the proposed refinance in the terminal."""
    from refinance.core.exceptions import RefinanceError
    from refinance.financial.calculators.comparison import compare as compare_loans
    from refinance.financial.defaults import carry_remaining_balance, default_snapshot, sync_monthly_payment
    from refinance.financial.models import LoanSnapshot

    from .common import get_store, parse_date

    today = parse_date(as_of)
    settings = config.validated()
    store = get_store(config)

    snapshot = store.load()
    if snapshot is None and store.exists():
        if save and not force:
            raise click.ClickException(
                f"Saved loans at {store.path} could not be read; refusing to overwrite them. Pass --force to replace."
            )
        click.echo(f"Saved loans at {store.path} could not be read; using defaults.\n")
        snapshot = default_snapshot(today)
    elif snapshot is None:
        click.echo("No saved loans found; using defaults. Run 'refinance init' to create a snapshot.\n")
        snapshot = default_snapshot(today)

    original, proposed = snapshot.original, snapshot.proposed
    if sync_payments:
        original = sync_monthly_payment(original)
    if carry_balance:
        proposed = carry_remaining_balance(original, proposed, today)
    if sync_payments:
        proposed = sync_monthly_payment(proposed)

    solver = settings.solver
    result = compare_loans(
        original,
        proposed,
        as_of=today,
        savings_goal=settings.comparison.savings_goal,
        min_rate=solver.min_rate,
        max_rate=solver.max_rate,
        max_iterations=solver.max_iterations,
        rate_tolerance=solver.rate_tolerance,
        tolerance=solver.interest_tolerance,
    )
    click.echo(result.format_table())

    if save:
        try:
            store.save(LoanSnapshot(original=original, proposed=proposed))
        except RefinanceError as e:
            raise click.ClickException(str(e))
        click.echo(f"\nSaved loans to {store.path}")
