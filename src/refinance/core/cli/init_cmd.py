"""refinance init — write the default loan snapshot."""

from __future__ import annotations

import click


@click.command()
@click.option("--force", is_flag=True, help="Overwrite an existing snapshot.")
@click.pass_obj
def init(config, force: bool) -> None:
    """Set up a snapshot with default original and proposed loans."""
    from refinance.core.exceptions import RefinanceError
    from refinance.financial.defaults import default_snapshot

    from .common import get_store

    store = get_store(config)
    if store.exists() and not force:
        click.echo(f"Snapshot already exists at {store.path}. Use --force to overwrite.")
        return

    try:
        store.save(default_snapshot())
    except RefinanceError as e:
        raise click.ClickException(str(e))
    click.echo(f"Wrote default loans to {store.path}")
    click.echo("Edit the file, then run 'refinance compare'.")
