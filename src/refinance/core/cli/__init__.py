"""Refinance CLI — entry point for init, compare, payment, and rate commands."""

import click

from refinance import __version__
from refinance.core.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, package_name="refinance")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="YAML or JSON config file.")
@click.option("--verbose", "-v", is_flag=True, help="Log calculation details.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, verbose: bool) -> None:
    """Refinance — compare your mortgage against a refinance offer."""
    from refinance.core.utils.logging import setup_logging

    from .common import load_config

    try:
        config = load_config(config_file)
        if verbose:
            config.set("logging.level", "DEBUG")
        settings = config.validated()
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    if settings.logging.file:
        try:
            config.ensure_directories()
        except OSError as e:
            raise click.ClickException(f"Cannot create log directory: {e}")
    setup_logging(settings.logging, log_dir=config.get_log_dir())
    ctx.obj = config


# Register subcommands
from .compare_cmd import compare
from .init_cmd import init
from .payment_cmd import payment
from .rate_cmd import rate

main.add_command(init)
main.add_command(compare)
main.add_command(payment)
main.add_command(rate)
