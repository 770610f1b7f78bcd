import logging

import click

from retail.domain.exceptions import DomainException
from retail.infrastructure.bootstrap import settings
from retail.infrastructure.cli.catalog_commands import catalog_list
from retail.infrastructure.cli.checkout_commands import checkout, demo
from retail.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Retail — checkout for a small store"""
    try:
        level = logging.DEBUG if verbose else settings().log_level
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(level)


# Register subcommands
cli.add_command(catalog_list)
cli.add_command(checkout)
cli.add_command(demo)
