"""CLI commands for browsing the product catalog."""

from __future__ import annotations

import click

from retail.application.list_catalog import ListCatalogHandler
from retail.infrastructure.bootstrap import product_repository


@click.command("catalog")
def catalog_list() -> None:
    """List all products in the sample catalog."""
    lines = ListCatalogHandler(product_repository()).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<20} {'Price':>10} {'Stock':>6}  {'Kind'}")
    click.echo("-" * 56)
    for line in lines:
        click.echo(f"{line.name:<20} {line.price:>10} {line.stock:>6}  {line.kind}")
