"""CLI commands for checking out a cart."""

from __future__ import annotations

import logging

import click

from retail.application.build_cart import BuildCartHandler
from retail.application.dto import CartItemSpec, CheckoutDTO
from retail.domain.exceptions import DomainException
from retail.domain.model.customer import Customer
from retail.domain.model.value_objects import Money
from retail.infrastructure.bootstrap import checkout_handler, product_repository
from retail.infrastructure.catalog.sample_catalog import (
    DEMO_BALANCE,
    DEMO_CUSTOMER,
    DEMO_ITEMS,
)

logger = logging.getLogger(__name__)


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'TV:1,Cheese:2' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            ) from None
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _run_checkout(customer_name: str, balance: str, specs: list[CartItemSpec]) -> CheckoutDTO:
    """Build a cart against a fresh sample catalog and check it out."""
    customer = Customer(name=customer_name, balance=Money.of(balance))
    cart = BuildCartHandler(product_repository()).handle(specs)
    return checkout_handler().handle(customer, cart)


def _report_failure(exc: DomainException) -> None:
    logger.debug("Checkout aborted", exc_info=exc)
    click.echo(f"Checkout failed: {exc}", err=True)


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--balance", required=True, help="Customer balance (e.g. 800).")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.pass_context
def checkout(ctx: click.Context, customer: str, balance: str, items: str) -> None:
    """Check out a cart built from the sample catalog."""
    specs = _parse_items(items)

    try:
        _run_checkout(customer, balance, specs)
    except DomainException as exc:
        _report_failure(exc)
        ctx.exit(1)


@click.command("demo")
def demo() -> None:
    """Run the reference checkout scenario.

    A failed checkout is reported but does not change the exit status.
    """
    try:
        _run_checkout(DEMO_CUSTOMER, DEMO_BALANCE, DEMO_ITEMS)
    except DomainException as exc:
        _report_failure(exc)
