"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from retail.application.checkout import CheckoutHandler
from retail.domain.service.checkout_service import CheckoutService
from retail.domain.service.shipping_service import ShippingService
from retail.infrastructure.catalog.in_memory_product_repository import (
    InMemoryProductRepository,
)
from retail.infrastructure.catalog.sample_catalog import sample_products
from retail.infrastructure.console.console_notifier import (
    ConsoleReceiptPrinter,
    ConsoleShippingNotifier,
)
from retail.infrastructure.settings import Settings


def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> InMemoryProductRepository:
    """A fresh sample catalog; stock is not shared between invocations."""
    return InMemoryProductRepository(sample_products())


def checkout_handler(config: Settings | None = None) -> CheckoutHandler:
    config = config or settings()
    return CheckoutHandler(
        checkout_service=CheckoutService(ShippingService(config.shipping_fee)),
        shipping_notifier=ConsoleShippingNotifier(),
        receipt_printer=ConsoleReceiptPrinter(),
    )
