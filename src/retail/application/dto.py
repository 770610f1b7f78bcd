"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class ReceiptLineDTO:
    """Output: a single receipt line as displayed to the user."""

    product_name: str
    quantity: int
    line_total: str  # formatted, e.g. "200.00"


@dataclass(frozen=True)
class CheckoutDTO:
    """Output: the outcome of a successful checkout."""

    customer_name: str
    items: list[ReceiptLineDTO]
    subtotal: str
    shipping_fee: str
    total: str
    remaining_balance: str
    shipped_items: int
    package_weight: str | None  # e.g. "10.0kg", None when nothing ships
