"""The store's sample catalog and the reference demo scenario."""

from __future__ import annotations

from retail.application.dto import CartItemSpec
from retail.domain.model.product import (
    ExpirableProduct,
    Product,
    ShippableProduct,
)
from retail.domain.model.value_objects import Money, Weight

DEMO_CUSTOMER = "Anton"
DEMO_BALANCE = "800"
DEMO_ITEMS = [
    CartItemSpec("Cheese", 2),
    CartItemSpec("Biscuits", 1),
    CartItemSpec("TV", 1),
    CartItemSpec("Scratch Card", 1),
]


def sample_products() -> list[Product]:
    """Build fresh product instances; each call starts with full stock."""
    return [
        ExpirableProduct(name="Cheese", price=Money.of("100"), quantity=5),
        ExpirableProduct(name="Biscuits", price=Money.of("150"), quantity=3),
        ShippableProduct(
            name="TV", price=Money.of("300"), quantity=4, weight=Weight.of("10000")
        ),
        Product(name="Scratch Card", price=Money.of("50"), quantity=10),
    ]
