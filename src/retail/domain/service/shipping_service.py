"""Domain service: Shipping.

Prices shipping and assembles the shipment for the items of a cart that
require it.  The fee is flat per shippable cart item, independent of the
quantity or weight of that item.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from retail.domain.model.cart import CartItem
from retail.domain.model.receipt import Shipment, ShipmentLine
from retail.domain.model.value_objects import Money

DEFAULT_FEE_PER_ITEM = Money(Decimal("10"))


class ShippingService:

    def __init__(self, fee_per_item: Money = DEFAULT_FEE_PER_ITEM) -> None:
        self._fee_per_item = fee_per_item

    def fee_for(self, items: Iterable[CartItem]) -> Money:
        """Flat fee times the number of items that require shipping."""
        count = sum(1 for item in items if item.product.requires_shipping())
        return self._fee_per_item * count

    @staticmethod
    def build_shipment(items: Iterable[CartItem]) -> Shipment | None:
        """Return the shipment for *items*, or None if nothing ships."""
        lines = tuple(
            ShipmentLine(
                product_name=item.product.name,
                quantity=item.quantity.value,
                weight=item.line_weight,
            )
            for item in items
            if item.product.requires_shipping()
        )
        if not lines:
            return None
        return Shipment(lines=lines)
