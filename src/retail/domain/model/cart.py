"""Cart aggregate — what the customer intends to buy in one session.

Adding an item only checks availability; stock is decremented at
checkout, which re-validates because stock may change in between.
"""

from __future__ import annotations

from dataclasses import dataclass

from retail.domain.exceptions import OutOfStockError
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money, Quantity, Weight


@dataclass(frozen=True)
class CartItem:
    """A product reference plus the quantity requested for it."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    @property
    def line_weight(self) -> Weight:
        return self.product.shipping_weight() * self.quantity.value


class Cart:

    def __init__(self) -> None:
        self._items: list[CartItem] = []

    def add(self, product: Product, quantity: int) -> CartItem:
        """Append *quantity* units of *product*.

        Raises OutOfStockError if the product does not currently have
        that many units on hand.
        """
        qty = Quantity(quantity)
        if qty.value > product.quantity:
            raise OutOfStockError(product.name, qty.value, product.quantity)
        item = CartItem(product=product, quantity=qty)
        self._items.append(item)
        return item

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
