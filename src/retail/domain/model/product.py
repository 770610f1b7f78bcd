"""Product aggregate and its capability variants.

A plain Product is neither perishable nor shipped.  Variants override the
capability queries (``is_expired``, ``requires_shipping``,
``shipping_weight``) so checkout can treat every product uniformly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from retail.domain.exceptions import StockReductionError, ValidationError
from retail.domain.model.value_objects import Money, Weight

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Product:
    """A product on the shelf.

    Products are shared by reference: carts point at them and checkout
    mutates ``quantity`` in place, so equality is identity.
    """

    name: str
    price: Money
    quantity: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.quantity < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.quantity}"
            )

    def reduce_quantity(self, quantity: int) -> None:
        """Permanently remove *quantity* units from stock."""
        if quantity <= 0:
            raise ValidationError("Reduction quantity must be positive")
        if quantity > self.quantity:
            raise StockReductionError(self.name, quantity, self.quantity)
        self.quantity -= quantity
        logger.debug("Stock for %s reduced by %d to %d", self.name, quantity, self.quantity)

    # --- Capability queries ---------------------------------------------------

    def is_expired(self) -> bool:
        return False

    def requires_shipping(self) -> bool:
        return False

    def shipping_weight(self) -> Weight:
        return Weight.zero()


@dataclass(eq=False)
class ExpirableProduct(Product):
    """A product that can go off.

    ``expired`` is an explicit flag; ``expires_on`` optionally marks the
    product expired once the date has passed.
    """

    expired: bool = False
    expires_on: date | None = None

    def is_expired(self) -> bool:
        if self.expired:
            return True
        return self.expires_on is not None and self.expires_on < date.today()


@dataclass(eq=False)
class ShippableProduct(Product):
    """A physical product that must be shipped; ``weight`` is per unit."""

    weight: Weight

    def requires_shipping(self) -> bool:
        return True

    def shipping_weight(self) -> Weight:
        return self.weight


@dataclass(eq=False)
class PerishableShippableProduct(ExpirableProduct, ShippableProduct):
    """A product that both expires and needs shipping (e.g. a hamper)."""
