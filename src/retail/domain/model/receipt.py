"""Immutable results of a successful checkout.

A Receipt is produced only after the customer has been charged and stock
has been reduced; it is a record, not something that can be changed.
"""

from __future__ import annotations

from dataclasses import dataclass

from retail.domain.model.value_objects import Money, Weight


@dataclass(frozen=True)
class ShipmentLine:
    product_name: str
    quantity: int
    weight: Weight  # unit weight x quantity


@dataclass(frozen=True)
class Shipment:
    """The shippable subset of a checkout."""

    lines: tuple[ShipmentLine, ...]

    @property
    def total_weight(self) -> Weight:
        total = Weight.zero()
        for line in self.lines:
            total = total + line.weight
        return total


@dataclass(frozen=True)
class ReceiptLine:
    product_name: str
    quantity: int
    line_total: Money


@dataclass(frozen=True)
class Receipt:
    customer_name: str
    lines: tuple[ReceiptLine, ...]
    subtotal: Money
    shipping_fee: Money
    remaining_balance: Money
    shipment: Shipment | None = None

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping_fee
