"""Domain service: Checkout.

Coordinates the Cart, the Customer and every Product in the cart to
settle a purchase.  The sequence is validate, charge, then mutate:

  Phase 1 — validate: every item must be unexpired and in stock.  The
            subtotal and the shippable subset are collected on the way.
            Fails fast before any mutation.
  Phase 2 — charge: deduct subtotal + shipping from the customer.  If the
            balance is too low nothing has changed yet.
  Phase 3 — mutate: reduce stock for every item.  There is no rollback;
            a failure here leaves earlier products already reduced.
"""

from __future__ import annotations

import logging

from retail.domain.exceptions import (
    EmptyCartError,
    ExpiredProductError,
    InsufficientFundsError,
    OutOfStockError,
)
from retail.domain.model.cart import Cart, CartItem
from retail.domain.model.customer import Customer
from retail.domain.model.receipt import Receipt, ReceiptLine
from retail.domain.model.value_objects import Money
from retail.domain.service.shipping_service import ShippingService

logger = logging.getLogger(__name__)


class CheckoutService:

    def __init__(self, shipping: ShippingService | None = None) -> None:
        self._shipping = shipping or ShippingService()

    def checkout(self, customer: Customer, cart: Cart) -> Receipt:
        """Settle *cart* against *customer* and return the receipt."""
        if cart.is_empty():
            logger.info("Checkout rejected for %s: cart is empty", customer.name)
            raise EmptyCartError()

        items = cart.items

        # Phase 1: validate and price
        subtotal = Money.zero()
        shippable: list[CartItem] = []
        for item in items:
            product = item.product
            if product.is_expired():
                logger.info("Checkout rejected for %s: %s expired", customer.name, product.name)
                raise ExpiredProductError(product.name)
            if item.quantity.value > product.quantity:
                logger.info(
                    "Checkout rejected for %s: %s out of stock (need %d, have %d)",
                    customer.name, product.name, item.quantity.value, product.quantity,
                )
                raise OutOfStockError(product.name, item.quantity.value, product.quantity)
            subtotal = subtotal + item.line_total
            if product.requires_shipping():
                shippable.append(item)

        shipping_fee = self._shipping.fee_for(shippable)
        total = subtotal + shipping_fee
        logger.debug(
            "Validated %d items for %s: subtotal=%s shipping=%s",
            len(items), customer.name, subtotal, shipping_fee,
        )

        # Phase 2: charge
        try:
            customer.deduct(total)
        except InsufficientFundsError:
            logger.info(
                "Checkout rejected for %s: total %s exceeds balance %s",
                customer.name, total, customer.balance,
            )
            raise

        # Phase 3: mutate stock
        for item in items:
            item.product.reduce_quantity(item.quantity.value)

        logger.info(
            "Checkout completed for %s: charged %s, remaining balance %s",
            customer.name, total, customer.balance,
        )

        return Receipt(
            customer_name=customer.name,
            lines=tuple(
                ReceiptLine(
                    product_name=item.product.name,
                    quantity=item.quantity.value,
                    line_total=item.line_total,
                )
                for item in items
            ),
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            remaining_balance=customer.balance,
            shipment=self._shipping.build_shipment(shippable),
        )
