"""Application service: Checkout use case.

Runs the domain checkout, then reports the outcome through the
shipping notifier and the receipt printer.  Errors from the domain are
not handled here; the caller decides how to surface them.
"""

from __future__ import annotations

from retail.application.dto import CheckoutDTO, ReceiptLineDTO
from retail.domain.model.cart import Cart
from retail.domain.model.customer import Customer
from retail.domain.model.receipt import Receipt
from retail.domain.notification.receipt_printer import ReceiptPrinter
from retail.domain.notification.shipping_notifier import ShippingNotifier
from retail.domain.service.checkout_service import CheckoutService


class CheckoutHandler:

    def __init__(
        self,
        checkout_service: CheckoutService,
        shipping_notifier: ShippingNotifier,
        receipt_printer: ReceiptPrinter,
    ) -> None:
        self._checkout_service = checkout_service
        self._shipping_notifier = shipping_notifier
        self._receipt_printer = receipt_printer

    def handle(self, customer: Customer, cart: Cart) -> CheckoutDTO:
        receipt = self._checkout_service.checkout(customer, cart)

        if receipt.shipment is not None:
            self._shipping_notifier.notify(receipt.shipment)
        self._receipt_printer.print_receipt(receipt)

        return self._to_dto(receipt)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(receipt: Receipt) -> CheckoutDTO:
        shipment = receipt.shipment
        package_weight = None
        if shipment is not None and shipment.total_weight:
            package_weight = shipment.total_weight.format_kilograms()
        return CheckoutDTO(
            customer_name=receipt.customer_name,
            items=[
                ReceiptLineDTO(
                    product_name=line.product_name,
                    quantity=line.quantity,
                    line_total=str(line.line_total),
                )
                for line in receipt.lines
            ],
            subtotal=str(receipt.subtotal),
            shipping_fee=str(receipt.shipping_fee),
            total=str(receipt.total),
            remaining_balance=str(receipt.remaining_balance),
            shipped_items=len(shipment.lines) if shipment is not None else 0,
            package_weight=package_weight,
        )
