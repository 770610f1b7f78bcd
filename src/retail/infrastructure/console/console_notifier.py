"""Console implementations of the shipping notifier and receipt printer.

Lines are written as ``label<TAB>value`` so the output matches the
store's traditional till receipts.
"""

from __future__ import annotations

import click

from retail.domain.model.receipt import Receipt, Shipment
from retail.domain.notification.receipt_printer import ReceiptPrinter
from retail.domain.notification.shipping_notifier import ShippingNotifier


def format_shipment_notice(shipment: Shipment) -> list[str]:
    lines = ["** Shipment notice **"]
    for line in shipment.lines:
        lines.append(f"{line.quantity}x {line.product_name}")
        lines.append(str(line.weight))
    total = shipment.total_weight
    if total:
        lines.append(f"Total package weight {total.format_kilograms()}")
    return lines


def format_receipt(receipt: Receipt) -> list[str]:
    lines = ["** Checkout receipt **"]
    for line in receipt.lines:
        lines.append(f"{line.quantity}x {line.product_name}\t{line.line_total}")
    lines.append("-" * 22)
    lines.append(f"Subtotal\t{receipt.subtotal}")
    lines.append(f"Shipping\t{receipt.shipping_fee}")
    lines.append(f"Amount\t\t{receipt.total}")
    lines.append(f"Remaining balance\t{receipt.remaining_balance}")
    return lines


class ConsoleShippingNotifier(ShippingNotifier):

    def notify(self, shipment: Shipment) -> None:
        for line in format_shipment_notice(shipment):
            click.echo(line)


class ConsoleReceiptPrinter(ReceiptPrinter):

    def print_receipt(self, receipt: Receipt) -> None:
        for line in format_receipt(receipt):
            click.echo(line)
