"""Tests for the console shipment notice and receipt output."""

from retail.domain.model.receipt import Receipt, ReceiptLine, Shipment, ShipmentLine
from retail.domain.model.value_objects import Money, Weight
from retail.infrastructure.console.console_notifier import (
    ConsoleReceiptPrinter,
    ConsoleShippingNotifier,
    format_receipt,
    format_shipment_notice,
)


def _shipment() -> Shipment:
    return Shipment(lines=(ShipmentLine("TV", 1, Weight.of("10000")),))


def _receipt() -> Receipt:
    return Receipt(
        customer_name="Anton",
        lines=(
            ReceiptLine("Cheese", 2, Money.of("200")),
            ReceiptLine("TV", 1, Money.of("300")),
        ),
        subtotal=Money.of("500"),
        shipping_fee=Money.of("10"),
        remaining_balance=Money.of("290"),
        shipment=_shipment(),
    )


class TestShipmentNotice:

    def test_format(self):
        assert format_shipment_notice(_shipment()) == [
            "** Shipment notice **",
            "1x TV",
            "10000g",
            "Total package weight 10.0kg",
        ]

    def test_weightless_shipment_omits_total(self):
        shipment = Shipment(lines=(ShipmentLine("Voucher", 2, Weight.zero()),))
        assert format_shipment_notice(shipment) == [
            "** Shipment notice **",
            "2x Voucher",
            "0g",
        ]

    def test_small_positive_weight_is_not_rounded_to_zero(self):
        shipment = Shipment(lines=(ShipmentLine("Pen", 1, Weight.of("40")),))
        assert format_shipment_notice(shipment)[-1] == "Total package weight 0.04kg"

    def test_total_weight_keeps_all_decimals(self):
        shipment = Shipment(lines=(
            ShipmentLine("Radio", 1, Weight.of("700")),
            ShipmentLine("Lamp", 1, Weight.of("550")),
        ))
        assert format_shipment_notice(shipment)[-1] == "Total package weight 1.25kg"

    def test_notifier_writes_to_stdout(self, capsys):
        ConsoleShippingNotifier().notify(_shipment())
        out = capsys.readouterr().out
        assert out.startswith("** Shipment notice **\n")
        assert "Total package weight 10.0kg\n" in out


class TestReceipt:

    def test_format_uses_tab_separated_values(self):
        assert format_receipt(_receipt()) == [
            "** Checkout receipt **",
            "2x Cheese\t200.00",
            "1x TV\t300.00",
            "----------------------",
            "Subtotal\t500.00",
            "Shipping\t10.00",
            "Amount\t\t510.00",
            "Remaining balance\t290.00",
        ]

    def test_printer_writes_to_stdout(self, capsys):
        ConsoleReceiptPrinter().print_receipt(_receipt())
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "** Checkout receipt **"
        assert out.splitlines()[-1] == "Remaining balance\t290.00"
