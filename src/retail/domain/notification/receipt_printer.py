"""Abstract port for handing a receipt to the customer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from retail.domain.model.receipt import Receipt


class ReceiptPrinter(ABC):

    @abstractmethod
    def print_receipt(self, receipt: Receipt) -> None:
        """Output the receipt of a completed checkout."""
