"""Abstract port for announcing shipments.

Defined in the domain layer so checkout never depends on how (or where)
the notice is delivered.  Concrete implementations live in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from retail.domain.model.receipt import Shipment


class ShippingNotifier(ABC):

    @abstractmethod
    def notify(self, shipment: Shipment) -> None:
        """Announce a shipment. Called only after the customer was charged."""
