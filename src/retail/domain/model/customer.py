"""Customer — a named buyer with a prepaid balance."""

from __future__ import annotations

from dataclasses import dataclass

from retail.domain.exceptions import InsufficientFundsError, ValidationError
from retail.domain.model.value_objects import Money


@dataclass(eq=False)
class Customer:

    name: str
    balance: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required")

    def deduct(self, amount: Money) -> None:
        """Charge *amount* against the balance.

        The balance is left untouched if it does not cover the amount.
        """
        if amount > self.balance:
            raise InsufficientFundsError(required=amount, available=self.balance)
        self.balance = self.balance - amount
