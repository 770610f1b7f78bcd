"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyCartError(ValidationError):
    """Checkout was attempted on a cart with no items."""

    def __init__(self) -> None:
        super().__init__("Cart is empty.")


class ExpiredProductError(ValidationError):
    """A cart item refers to a product past its expiry."""

    def __init__(self, product_name: str) -> None:
        super().__init__(f"{product_name} is expired.")
        self.product_name = product_name


class OutOfStockError(ValidationError):
    """More units were requested than the product has on hand."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"{product_name} is out of stock "
            f"(requested {requested}, have {available})."
        )
        self.product_name = product_name
        self.requested = requested
        self.available = available


class StockReductionError(OutOfStockError):
    """Stock could not be decremented during settlement.

    Checkout validates availability before charging, so this only
    surfaces if stock changed between the validation and mutation passes.
    """


class InsufficientFundsError(ValidationError):
    """The customer's balance does not cover the amount due."""

    def __init__(self, required: object, available: object) -> None:
        super().__init__(
            f"Insufficient balance (need {required}, have {available})."
        )
        self.required = required
        self.available = available
