"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from retail.domain.exceptions import ValidationError


def _to_decimal(value: str | float | int | Decimal, kind: str) -> Decimal:
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {kind}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {kind}: {value!r}")
    return result


@dataclass(frozen=True)
class Money:
    """Monetary amount in the store's single currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(_to_decimal(amount, "money amount"))

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot buy zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful quantity
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Weight:
    """A non-negative weight in grams."""

    grams: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.grams, Decimal):
            raise ValidationError(
                f"Weight must be a Decimal, got {type(self.grams).__name__}"
            )
        if not self.grams.is_finite():
            raise ValidationError(f"Weight must be finite, got {self.grams}")
        if self.grams < Decimal("0"):
            raise ValidationError(f"Weight cannot be negative, got {self.grams}")

    @property
    def kilograms(self) -> Decimal:
        return self.grams / Decimal("1000")

    def format_kilograms(self) -> str:
        """Kilograms without trailing zeros but with at least one decimal."""
        kg = self.kilograms.normalize()
        if kg.as_tuple().exponent >= 0:
            return f"{kg:.1f}kg"
        return f"{kg:f}kg"

    def __add__(self, other: Weight) -> Weight:
        return Weight(self.grams + other.grams)

    def __mul__(self, factor: int) -> Weight:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Weight by int, got {type(factor).__name__}")
        return Weight(self.grams * factor)

    def __bool__(self) -> bool:
        return self.grams > 0

    def __str__(self) -> str:
        return f"{self.grams.normalize():f}g"

    @staticmethod
    def of(grams: str | float | int | Decimal) -> Weight:
        return Weight(_to_decimal(grams, "weight"))

    @staticmethod
    def zero() -> Weight:
        return Weight(Decimal("0"))
