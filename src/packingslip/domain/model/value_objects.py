"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate parsing and validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from packingslip.domain.exceptions import ValidationError

CATALOG_NO_PREFIX = "MSM-"
CATALOG_NO_WIDTH = 5
ORDER_NO_WIDTH = 8


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that subtotals and totals are exact sums of the
    prices written in the catalog.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal | None) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if amount is None or isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer quantity."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Quantity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(raw: str | int | None) -> Quantity:
        """Parse a quantity written either as an integer or as a string."""
        return Quantity(parse_int(raw, "qty"))


def parse_int(raw: object, field_name: str) -> int:
    """Strictly parse an integer field from a loaded document."""
    if isinstance(raw, bool):
        raise ValidationError(f"Invalid {field_name}: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise ValidationError(f"Invalid {field_name}: {raw!r}") from exc
    raise ValidationError(f"Invalid {field_name}: {raw!r}")


def format_catalog_no(number: int) -> str:
    """42 -> 'MSM-00042'."""
    return f"{CATALOG_NO_PREFIX}{number:0{CATALOG_NO_WIDTH}d}"


def format_order_no(number: int) -> str:
    """7 -> '00000007'. Numbers wider than eight digits are left as-is."""
    return f"{number:0{ORDER_NO_WIDTH}d}"

