"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

# Longest numeric prefix of a price bound, e.g. " 30.5kg" -> "30.5".
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_INFINITY = re.compile(r"^\s*([+-]?)Infinity")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would show
    up when summing cart lines.
    """

    amount: Decimal
    currency: str = "MXN"

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
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "MXN") -> Money:
        """Convenient factory that coerces to Decimal safely.

        Floats go through ``str`` first so ``19.99`` stays ``Decimal("19.99")``.
        """
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = "MXN") -> Money:
        return Money(Decimal("0"), currency)


def parse_price_bound(raw: str | float | int | Decimal | None) -> Decimal | None:
    """Parse a price filter bound, returning None when it is unusable.

    Strings are read leniently: leading whitespace is skipped and the
    longest numeric prefix wins, so ``"30abc"`` reads as ``30``.
    ``"Infinity"`` and ``"-Infinity"`` read as unbounded, as does an
    exponent too large to represent. Only ASCII digits count. Anything without
    a numeric prefix yields None, which callers treat as "no filter".
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, Decimal)):
        try:
            value = Decimal(str(raw))
        except InvalidOperation:
            return None
        return None if value.is_nan() else value

    text = str(raw)
    infinity = _INFINITY.match(text)
    if infinity:
        return Decimal("-Infinity") if infinity.group(1) == "-" else Decimal("Infinity")

    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return None
    number = match.group(1)
    try:
        return Decimal(number)
    except InvalidOperation:
        # Exponent out of range: overflow reads as unbounded, underflow as zero.
        mantissa, _, exponent = number.lower().partition("e")
        if Decimal(mantissa) == 0 or exponent.startswith("-"):
            return Decimal("0")
        return Decimal("-Infinity") if mantissa.startswith("-") else Decimal("Infinity")


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a cart line never holds zero or
    negative units.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
