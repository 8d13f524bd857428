"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import CurrencyMismatchError, ValidationError

_CENTS = Decimal("0.01")


def _to_decimal(value: str | float | int | Decimal) -> Decimal:
    # floats go through str() so 1.005 stays 1.005 instead of 1.00499...
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValidationError(f"Invalid money amount: {value!r}")
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {value!r}") from exc


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    The amount is always held with exactly two fractional digits, rounded
    half-up, and the currency code is upper-cased.  Every operation returns
    a new instance.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        if self.amount is None:
            raise ValidationError("Amount cannot be null")
        if self.currency is None or not str(self.currency).strip():
            raise ValidationError("Currency cannot be null or empty")
        amount = _to_decimal(self.amount)
        if not amount.is_finite():
            raise ValidationError(f"Invalid money amount: {self.amount!r}")
        object.__setattr__(self, "amount", amount.quantize(_CENTS, rounding=ROUND_HALF_UP))
        object.__setattr__(self, "currency", str(self.currency).strip().upper())

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str) -> Money:
        return Money(amount, currency)  # type: ignore[arg-type]

    @staticmethod
    def zero(currency: str) -> Money:
        return Money(Decimal("0"), currency)

    # --- Arithmetic -----------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, factor: int | float | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, float, Decimal)):
            raise TypeError(f"Can only multiply Money by a number, got {type(factor).__name__}")
        return Money(self.amount * _to_decimal(factor), self.currency)

    add = __add__
    subtract = __sub__
    multiply = __mul__

    # --- Comparisons ----------------------------------------------------------

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    def is_greater_than(self, other: Money) -> bool:
        return self > other

    def is_less_than(self, other: Money) -> bool:
        return self < other

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot operate on different currencies: {self.currency} and {other.currency}"
            )


_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email:
    """A syntactically valid, lower-cased e-mail address."""

    value: str

    def __post_init__(self) -> None:
        if self.value is None or not self.value.strip():
            raise ValidationError("Email cannot be null or empty")
        normalized = self.value.strip().lower()
        if not _EMAIL_PATTERN.match(normalized):
            raise ValidationError(f"Invalid email format: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    """Delivery or billing address.

    Every field except ``complement`` is required.  Values are trimmed.
    """

    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    zip_code: str
    country: str = "Brasil"
    complement: str | None = None

    def __post_init__(self) -> None:
        for name, label in (
            ("street", "Street"),
            ("number", "Number"),
            ("neighborhood", "Neighborhood"),
            ("city", "City"),
            ("state", "State"),
            ("zip_code", "Zip Code"),
            ("country", "Country"),
        ):
            value = getattr(self, name)
            if value is None or not str(value).strip():
                raise ValidationError(f"{label} cannot be null or empty")
            object.__setattr__(self, name, str(value).strip())
        if self.complement is not None:
            complement = self.complement.strip()
            object.__setattr__(self, "complement", complement or None)

    @property
    def full_address(self) -> str:
        head = f"{self.street}, {self.number}"
        if self.complement:
            head += f" - {self.complement}"
        return (
            f"{head}, {self.neighborhood}, {self.city} - {self.state}, "
            f"{self.zip_code}, {self.country}"
        )

    def __str__(self) -> str:
        return self.full_address
