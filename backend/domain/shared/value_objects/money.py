"""Money value object.

Decimal amount with a currency code. Arithmetic and comparison are only
defined between amounts of the same currency.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from domain.shared.errors import ErrorKind, ValidationError

DEFAULT_CURRENCY = "KRW"

AmountLike = Union[Decimal, int, str]


@dataclass(frozen=True)
class Money:
    """Value object for a non-negative monetary amount.

    Attributes:
        amount: Decimal amount (>= 0)
        currency: Currency code (non-blank, defaults to KRW)

    Examples:
        >>> Money.of(4000) + Money.of(500)
        Money(amount=Decimal('4500'), currency='KRW')

        >>> Money.of(6500).is_greater_than(Money.of(6000))
        True

    Raises:
        ValidationError: NEGATIVE_AMOUNT, EMPTY_CURRENCY or CURRENCY_MISMATCH.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        """Validate money invariants."""
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", _to_decimal(self.amount))

        if self.amount < 0:
            raise ValidationError(
                ErrorKind.NEGATIVE_AMOUNT,
                f"Amount must be zero or positive, got {self.amount}",
            )

        if not self.currency or not self.currency.strip():
            raise ValidationError(ErrorKind.EMPTY_CURRENCY, "Currency must not be blank")

    @classmethod
    def of(cls, amount: AmountLike, currency: str = DEFAULT_CURRENCY) -> "Money":
        """Build Money from an int, numeric string or Decimal."""
        return cls(_to_decimal(amount), currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(Decimal(0), currency)

    def __add__(self, other: "Money") -> "Money":
        self._require_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._require_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def add(self, other: "Money") -> "Money":
        return self + other

    def subtract(self, other: "Money") -> "Money":
        return self - other

    def is_greater_than(self, other: "Money") -> bool:
        """Strict numeric comparison.

        Raises:
            ValidationError: CURRENCY_MISMATCH if currencies differ.
        """
        self._require_same_currency(other)
        return self.amount > other.amount

    def _require_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValidationError(
                ErrorKind.CURRENCY_MISMATCH,
                f"Currency mismatch: {self.currency} != {other.currency}",
            )

    def __str__(self) -> str:
        return f"{self.amount}{self.currency}"


def _to_decimal(value: AmountLike) -> Decimal:
    if isinstance(value, float):
        # str() first so 0.1 stays 0.1
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise TypeError(f"Cannot convert {value!r} to a money amount") from e
