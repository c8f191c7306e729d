"""
Values -- Immutable, self-validating value objects for fund amounts.

Responsibility:
    Provides the value types the ledger works in: Currency, Money and the
    Principal identifier alias. Amounts are fixed-point Decimals paired with
    their currency; floats never enter the ledger.

Architecture position:
    Kernel > Domain -- pure, zero I/O. Imported by state, results and
    the ledger operations. Depends only on CurrencyRegistry and the
    kernel exception types.

Failure modes:
    - InvalidCurrencyError on construction with an unknown currency code
    - TypeError when a float (or bool) is offered as an amount
    - ValueError when an amount is unparseable or not finite
    - CurrencyMismatchError when arithmetic or comparison mixes currencies
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

from scholarship_kernel.domain.currency import CurrencyRegistry
from scholarship_kernel.exceptions import CurrencyMismatchError, InvalidCurrencyError

# Opaque account identifier, e.g. "ST1234...".
Principal: TypeAlias = str


@dataclass(frozen=True, slots=True)
class Currency:
    """
    ISO 4217 currency code value object.

    Normalized (uppercased, stripped) and validated against CurrencyRegistry
    on construction.
    """

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper().strip() if isinstance(self.code, str) else ""
        if not CurrencyRegistry.is_valid(normalized):
            raise InvalidCurrencyError(str(self.code))
        object.__setattr__(self, "code", normalized)

    @property
    def decimal_places(self) -> int:
        return CurrencyRegistry.get_decimal_places(self.code)

    @property
    def name(self) -> str:
        info = CurrencyRegistry.get_info(self.code)
        return info.name if info else self.code

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency({self.code!r})"


def _to_decimal(value: object) -> Decimal:
    # bool is an int subclass; True is not an amount
    if isinstance(value, (float, bool)):
        raise TypeError(f"Money amount must be Decimal, int or str, got {type(value).__name__}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {value!r}") from e
    else:
        raise TypeError(f"Money amount must be Decimal, int or str, got {type(value).__name__}")
    if not result.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return result


@dataclass(frozen=True, slots=True)
class Money:
    """
    Monetary amount value object.

    Contract:
        Pairs a Decimal amount with its Currency -- they are never separated.

    Guarantees:
        - Immutable and hashable
        - amount is always a finite Decimal (never float)
        - Arithmetic and ordering refuse to mix currencies

    Non-goals:
        - Does NOT auto-round; is_representable reports whether the amount
          fits the currency's minor unit.
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))
        if isinstance(self.currency, str):
            object.__setattr__(self, "currency", Currency(self.currency))
        elif not isinstance(self.currency, Currency):
            raise TypeError(f"currency must be Currency or str, got {type(self.currency)}")

    @classmethod
    def of(cls, amount: Decimal | str | int, currency: str | Currency) -> Money:
        """Factory method for creating Money."""
        if isinstance(currency, str):
            currency = Currency(currency)
        return cls(amount=_to_decimal(amount), currency=currency)

    @classmethod
    def zero(cls, currency: str | Currency) -> Money:
        """Create a zero amount in the given currency."""
        if isinstance(currency, str):
            currency = Currency(currency)
        return cls(amount=Decimal("0"), currency=currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    @property
    def is_representable(self) -> bool:
        """True when the amount has no digits below the currency's minor unit."""
        exponent = self.amount.normalize().as_tuple().exponent
        return exponent >= -self.currency.decimal_places

    def _check_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return self.amount >= other.amount

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.code}"

    def __repr__(self) -> str:
        return f"Money({self.amount!r}, {self.currency!r})"
