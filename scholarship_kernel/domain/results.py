"""
Results -- Tagged success/failure values returned by ledger operations.

Responsibility:
    Ledger operations never raise for business rule violations. They return a
    FundResult that is either a success carrying the affected amount or a
    failure carrying a FundErrorKind. Callers inspect ``is_success`` before
    reading ``value``.

Architecture position:
    Kernel > Domain -- pure data, zero I/O.

Failure modes:
    - ``unwrap()`` raises the FundOperationError subclass matching the
      failure kind, for callers that prefer exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, unique
from typing import Any

from scholarship_kernel.domain.values import Money
from scholarship_kernel.exceptions import (
    FundOperationError,
    InsufficientFundsError,
    InvalidAmountError,
    UnauthorizedError,
)


@unique
class FundErrorKind(str, Enum):
    """Why a ledger operation was rejected."""

    INVALID_AMOUNT = "INVALID_AMOUNT"
    UNAUTHORIZED = "UNAUTHORIZED"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"

    @property
    def code(self) -> str:
        return self.value

    @property
    def message(self) -> str:
        """Caller-facing message, as the contract reports it."""
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: dict[FundErrorKind, str] = {
    FundErrorKind.INVALID_AMOUNT: "Invalid amount",
    FundErrorKind.UNAUTHORIZED: "Owner only",
    FundErrorKind.INSUFFICIENT_FUNDS: "Insufficient funds",
}


@dataclass(frozen=True)
class FundResult:
    """
    Outcome of a ledger operation.

    Contract:
        Exactly one of ``value`` and ``error`` is set. ``details`` carries the
        structured data needed to build the matching exception (sender, owner,
        requested and available amounts) and is empty on success.
    """

    value: Money | None = None
    error: FundErrorKind | None = None
    details: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("FundResult must carry exactly one of value or error")

    @classmethod
    def success(cls, value: Money) -> FundResult:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: FundErrorKind, **details: str) -> FundResult:
        return cls(error=kind, details=dict(details))

    @property
    def is_success(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.is_success

    def as_dict(self) -> dict[str, Any]:
        """
        Shape the result the way the contract reports it.

        ``{"value": Decimal}`` on success, ``{"error": message}`` on failure.
        """
        if self.error is not None:
            return {"error": self.error.message}
        return {"value": self.value.amount}

    def unwrap(self) -> Money:
        """Return the value, or raise the exception matching the error kind."""
        if self.error is None:
            return self.value
        raise self.to_exception()

    def to_exception(self) -> FundOperationError:
        if self.error is FundErrorKind.INVALID_AMOUNT:
            return InvalidAmountError(self.details.get("amount", ""))
        if self.error is FundErrorKind.UNAUTHORIZED:
            return UnauthorizedError(
                self.details.get("sender", ""), self.details.get("owner", "")
            )
        if self.error is FundErrorKind.INSUFFICIENT_FUNDS:
            return InsufficientFundsError(
                self.details.get("requested", ""), self.details.get("available", "")
            )
        raise ValueError("Successful result has no exception")

    @property
    def amount(self) -> Decimal | None:
        """Bare Decimal amount of a successful result."""
        return self.value.amount if self.value is not None else None
