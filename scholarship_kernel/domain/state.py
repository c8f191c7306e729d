"""
Fund state -- the in-memory record a scholarship fund operates on.

Responsibility:
    Holds the running total, per-donor contributions and per-scholar awards
    for one fund. There is no module-level instance: every caller constructs
    its own FundState and passes it to the ledger operations explicitly.

Invariants:
    - total_funds == sum(donors) - sum(awarded amounts); maintained by the
      ledger operations, not re-checked here.
    - owner is fixed at construction; reassignment raises OwnerImmutableError.
    - Every amount held is denominated in ``currency``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, unique
from typing import Any

from scholarship_kernel.domain.values import Currency, Money, Principal
from scholarship_kernel.exceptions import OwnerImmutableError


@unique
class ScholarStatus(str, Enum):
    """Lifecycle of a scholar record. Absent until awarded; no later states."""

    AWARDED = "awarded"


@dataclass(frozen=True)
class ScholarRecord:
    """An awarded scholarship."""

    amount: Money
    status: ScholarStatus = ScholarStatus.AWARDED

    def as_dict(self) -> dict[str, Any]:
        return {"amount": self.amount.amount, "status": self.status.value}


@dataclass
class FundState:
    owner: Principal
    currency: Currency = field(default_factory=lambda: Currency("USD"))
    total_funds: Money = field(init=False)
    donors: dict[Principal, Money] = field(default_factory=dict)
    scholars: dict[Principal, ScholarRecord] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.currency, str):
            self.currency = Currency(self.currency)
        self.total_funds = Money.zero(self.currency)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "owner" and "owner" in self.__dict__:
            raise OwnerImmutableError(self.owner)
        super().__setattr__(name, value)

    def contribution_of(self, donor: Principal) -> Money:
        """Cumulative contribution of ``donor``; zero when never seen."""
        return self.donors.get(donor, Money.zero(self.currency))

    def scholar_record(self, scholar: Principal) -> ScholarRecord | None:
        return self.scholars.get(scholar)

    def fresh(self) -> FundState:
        """A new, empty state for the same owner and currency."""
        return FundState(owner=self.owner, currency=self.currency)

    def snapshot(self) -> tuple[Decimal, dict[Principal, Decimal], dict[Principal, dict[str, Any]]]:
        """Plain-data copy of the state, for before/after comparisons."""
        return (
            self.total_funds.amount,
            {donor: amount.amount for donor, amount in self.donors.items()},
            {scholar: record.as_dict() for scholar, record in self.scholars.items()},
        )
