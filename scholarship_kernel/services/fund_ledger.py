"""
Fund ledger -- donation, award and query operations over a FundState.

Responsibility:
    Implements the scholarship fund contract's operations. Each function
    takes the FundState it acts on; nothing is read from or written to
    module-level state.

Ordering:
    award_scholarship checks authorization strictly before anything else, so
    a non-owner asking for more than the fund holds is told UNAUTHORIZED,
    never INSUFFICIENT_FUNDS. All guards run before any mutation.

Failure modes:
    - Business rule violations come back as FundResult failures.
    - TypeError for float/bool amounts, CurrencyMismatchError for Money in
      another currency. These are caller bugs and are raised.
"""

from __future__ import annotations

from decimal import Decimal

from scholarship_kernel.domain.results import FundErrorKind, FundResult
from scholarship_kernel.domain.state import FundState, ScholarRecord, ScholarStatus
from scholarship_kernel.domain.values import Currency, Money, Principal
from scholarship_kernel.exceptions import CurrencyMismatchError
from scholarship_kernel.logging_config import LogContext, get_logger

logger = get_logger("services.fund_ledger")

AmountLike = Money | Decimal | int | str


def coerce_amount(value: AmountLike, currency: Currency) -> Money:
    """Convert a caller-supplied amount to Money in the fund's currency."""
    if isinstance(value, Money):
        if value.currency != currency:
            raise CurrencyMismatchError(currency.code, value.currency.code)
        return value
    return Money.of(value, currency)


def donate_funds(state: FundState, amount: AmountLike, sender: Principal) -> FundResult:
    """Add ``amount`` to the fund on behalf of ``sender``."""
    money = coerce_amount(amount, state.currency)

    with LogContext.bind(operation="donate_funds", actor_id=sender):
        if not money.is_positive or not money.is_representable:
            logger.warning(
                "donation_rejected",
                extra={"error_code": FundErrorKind.INVALID_AMOUNT.code, "amount": money.amount},
            )
            return FundResult.failure(FundErrorKind.INVALID_AMOUNT, amount=str(money.amount))

        state.total_funds = state.total_funds + money
        state.donors[sender] = state.contribution_of(sender) + money

        logger.info(
            "donation_accepted",
            extra={"amount": money.amount, "total_funds": state.total_funds.amount},
        )
        return FundResult.success(money)


def award_scholarship(
    state: FundState,
    scholar: Principal,
    amount: AmountLike,
    sender: Principal,
) -> FundResult:
    """
    Pay ``amount`` out of the fund to ``scholar``.

    Only the fund owner may award. A later award to the same scholar
    replaces the earlier record; the earlier payout is not refunded.
    """
    money = coerce_amount(amount, state.currency)

    with LogContext.bind(operation="award_scholarship", actor_id=sender):
        if sender != state.owner:
            logger.warning(
                "scholarship_rejected",
                extra={"error_code": FundErrorKind.UNAUTHORIZED.code, "scholar": scholar},
            )
            return FundResult.failure(
                FundErrorKind.UNAUTHORIZED, sender=sender, owner=state.owner
            )

        if not money.is_representable:
            logger.warning(
                "scholarship_rejected",
                extra={"error_code": FundErrorKind.INVALID_AMOUNT.code, "scholar": scholar},
            )
            return FundResult.failure(FundErrorKind.INVALID_AMOUNT, amount=str(money.amount))

        if money > state.total_funds:
            logger.warning(
                "scholarship_rejected",
                extra={
                    "error_code": FundErrorKind.INSUFFICIENT_FUNDS.code,
                    "scholar": scholar,
                    "amount": money.amount,
                    "total_funds": state.total_funds.amount,
                },
            )
            return FundResult.failure(
                FundErrorKind.INSUFFICIENT_FUNDS,
                requested=str(money.amount),
                available=str(state.total_funds.amount),
            )

        state.total_funds = state.total_funds - money
        state.scholars[scholar] = ScholarRecord(amount=money, status=ScholarStatus.AWARDED)

        logger.info(
            "scholarship_awarded",
            extra={
                "scholar": scholar,
                "amount": money.amount,
                "total_funds": state.total_funds.amount,
            },
        )
        return FundResult.success(money)


def get_total_funds(state: FundState) -> Money:
    return state.total_funds


def get_donor_contribution(state: FundState, donor: Principal) -> Money:
    """Zero for a donor who never contributed; absence is not an error."""
    return state.contribution_of(donor)


def get_scholar_info(state: FundState, scholar: Principal) -> ScholarRecord | None:
    return state.scholar_record(scholar)


class LedgerMock:
    """
    A FundState bound to the ledger operations.

    Reads like the contract it stands in for: ``mock.donate_funds(100, donor)``.
    ``reset()`` swaps in a fresh state for the same owner and currency.
    When ``fund_id`` is given, mutating calls log under that fund.
    """

    def __init__(self, state: FundState, fund_id: str | None = None):
        self.state = state
        self.fund_id = fund_id

    @classmethod
    def create(cls, owner: Principal, currency: Currency | str = "USD") -> LedgerMock:
        return cls(FundState(owner=owner, currency=currency))

    @property
    def owner(self) -> Principal:
        return self.state.owner

    def reset(self) -> None:
        self.state = self.state.fresh()

    def donate_funds(self, amount: AmountLike, sender: Principal) -> FundResult:
        with LogContext.bind(fund_id=self.fund_id):
            return donate_funds(self.state, amount, sender)

    def award_scholarship(
        self, scholar: Principal, amount: AmountLike, sender: Principal
    ) -> FundResult:
        with LogContext.bind(fund_id=self.fund_id):
            return award_scholarship(self.state, scholar, amount, sender)

    def get_total_funds(self) -> Money:
        return get_total_funds(self.state)

    def get_donor_contribution(self, donor: Principal) -> Money:
        return get_donor_contribution(self.state, donor)

    def get_scholar_info(self, scholar: Principal) -> ScholarRecord | None:
        return get_scholar_info(self.state, scholar)
