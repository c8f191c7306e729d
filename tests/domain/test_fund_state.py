"""Tests for FundState, ScholarRecord and FundResult."""

from decimal import Decimal

import pytest

from scholarship_kernel.domain.results import FundErrorKind, FundResult
from scholarship_kernel.domain.state import FundState, ScholarRecord, ScholarStatus
from scholarship_kernel.domain.values import Currency, Money
from scholarship_kernel.exceptions import (
    InvalidAmountError,
    InvalidCurrencyError,
    OwnerImmutableError,
    ScholarshipFundError,
)


class TestFundState:

    def test_new_state_is_empty(self):
        state = FundState(owner="ST0000...")

        assert state.currency == Currency("USD")
        assert state.total_funds == Money.zero("USD")
        assert state.donors == {}
        assert state.scholars == {}

    def test_total_funds_always_starts_at_zero(self):
        with pytest.raises(TypeError):
            FundState(owner="ST0000...", total_funds=Money.of(10, "USD"))

        state = FundState(owner="ST0000...", currency="KWD")
        assert isinstance(state.total_funds, Money)
        assert state.total_funds == Money.zero("KWD")

    def test_currency_string_normalized(self):
        state = FundState(owner="ST0000...", currency="eur")
        assert state.currency == Currency("EUR")
        assert state.total_funds.currency == Currency("EUR")

    def test_unknown_currency_rejected(self):
        with pytest.raises(InvalidCurrencyError):
            FundState(owner="ST0000...", currency="ZZZ")

    def test_owner_cannot_be_reassigned(self):
        state = FundState(owner="ST0000...")

        with pytest.raises(OwnerImmutableError) as exc_info:
            state.owner = "ST1234..."

        assert state.owner == "ST0000..."
        assert exc_info.value.code == "OWNER_IMMUTABLE"
        assert isinstance(exc_info.value, ScholarshipFundError)

    def test_contribution_of_defaults_to_zero(self):
        state = FundState(owner="ST0000...", currency="GBP")
        assert state.contribution_of("ST1234...") == Money.zero("GBP")

    def test_fresh_keeps_owner_and_currency(self):
        state = FundState(owner="ST0000...", currency="JPY")
        state.donors["ST1234..."] = Money.of(100, "JPY")

        fresh = state.fresh()

        assert fresh is not state
        assert fresh.owner == "ST0000..."
        assert fresh.currency == Currency("JPY")
        assert fresh.donors == {}

    def test_snapshot_is_plain_data(self):
        state = FundState(owner="ST0000...")
        state.donors["ST1234..."] = Money.of(10, "USD")
        state.scholars["ST9876..."] = ScholarRecord(Money.of(5, "USD"))

        total, donors, scholars = state.snapshot()

        assert total == Decimal("0")
        assert donors == {"ST1234...": Decimal("10")}
        assert scholars == {"ST9876...": {"amount": Decimal("5"), "status": "awarded"}}


class TestScholarRecord:

    def test_default_status_awarded(self):
        record = ScholarRecord(Money.of(200, "USD"))
        assert record.status is ScholarStatus.AWARDED
        assert record.as_dict() == {"amount": 200, "status": "awarded"}

    def test_records_compare_by_value(self):
        assert ScholarRecord(Money.of(200, "USD")) == ScholarRecord(Money.of("200.00", "USD"))


class TestFundResult:

    def test_success_shape(self):
        result = FundResult.success(Money.of(100, "USD"))

        assert result.is_success
        assert bool(result)
        assert result.error is None
        assert result.as_dict() == {"value": Decimal("100")}
        assert result.unwrap() == Money.of(100, "USD")

    def test_failure_shape(self):
        result = FundResult.failure(FundErrorKind.INVALID_AMOUNT, amount="0")

        assert not result.is_success
        assert not result
        assert result.value is None
        assert result.amount is None
        assert result.as_dict() == {"error": "Invalid amount"}

    def test_failure_unwrap_raises(self):
        result = FundResult.failure(FundErrorKind.INVALID_AMOUNT, amount="-3")

        with pytest.raises(InvalidAmountError, match="-3"):
            result.unwrap()

    def test_must_carry_exactly_one_side(self):
        with pytest.raises(ValueError):
            FundResult()
        with pytest.raises(ValueError):
            FundResult(value=Money.of(1, "USD"), error=FundErrorKind.UNAUTHORIZED)

    @pytest.mark.parametrize(
        "kind, message",
        [
            (FundErrorKind.INVALID_AMOUNT, "Invalid amount"),
            (FundErrorKind.UNAUTHORIZED, "Owner only"),
            (FundErrorKind.INSUFFICIENT_FUNDS, "Insufficient funds"),
        ],
    )
    def test_error_messages(self, kind, message):
        assert kind.message == message
        assert kind.code == kind.value
