"""Tests for the structured logging system (scholarship_kernel/logging_config.py)."""

import json
import logging
from decimal import Decimal
from io import StringIO

import pytest

from scholarship_kernel.domain.results import FundErrorKind
from scholarship_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    get_logger,
    reset_logging,
)


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


def _make_handler() -> tuple[logging.Handler, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    return handler, stream


def _parse_log(stream: StringIO) -> dict:
    """Parse the first JSON log line from a stream."""
    line = stream.getvalue().strip().split("\n")[0]
    return json.loads(line)


def _parse_all_logs(stream: StringIO) -> list[dict]:
    lines = stream.getvalue().strip().split("\n")
    return [json.loads(line) for line in lines if line]


# ---------------------------------------------------------------------------
# StructuredFormatter tests
# ---------------------------------------------------------------------------


class TestStructuredFormatter:

    def test_basic_json_output(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("hello")

        record = _parse_log(stream)
        assert record["level"] == "INFO"
        assert record["message"] == "hello"
        assert record["logger"] == "scholarship_kernel.test"
        assert "ts" in record

    def test_decimal_and_enum_extras_serialized(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info(
            "donation_accepted",
            extra={"amount": Decimal("100.50"), "error_code": FundErrorKind.UNAUTHORIZED},
        )

        record = _parse_log(stream)
        assert record["amount"] == "100.50"
        assert record["error_code"] == "UNAUTHORIZED"

    def test_context_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        LogContext.set(correlation_id="abc-123", fund_id="default")
        get_logger("test").info("test_msg")

        record = _parse_log(stream)
        assert record["correlation_id"] == "abc-123"
        assert record["fund_id"] == "default"

    def test_no_context_fields_when_empty(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("bare_message")

        record = _parse_log(stream)
        assert "correlation_id" not in record
        assert "operation" not in record

    def test_kernel_exception_fields_extracted(self):
        from scholarship_kernel.exceptions import InsufficientFundsError

        handler, stream = _make_handler()
        configure_logging(handler=handler)
        try:
            raise InsufficientFundsError("200", "100")
        except InsufficientFundsError:
            get_logger("test").error("award_failed", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_code"] == "INSUFFICIENT_FUNDS"
        assert record["exc_type"] == "InsufficientFundsError"
        assert record["exc_requested"] == "200"
        assert record["exc_available"] == "100"
        assert "traceback" in record

    def test_debug_suppressed_at_info(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("first")
        logger.warning("second", extra={"k": "v"})
        logger.debug("third")

        logs = _parse_all_logs(stream)
        assert [r["message"] for r in logs] == ["first", "second"]


# ---------------------------------------------------------------------------
# LogContext tests
# ---------------------------------------------------------------------------


class TestLogContext:

    def test_set_and_get(self):
        LogContext.set(correlation_id="x", actor_id="ST1234...")
        assert LogContext.get_all() == {"correlation_id": "x", "actor_id": "ST1234..."}

    def test_clear(self):
        LogContext.set(operation="donate_funds")
        LogContext.clear()
        assert LogContext.get_all() == {}

    def test_bind_restores_outer_value(self):
        LogContext.set(actor_id="outer")
        with LogContext.bind(actor_id="inner"):
            assert LogContext.get_all()["actor_id"] == "inner"
        assert LogContext.get_all()["actor_id"] == "outer"

    def test_bind_restores_none(self):
        with LogContext.bind(operation="award_scholarship"):
            assert LogContext.get_all()["operation"] == "award_scholarship"
        assert "operation" not in LogContext.get_all()

    def test_all_fields(self):
        LogContext.set(correlation_id="c", fund_id="f", actor_id="a", operation="o")
        assert len(LogContext.get_all()) == 4


# ---------------------------------------------------------------------------
# configure_logging tests
# ---------------------------------------------------------------------------


class TestConfigureLogging:

    def test_idempotent(self):
        h1, _ = _make_handler()
        configure_logging(handler=h1)
        h2, _ = _make_handler()
        configure_logging(handler=h2)
        # pytest's capture handlers may also sit on this logger
        handlers = logging.getLogger("scholarship_kernel").handlers
        assert h1 in handlers
        assert h2 not in handlers

    def test_get_logger_returns_child(self):
        assert get_logger("services.fund_ledger").name == "scholarship_kernel.services.fund_ledger"

    def test_logger_hierarchy(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler, level=logging.DEBUG)
        get_logger("deep.nested.module").debug("hierarchy_test")

        record = _parse_log(stream)
        assert record["logger"] == "scholarship_kernel.deep.nested.module"
