"""
Pytest fixtures for the scholarship fund test suite.

Provides:
- Structured logging configured once per session, context cleared per test
- ``captured_logs`` for asserting on emitted JSON log records
- Principals and a fresh FundState / LedgerMock per test
"""

import json
import logging
from io import StringIO

import pytest

from scholarship_kernel.domain.state import FundState
from scholarship_kernel.domain.values import Currency
from scholarship_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from scholarship_kernel.services.fund_ledger import LedgerMock

OWNER = "ST0000..."
DONOR_1 = "ST1234..."
DONOR_2 = "ST5678..."
SCHOLAR_1 = "ST9876..."


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG, handler=logging.NullHandler())
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture scholarship_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, ledger):
            ledger.donate_funds(100, DONOR_1)
            logs = captured_logs()
            assert any(r["message"] == "donation_accepted" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("scholarship_kernel")
    previous_level = root.level
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Fund fixtures
# =============================================================================


@pytest.fixture
def owner() -> str:
    return OWNER


@pytest.fixture
def donor1() -> str:
    return DONOR_1


@pytest.fixture
def donor2() -> str:
    return DONOR_2


@pytest.fixture
def scholar1() -> str:
    return SCHOLAR_1


@pytest.fixture
def fund_state() -> FundState:
    """A fresh, empty USD fund owned by OWNER."""
    return FundState(owner=OWNER, currency=Currency("USD"))


@pytest.fixture
def ledger(fund_state) -> LedgerMock:
    return LedgerMock(fund_state)
