"""
Bridges: FundConfig -> kernel objects.

The kernel never imports ``scholarship_config``; these helpers translate a
parsed configuration into a fresh FundState or LedgerMock.
"""

from __future__ import annotations

from scholarship_config.schema import FundConfig
from scholarship_kernel.domain.state import FundState
from scholarship_kernel.domain.values import Currency
from scholarship_kernel.services.fund_ledger import LedgerMock


def build_fund_state(config: FundConfig) -> FundState:
    return FundState(owner=config.owner, currency=Currency(config.currency))


def build_ledger_mock(config: FundConfig) -> LedgerMock:
    return LedgerMock(build_fund_state(config), fund_id=config.fund_id)
