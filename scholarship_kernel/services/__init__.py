"""Ledger operations over an explicitly passed FundState."""

from scholarship_kernel.services.fund_ledger import (
    LedgerMock,
    award_scholarship,
    coerce_amount,
    donate_funds,
    get_donor_contribution,
    get_scholar_info,
    get_total_funds,
)

__all__ = [
    "LedgerMock",
    "award_scholarship",
    "coerce_amount",
    "donate_funds",
    "get_donor_contribution",
    "get_scholar_info",
    "get_total_funds",
]
