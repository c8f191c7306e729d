"""
Pure domain layer.

Value objects, fund state and operation results with NO dependencies on:
- Logging
- Configuration files
- I/O
"""

from scholarship_kernel.domain.currency import CurrencyInfo, CurrencyRegistry
from scholarship_kernel.domain.results import FundErrorKind, FundResult
from scholarship_kernel.domain.state import FundState, ScholarRecord, ScholarStatus
from scholarship_kernel.domain.values import Currency, Money, Principal

__all__ = [
    "Currency",
    "CurrencyInfo",
    "CurrencyRegistry",
    "FundErrorKind",
    "FundResult",
    "FundState",
    "Money",
    "Principal",
    "ScholarRecord",
    "ScholarStatus",
]
