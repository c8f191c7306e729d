"""
Fund configuration schema.

YAML fund definitions are parsed into these types by the loader. Values are
kept as plain strings here; the bridges turn them into kernel value objects.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FundConfig:
    """One scholarship fund's static configuration."""

    fund_id: str
    owner: str
    currency: str = "USD"
    name: str = ""
    checksum: str = ""
