"""
Scholarship Kernel - in-memory scholarship fund ledger

A test double for a scholarship-fund smart contract with:
- Explicit, per-instance fund state (no global singleton)
- Guarded donations and owner-only scholarship awards
- Tagged results instead of raised errors at the operation boundary
- Fixed-point money with ISO 4217 precision
"""

__version__ = "0.1.0"
