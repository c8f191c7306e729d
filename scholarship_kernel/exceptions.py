"""
Typed Exception Hierarchy for the Scholarship Kernel.

===============================================================================
WHERE EXCEPTIONS ARE USED
===============================================================================

Ledger operations (donate_funds, award_scholarship) never raise for business
rule violations. They return a FundResult whose error kind the caller must
inspect. Exceptions are raised only when:
  - A caller explicitly asks for one via FundResult.unwrap()
  - A programming error is detected (currency mixing, owner reassignment)
  - Configuration cannot be found or parsed

Example - inspecting a result:
    result = donate_funds(state, 100, "ST1234...")
    if not result.is_success:
        log.warning("donation failed", extra={"code": result.error.code})

Example - opting in to exceptions:
    try:
        donate_funds(state, 0, "ST1234...").unwrap()
    except InvalidAmountError as e:
        api_response(code=e.code, amount=e.amount)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    ScholarshipFundError (base)
    |
    +-- FundOperationError
    |   +-- InvalidAmountError
    |   +-- UnauthorizedError
    |   +-- InsufficientFundsError
    |
    +-- CurrencyError
    |   +-- InvalidCurrencyError
    |   +-- CurrencyMismatchError
    |
    +-- StateError
    |   +-- OwnerImmutableError
    |
    +-- ConfigError
        +-- FundConfigNotFoundError
        +-- InvalidFundConfigError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category   | Code                   | When Raised
-----------|------------------------|-------------------------------------------
Operation  | INVALID_AMOUNT         | Donation not strictly positive / too precise
           | UNAUTHORIZED           | Award attempted by someone other than owner
           | INSUFFICIENT_FUNDS     | Award exceeds current total funds
-----------|------------------------|-------------------------------------------
Currency   | INVALID_CURRENCY       | Not a known ISO 4217 code
           | CURRENCY_MISMATCH      | Amount not in the fund's currency
-----------|------------------------|-------------------------------------------
State      | OWNER_IMMUTABLE        | Attempt to reassign the fund owner
-----------|------------------------|-------------------------------------------
Config     | FUND_CONFIG_NOT_FOUND  | No YAML file for the requested fund_id
           | INVALID_FUND_CONFIG    | Required field missing or malformed
"""


class ScholarshipFundError(Exception):
    """
    Base exception for all scholarship kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "SCHOLARSHIP_FUND_ERROR"


# Ledger operation exceptions


class FundOperationError(ScholarshipFundError):
    """Base exception for rejected ledger operations."""

    code: str = "FUND_OPERATION_ERROR"


class InvalidAmountError(FundOperationError):
    """Donation amount was zero, negative, or finer than the currency allows."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, amount: str):
        self.amount = amount
        super().__init__(f"Invalid amount: {amount}")


class UnauthorizedError(FundOperationError):
    """Only the fund owner may award scholarships."""

    code: str = "UNAUTHORIZED"

    def __init__(self, sender: str, owner: str):
        self.sender = sender
        self.owner = owner
        super().__init__(f"Owner only: {sender} is not the fund owner")


class InsufficientFundsError(FundOperationError):
    """Requested award exceeds the funds currently held."""

    code: str = "INSUFFICIENT_FUNDS"

    def __init__(self, requested: str, available: str):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient funds: requested {requested}, available {available}"
        )


# Currency exceptions


class CurrencyError(ScholarshipFundError):
    """Base exception for currency errors."""

    code: str = "CURRENCY_ERROR"


class InvalidCurrencyError(CurrencyError):
    """Currency code is not a valid ISO 4217 code."""

    code: str = "INVALID_CURRENCY"

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"Invalid ISO 4217 currency code: {currency!r}")


class CurrencyMismatchError(CurrencyError):
    """Amount is denominated in a currency other than the fund's."""

    code: str = "CURRENCY_MISMATCH"

    def __init__(self, expected: str, received: str):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Currency mismatch: fund holds {expected}, received {received}"
        )


# State exceptions


class StateError(ScholarshipFundError):
    """Base exception for fund state errors."""

    code: str = "STATE_ERROR"


class OwnerImmutableError(StateError):
    """
    The fund owner is fixed at construction.

    Raised on any attempt to assign FundState.owner after initialization.
    """

    code: str = "OWNER_IMMUTABLE"

    def __init__(self, owner: str):
        self.owner = owner
        super().__init__(f"Fund owner is immutable (owner={owner})")


# Configuration exceptions


class ConfigError(ScholarshipFundError):
    """Base exception for fund configuration errors."""

    code: str = "CONFIG_ERROR"


class FundConfigNotFoundError(ConfigError):
    """No configuration file exists for the requested fund."""

    code: str = "FUND_CONFIG_NOT_FOUND"

    def __init__(self, fund_id: str, config_dir: str):
        self.fund_id = fund_id
        self.config_dir = config_dir
        super().__init__(
            f"No configuration for fund {fund_id!r} in {config_dir}"
        )


class InvalidFundConfigError(ConfigError):
    """A configuration field is missing or malformed."""

    code: str = "INVALID_FUND_CONFIG"

    def __init__(self, field_name: str, reason: str):
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid fund config field {field_name!r}: {reason}")
