"""Currency -- ISO 4217 registry and precision lookup for fund amounts."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class CurrencyInfo:
    """Information about a single ISO 4217 currency."""

    code: str
    decimal_places: int
    name: str


class CurrencyRegistry:
    """Registry of ISO 4217 currencies a fund may be denominated in."""

    _CURRENCIES: ClassVar[dict[str, CurrencyInfo]] = {
        # Two decimal currencies
        "USD": CurrencyInfo("USD", 2, "US Dollar"),
        "EUR": CurrencyInfo("EUR", 2, "Euro"),
        "GBP": CurrencyInfo("GBP", 2, "Pound Sterling"),
        "CHF": CurrencyInfo("CHF", 2, "Swiss Franc"),
        "CAD": CurrencyInfo("CAD", 2, "Canadian Dollar"),
        "AUD": CurrencyInfo("AUD", 2, "Australian Dollar"),
        "NZD": CurrencyInfo("NZD", 2, "New Zealand Dollar"),
        "CNY": CurrencyInfo("CNY", 2, "Chinese Yuan"),
        "INR": CurrencyInfo("INR", 2, "Indian Rupee"),
        "BRL": CurrencyInfo("BRL", 2, "Brazilian Real"),
        "MXN": CurrencyInfo("MXN", 2, "Mexican Peso"),
        "ZAR": CurrencyInfo("ZAR", 2, "South African Rand"),
        "KES": CurrencyInfo("KES", 2, "Kenyan Shilling"),
        "NGN": CurrencyInfo("NGN", 2, "Nigerian Naira"),
        "SEK": CurrencyInfo("SEK", 2, "Swedish Krona"),
        "NOK": CurrencyInfo("NOK", 2, "Norwegian Krone"),
        "SGD": CurrencyInfo("SGD", 2, "Singapore Dollar"),
        # Zero decimal currencies
        "JPY": CurrencyInfo("JPY", 0, "Japanese Yen"),
        "KRW": CurrencyInfo("KRW", 0, "South Korean Won"),
        "CLP": CurrencyInfo("CLP", 0, "Chilean Peso"),
        "VND": CurrencyInfo("VND", 0, "Vietnamese Dong"),
        "UGX": CurrencyInfo("UGX", 0, "Ugandan Shilling"),
        "XOF": CurrencyInfo("XOF", 0, "West African CFA Franc"),
        # Three decimal currencies
        "BHD": CurrencyInfo("BHD", 3, "Bahraini Dinar"),
        "JOD": CurrencyInfo("JOD", 3, "Jordanian Dinar"),
        "KWD": CurrencyInfo("KWD", 3, "Kuwaiti Dinar"),
        "OMR": CurrencyInfo("OMR", 3, "Omani Rial"),
        "TND": CurrencyInfo("TND", 3, "Tunisian Dinar"),
        # Special codes
        "XTS": CurrencyInfo("XTS", 0, "Testing Code"),
    }

    @classmethod
    def is_valid(cls, code: str) -> bool:
        """Check if a currency code is a known ISO 4217 code."""
        if not code or not isinstance(code, str):
            return False
        return code.upper().strip() in cls._CURRENCIES

    @classmethod
    def get_info(cls, code: str) -> CurrencyInfo | None:
        """Get currency information by code."""
        if not code or not isinstance(code, str):
            return None
        return cls._CURRENCIES.get(code.upper().strip())

    @classmethod
    def get_decimal_places(cls, code: str) -> int:
        """Get decimal places for a currency."""
        info = cls.get_info(code)
        if info is None:
            raise ValueError(f"Unknown currency code: {code!r}")
        return info.decimal_places

    @classmethod
    def validate(cls, code: str) -> str:
        """Validate and normalize a currency code."""
        if not code or not isinstance(code, str):
            raise ValueError(f"Invalid currency code: {code!r}")

        normalized = code.upper().strip()

        if len(normalized) != 3:
            raise ValueError(f"Currency code must be 3 characters: {code!r}")

        if normalized not in cls._CURRENCIES:
            raise ValueError(f"Invalid ISO 4217 currency code: {code!r}")

        return normalized

    @classmethod
    def all_codes(cls) -> frozenset[str]:
        """Get all valid currency codes."""
        return frozenset(cls._CURRENCIES.keys())
