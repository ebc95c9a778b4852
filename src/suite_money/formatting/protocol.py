from __future__ import annotations

from decimal import Decimal
from typing import Protocol


# region Interface


class NumberFormatter(Protocol):
    """Locale-aware parsing and rendering of decimal and currency strings.

    Money never parses or renders locale-specific strings itself; it hands the string and a
    resolved locale identifier (e.g., "en_GB") to a NumberFormatter and works with the plain
    `Decimal` it gets back.

    Parsing methods raise `ValueError` when the string cannot be parsed.
    """

    def parse_decimal(self, string: str, locale: str) -> Decimal:
        """Parse a locale-formatted decimal string like "123,456.78" (en) or "123.456,78" (de)."""
        ...

    def parse_currency(self, string: str, locale: str) -> tuple[Decimal, str]:
        """Parse a currency string like "$123.45" into its magnitude and ISO currency code."""
        ...

    def format_decimal(self, value: Decimal, locale: str) -> str:
        """Render $value as a plain locale-formatted decimal."""
        ...

    def format_currency(self, value: Decimal, currency_code: str, locale: str) -> str:
        """Render $value with the currency symbol for $currency_code in $locale."""
        ...


# endregion
