"""Locale-aware parsing and rendering of decimal and currency strings."""

from suite_money.formatting.protocol import NumberFormatter
from suite_money.formatting.babel_formatter import BabelNumberFormatter

__all__ = ["NumberFormatter", "BabelNumberFormatter"]
