from __future__ import annotations

import logging
from decimal import Decimal
from functools import lru_cache

from babel import Locale
from babel import numbers
from babel.numbers import NumberFormatError

from suite_money.domain.iso4217 import CURRENCY_NAMES
from suite_money.formatting.protocol import NumberFormatter

logger = logging.getLogger(__name__)


# Lower-priority symbol source, e.g. "$512.1" reads as USD in en_GB where USD renders as "US$"
FALLBACK_SYMBOL_LOCALE = "en"


@lru_cache(maxsize=64)
def _currency_symbols(locale: str) -> tuple[tuple[str, str, int], ...]:
    """Return (symbol, code, tier) triples for every registry code in $locale.

    Tier 0 holds the bare ISO code and the $locale symbol (e.g., "$", "£", "CA$"). Tier 1
    holds `FALLBACK_SYMBOL_LOCALE` symbols that $locale does not already use for that code.
    """
    triples = []
    for code in sorted(CURRENCY_NAMES):
        known = {code}
        triples.append((code, code, 0))
        for tier, symbol_locale in enumerate((locale, FALLBACK_SYMBOL_LOCALE)):
            symbol = numbers.get_currency_symbol(code, locale=symbol_locale)
            if symbol and symbol not in known:
                known.add(symbol)
                triples.append((symbol, code, tier))
    return tuple(triples)


@lru_cache(maxsize=64)
def _territory_currencies(locale: str) -> frozenset[str]:
    territory = Locale.parse(locale).territory
    if not territory:
        return frozenset()
    return frozenset(numbers.get_territory_currencies(territory))


class BabelNumberFormatter(NumberFormatter):
    """`NumberFormatter` backed by Babel's CLDR data.

    Currency strings are parsed by finding a currency symbol or ISO code inside the string.
    The longest match wins; when several currencies share that symbol (e.g., "$"), the
    locale's own symbols are preferred over fallback ones, then the currency of the locale's
    territory, then a literal ISO code, then the alphabetically first code.

    Decimals are parsed in the locale's default numbering system, so "١٢٣٤٥٦٫٧٨٩" is a valid
    number in ar_EG.
    """

    def parse_decimal(self, string: str, locale: str) -> Decimal:
        try:
            return numbers.parse_decimal(string, locale=locale, numbering_system="default")
        except NumberFormatError as e:
            raise ValueError(f"Cannot parse decimal string '{string}' using locale '{locale}'") from e

    def parse_currency(self, string: str, locale: str) -> tuple[Decimal, str]:
        text = string.strip()
        matches = [(symbol, code, tier) for symbol, code, tier in _currency_symbols(locale) if symbol in text]

        # Raise: a currency string must name its currency
        if not matches:
            raise ValueError(f"Cannot parse currency string '{string}' using locale '{locale}' because it contains no known currency symbol")

        longest = max(len(symbol) for symbol, _, _ in matches)
        territory_codes = _territory_currencies(locale)
        symbol, code, _ = min(
            (match for match in matches if len(match[0]) == longest),
            key=lambda match: (match[2], match[1] not in territory_codes, match[0] != match[1], match[1]),
        )
        logger.debug(f"Matched currency symbol '{symbol}' as {code} in '{string}' (locale '{locale}')")

        magnitude = text.replace(symbol, "", 1).strip()
        return self.parse_decimal(magnitude, locale), code

    def format_decimal(self, value: Decimal, locale: str) -> str:
        return numbers.format_decimal(value, locale=locale)

    def format_currency(self, value: Decimal, currency_code: str, locale: str) -> str:
        return numbers.format_currency(value, currency_code, locale=locale)
