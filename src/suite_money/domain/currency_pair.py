from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction

from suite_money.domain.currency import Currency
from suite_money.domain.money import Money
from suite_money.domain.rounding import RoundingMode, resolve_rounding_mode, round_to_integer, round_to_places
from suite_money.errors import InvalidArgumentError
from suite_money.utils.numeric_tools import DecimalLike, RatioLike, as_decimal, as_fraction, as_ratio, format_ratio

logger = logging.getLogger(__name__)


class CurrencyPair:
    """A quotation of the value of one currency against another.

    "EUR/USD 1.2500" pairs EUR (the base currency) with USD (the counter currency) at a
    quote of 1.25. The quote is always stored rounded to `PRECISION` decimal places, and the
    ratio is the exact reduced fraction of that rounded quote (5:4 here).

    See https://en.wikipedia.org/wiki/Currency_pair
    """

    PRECISION = 4

    # "EUR/USD 1.2500", "EURUSD 1.25", "GBP/USD 1"; surrounding text is ignored
    _ISO_PATTERN = re.compile(r"([A-Z]{3})/?([A-Z]{3}) (\d*\.?\d+)")

    __slots__ = ("_base_currency", "_counter_currency", "_quote", "_ratio")

    def __init__(self, base_currency: Currency, counter_currency: Currency, quote: DecimalLike | Fraction):
        """Initialize a CurrencyPair.

        Args:
            base_currency: The base currency (left side of "BASE/COUNTER").
            counter_currency: The counter currency (right side of "BASE/COUNTER").
                May equal $base_currency, which gives an identity quote.
            quote: Exchange rate; rounded half-up to `PRECISION` decimal places.

        Raises:
            TypeError: If a currency is not a Currency instance.
            InvalidArgumentError: If $quote is not a number or is not positive after rounding.
        """
        # Raise: both currencies must be Currency instances
        for name, currency in (("base_currency", base_currency), ("counter_currency", counter_currency)):
            if not isinstance(currency, Currency):
                raise TypeError(f"${name} must be a Currency instance, but provided value is: {currency!r}")

        try:
            exact_quote = as_fraction(as_decimal(quote) if isinstance(quote, str) else quote)
        except (TypeError, ValueError, InvalidOperation) as e:
            raise InvalidArgumentError(f"Cannot init `CurrencyPair` because $quote ({quote!r}) is not a finite number") from e

        rounded_quote = round_to_places(exact_quote, self.PRECISION, RoundingMode.HALF_UP)

        # Raise: a zero or negative quote cannot convert in either direction
        if rounded_quote <= 0:
            raise InvalidArgumentError(f"Cannot init `CurrencyPair` because $quote ({quote!r}) is not positive at {self.PRECISION} decimal places")

        self._base_currency = base_currency
        self._counter_currency = counter_currency
        self._quote = rounded_quote
        self._ratio = Fraction(rounded_quote)

    # region Factories

    @classmethod
    def from_iso_string(cls, iso: str) -> CurrencyPair:
        """Create a CurrencyPair from a string like "EUR/USD 1.2500". The slash is optional.

        The first "BBB/CCC <number>" found in $iso is used, so "Close: EUR/USD 1.2500" works too.

        Raises:
            TypeError: If $iso is not a string.
            InvalidArgumentError: If $iso does not contain a "BBB/CCC <number>" quotation.
            UnknownCurrencyError: If either code is not in the registry.
        """
        if not isinstance(iso, str):
            raise TypeError(f"$iso must be a string, but provided value is: {iso!r}")

        match = cls._ISO_PATTERN.search(iso)

        # Raise: the string must contain "BBB/CCC <number>"
        if match is None:
            raise InvalidArgumentError(f"Cannot create CurrencyPair from ISO string '{iso}': format of string is invalid")

        base_code, counter_code, quote = match.groups()
        return cls(Currency(base_code), Currency(counter_code), Decimal(quote))

    @classmethod
    def from_ratio(cls, base_currency: Currency, counter_currency: Currency, ratio: RatioLike) -> CurrencyPair:
        """Create a CurrencyPair from a ratio like Fraction(5, 4) or "5:4"."""
        try:
            exact_ratio = as_ratio(ratio)
        except (TypeError, ValueError, ZeroDivisionError) as e:
            raise InvalidArgumentError(f"Cannot call `from_ratio` because $ratio ({ratio!r}) is not a valid ratio") from e

        return cls(base_currency, counter_currency, exact_ratio)

    @classmethod
    def from_decimal(cls, base_currency: Currency, counter_currency: Currency, quote: DecimalLike) -> CurrencyPair:
        """Create a CurrencyPair from a decimal quote like Decimal("1.2500")."""
        try:
            decimal_quote = as_decimal(quote)
        except (TypeError, ValueError, InvalidOperation) as e:
            raise InvalidArgumentError(f"Cannot call `from_decimal` because $quote ({quote!r}) cannot be converted to Decimal") from e

        return cls(base_currency, counter_currency, decimal_quote)

    # endregion

    # region Conversion

    def convert(self, money: Money, rounding_mode: RoundingMode = RoundingMode.HALF_UP) -> Money:
        """Convert $money into the other currency of this pair.

        Money in the base currency comes out in the counter currency and vice versa. For
        "GBP/USD 0.7500", 7500 GBP minor units become 10000 USD minor units.

        Args:
            money: Money in either currency of this pair.
            rounding_mode: How ties are rounded when producing whole minor units.

        Returns:
            Money: New Money in the opposite currency of the pair.

        Raises:
            InvalidArgumentError: If $money's currency is not part of this pair.
            InvalidRoundingModeError: If $rounding_mode is not a RoundingMode.
        """
        if not isinstance(money, Money):
            raise TypeError(f"$money must be a Money instance, but provided value is: {money!r}")

        # Raise: only the two currencies of the pair can be converted
        if not self.contains_currency(money.currency):
            raise InvalidArgumentError(f"Money cannot be converted as its currency ({money.currency}) is not part of this CurrencyPair ({self})")

        mode = resolve_rounding_mode(rounding_mode)

        ratio = self._ratio
        target_currency = self._base_currency

        # "GBP/USD 0.7500" has a GBP to USD ratio of 3:4. That ratio applies to USD as is,
        # but GBP needs the inverse 4:3 (1.3333).
        if money.is_in_currency(self._base_currency):
            ratio = 1 / self._ratio
            target_currency = self._counter_currency

        rate = round_to_places(ratio, self.PRECISION, RoundingMode.HALF_UP)
        amount = round_to_integer(money.amount * Fraction(rate), mode)

        logger.debug(f"Converted {money!r} to {amount} {target_currency.code} at rate {rate} using {self.to_iso_string()}")
        return Money(amount, target_currency)

    # endregion

    # region Queries

    @property
    def base_currency(self) -> Currency:
        """Get the base currency."""
        return self._base_currency

    @property
    def counter_currency(self) -> Currency:
        """Get the counter currency."""
        return self._counter_currency

    @property
    def currencies(self) -> tuple[Currency, Currency]:
        """Get the base and counter currencies, in that order."""
        return self._base_currency, self._counter_currency

    @property
    def quote(self) -> Decimal:
        """Get the quote with exactly `PRECISION` decimal places."""
        return self._quote

    @property
    def ratio(self) -> Fraction:
        """Get the quote as an exact reduced fraction."""
        return self._ratio

    def contains_currency(self, currency: Currency) -> bool:
        return currency == self._base_currency or currency == self._counter_currency

    def contains_any_of_currencies(self, *currencies: Currency) -> bool:
        return any(self.contains_currency(currency) for currency in currencies)

    # endregion

    # region Rendering

    def to_iso_string(self) -> str:
        """Return string like 'GBP/USD 1.2525'."""
        return f"{self._base_currency.code}/{self._counter_currency.code} {self._quote:f}"

    def __str__(self) -> str:
        """Return string like 'British Pound Sterling (GBP)/United States Dollar (USD) @ 1.2525 (501:400)'."""
        return f"{self._base_currency}/{self._counter_currency} @ {self._quote:f} ({format_ratio(self._ratio)})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.from_iso_string('{self.to_iso_string()}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyPair):
            return False
        return self.currencies == other.currencies and self._quote == other.quote

    def __hash__(self) -> int:
        return hash((self._base_currency, self._counter_currency, self._quote))

    # endregion
