from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Iterable, Mapping, Sequence

from suite_money.config import resolve_locale
from suite_money.domain.currency import Currency, CurrencyHolder
from suite_money.domain.rounding import RoundingMode, resolve_rounding_mode, round_to_integer
from suite_money.errors import IncompatibleCurrencyError, InvalidAmountError, InvalidArgumentError
from suite_money.formatting import BabelNumberFormatter, NumberFormatter
from suite_money.utils.numeric_tools import DecimalLike, Operand, RatioLike, as_decimal, as_fraction, as_ratio, decimal_from_scaled_int

DEFAULT_FORMATTER: NumberFormatter = BabelNumberFormatter()


class Money:
    """Represents an exact amount of money in a single currency.

    The amount is always an integer number of minor units (pence for GBP, cents for USD).
    The currency's minor unit exponent says how many of those digits are the fractional part:

    - USD has exponent 2, so 1234567 means $12,345.67.
    - JPY has exponent 0, so 1234567 means ¥1,234,567.
    - LYD has exponent 3, so 1234567 means LD1,234.567.

    Instances are immutable; every operation returns a new Money.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: int, currency: Currency):
        """Initialize Money with an integer amount of minor units.

        Args:
            amount (int): Amount in minor units of $currency.
            currency (Currency): Currency object.

        Raises:
            InvalidArgumentError: If $amount is not an int.
            TypeError: If $currency is not a Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        # Raise: amount must be a whole number of minor units; no implicit truncation
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidArgumentError(f"Money's $amount must be a multiple of the currency's minor unit expressed as an int, but provided value is: {amount!r}")

        self._amount = amount
        self._currency = currency

    # region Factories

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """Create a Money with an amount of 0."""
        return cls(0, currency)

    @classmethod
    def sum(cls, addends: Iterable[Money]) -> Money:
        """Return the total of $addends.

        Args:
            addends: At least one Money, all in the currency of the first one.

        Returns:
            Money: The total, in the currency of the first addend.

        Raises:
            InvalidArgumentError: If $addends is empty.
            IncompatibleCurrencyError: If any addend uses a different currency than the first one.
                The error lists the first currency followed by each offending one.
        """
        addends = list(addends)

        # Raise: the sum of nothing has no currency
        if not addends:
            raise InvalidArgumentError("Cannot call `Money.sum` because $addends is empty")

        for addend in addends:
            if not isinstance(addend, Money):
                raise TypeError(f"Cannot call `Money.sum` because an addend is not Money (got type '{type(addend).__name__}')")

        currency = addends[0].currency
        offending: list[Currency] = []
        for addend in addends:
            if addend.currency != currency and addend.currency not in offending:
                offending.append(addend.currency)

        # Raise: all addends must share the first addend's currency
        if offending:
            raise IncompatibleCurrencyError([currency, *offending])

        return cls(sum(addend.amount for addend in addends), currency)

    @classmethod
    def from_major_and_minor_unit_amounts(cls, major: int, minor: int, currency: Currency) -> Money:
        """Create a Money from separate major and minor unit amounts.

        $minor is read as the digits after the decimal point, so it is right-padded to the
        currency's exponent: for USD, `(512, 1)` is $512.10 and `(512, 10)` is $512.10 too.
        The sign of $major applies to the whole amount: `(-999999, 99)` is -$999,999.99.

        Args:
            major (int): Major unit amount (e.g., dollars).
            minor (int): Minor unit digits (e.g., cents). Must not be negative.
            currency (Currency): Currency object.

        Raises:
            InvalidArgumentError: If $major or $minor is not an int.
            InvalidAmountError: If $minor is negative or has more digits than the currency's
                minor unit exponent allows (e.g., any non-zero $minor for JPY).
        """
        # Raise: both parts must be ints
        for name, value in (("major", major), ("minor", minor)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"Cannot call `from_major_and_minor_unit_amounts` because ${name} is not an int (got {value!r})")

        # Raise: the sign belongs to $major
        if minor < 0:
            raise InvalidAmountError(currency, major, minor, f"Cannot call `from_major_and_minor_unit_amounts` because $minor ({minor}) is negative")

        exponent = currency.minor_unit_exponent
        minor_digits = str(minor).ljust(exponent, "0")
        if exponent == 0 and minor == 0:
            minor_digits = ""

        # Raise: $minor must fit into the currency's minor unit digits
        if len(minor_digits) > exponent:
            raise InvalidAmountError(currency, major, minor, f"Currency {currency} accepts a maximum of {exponent} minor unit digits, but got {len(minor_digits)} ({major}.{minor})")

        magnitude = abs(major) * currency.minor_unit_multiplier + (int(minor_digits) if minor_digits else 0)
        return cls(-magnitude if major < 0 else magnitude, currency)

    @classmethod
    def from_array(cls, amounts: Sequence[int], currency: Currency) -> Money:
        """Create a Money from `[major]` or `[major, minor]`.

        Examples:
            Money.from_array([125, 50], USD)   # US$125.50
            Money.from_array([1999], JPY)      # ¥1999
            Money.from_array([999, 455], LYD)  # LYD999.455

        Raises:
            InvalidArgumentError: If $amounts does not have 1 or 2 elements.
            InvalidAmountError: See `from_major_and_minor_unit_amounts`.
        """
        # Raise: expect [major] or [major, minor]
        if isinstance(amounts, (str, bytes)) or len(amounts) not in (1, 2):
            raise InvalidArgumentError(f"Cannot call `from_array` because $amounts must contain 1 or 2 elements, but provided value is: {amounts!r}")

        major = amounts[0]
        minor = amounts[1] if len(amounts) == 2 else 0
        return cls.from_major_and_minor_unit_amounts(major, minor, currency)

    @classmethod
    def from_decimal(cls, value: DecimalLike, currency: Currency) -> Money:
        """Create a Money from a decimal amount of major units, e.g. Decimal("125.50").

        Digits beyond the currency's minor unit exponent are truncated toward zero.

        Raises:
            InvalidArgumentError: If $value cannot be converted to a finite Decimal.
        """
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise InvalidArgumentError(f"Cannot call `from_decimal` because $value ({value!r}) cannot be converted to Decimal") from e

        # Raise: NaN and infinities are not amounts
        if not decimal_value.is_finite():
            raise InvalidArgumentError(f"Cannot call `from_decimal` because $value ({value!r}) is not finite")

        minor_units = Fraction(decimal_value) * currency.minor_unit_multiplier
        return cls(math.trunc(minor_units), currency)

    @classmethod
    def from_decimal_string(cls, string: str, currency: Currency, locale: str | None = None, *, formatter: NumberFormatter | None = None) -> Money:
        """Create a Money from a locale-formatted decimal string.

        Examples:
            Money.from_decimal_string("125.50", USD)               # US$125.50
            Money.from_decimal_string("123.456,78", EUR, "de_DE")  # €123,456.78

        Args:
            string: Decimal string in $locale's format.
            currency: Currency object.
            locale: Locale identifier; the configured default locale when None.
            formatter: NumberFormatter to parse with; Babel-backed by default.

        Raises:
            TypeError: If $string is not a string.
            InvalidArgumentError: If $string cannot be parsed in $locale.
        """
        if not isinstance(string, str):
            raise TypeError(f"$string must be a string, but provided value is: {string!r}")

        locale = resolve_locale(locale)
        formatter = formatter or DEFAULT_FORMATTER

        try:
            value = formatter.parse_decimal(string, locale)
        except ValueError as e:
            raise InvalidArgumentError(f"Cannot parse decimal string '{string}' into Money using locale '{locale}'") from e

        return cls.from_decimal(value, currency)

    @classmethod
    def from_currency_string(cls, string: str, locale: str | None = None, *, formatter: NumberFormatter | None = None) -> Money:
        """Create a Money from a locale-formatted currency string like "$125.50" or "150,25 €".

        Raises:
            TypeError: If $string is not a string.
            InvalidArgumentError: If $string cannot be parsed in $locale.
            UnknownCurrencyError: If the parsed currency is not in the registry.
        """
        if not isinstance(string, str):
            raise TypeError(f"$string must be a string, but provided value is: {string!r}")

        locale = resolve_locale(locale)
        formatter = formatter or DEFAULT_FORMATTER

        try:
            value, code = formatter.parse_currency(string, locale)
        except ValueError as e:
            raise InvalidArgumentError(f"Cannot parse currency string '{string}' into Money using locale '{locale}'") from e

        return cls.from_decimal(value, Currency(code))

    @classmethod
    def from_dict(cls, data: Mapping) -> Money:
        """Create a Money from the output of `to_dict`.

        Raises:
            InvalidArgumentError: If "amount" or "currency" is missing.
            UnknownCurrencyError: If the currency code is not in the registry.
        """
        # Raise: both keys are required
        missing = [key for key in ("amount", "currency") if key not in data]
        if missing:
            raise InvalidArgumentError(f"Cannot call `Money.from_dict` because keys {missing} are missing in $data ({dict(data)!r})")

        return cls(data["amount"], Currency(data["currency"]))

    # endregion

    # region Queries

    @property
    def amount(self) -> int:
        """Get the amount in minor units of the currency."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def uses_same_currency_as(self, other: CurrencyHolder) -> bool:
        return self._currency == other.currency

    def uses_currency(self, currency: Currency) -> bool:
        return self._currency == currency

    # Money-specific names for the `CurrencyHolder` methods
    is_same_currency_as = uses_same_currency_as
    is_in_currency = uses_currency

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        """Return True if the amount is above zero. Zero is neither positive nor negative."""
        return self._amount > 0

    def is_negative(self) -> bool:
        """Return True if the amount is below zero. Zero is neither positive nor negative."""
        return self._amount < 0

    # endregion

    # region Comparison

    def _check_same_currency(self, other: Money) -> None:
        """Raise IncompatibleCurrencyError unless $other uses the same currency."""
        if not isinstance(other, Money):
            raise TypeError(f"Cannot compare Money with {type(other).__name__}")

        if not self.is_same_currency_as(other):
            raise IncompatibleCurrencyError([self._currency, other.currency])

    def compare(self, other: Money) -> int:
        """Compare with $other Money in the same currency.

        Returns:
            int: -1, 0 or 1 when this Money is respectively less than, equal to or greater than $other.

        Raises:
            IncompatibleCurrencyError: If currencies differ.
        """
        self._check_same_currency(other)
        return (self._amount > other.amount) - (self._amount < other.amount)

    def is_greater_than(self, other: Money) -> bool:
        return self.compare(other) == 1

    def is_greater_than_or_equal_to(self, other: Money) -> bool:
        return self.compare(other) >= 0

    def is_less_than(self, other: Money) -> bool:
        return self.compare(other) == -1

    def is_less_than_or_equal_to(self, other: Money) -> bool:
        return self.compare(other) <= 0

    def __eq__(self, other) -> bool:
        """Equal when both amount and currency are equal. Different currencies are simply not equal."""
        if not isinstance(other, Money):
            return False
        return self._amount == other.amount and self.is_same_currency_as(other)

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_greater_than_or_equal_to(other)

    # endregion

    # region Arithmetic

    def add(self, *addends: Money) -> Money:
        """Add one or more Money in the same currency.

        Returns this instance unchanged when no $addends are given.
        """
        if not addends:
            return self

        return self.__class__.sum([self, *addends])

    def subtract(self, subtrahend: Money) -> Money:
        self._check_same_currency(subtrahend)
        return self.__class__(self._amount - subtrahend.amount, self._currency)

    def multiply(self, multiplier: Operand, rounding_mode: RoundingMode = RoundingMode.HALF_UP) -> Money:
        """Multiply by $multiplier and round the exact product to whole minor units.

        Args:
            multiplier: int, float, Decimal or Fraction. Floats are read via their shortest
                string form, so 1.1 means exactly 11/10.
            rounding_mode: How ties are rounded.

        Raises:
            InvalidArgumentError: If $multiplier is not a finite number.
            InvalidRoundingModeError: If $rounding_mode is not a RoundingMode.
        """
        factor = self._as_operand(multiplier, "multiply")
        mode = resolve_rounding_mode(rounding_mode)

        return self.__class__(round_to_integer(self._amount * factor, mode), self._currency)

    def divide(self, divisor: Operand, rounding_mode: RoundingMode = RoundingMode.HALF_UP) -> Money:
        """Divide by $divisor and round the exact quotient to whole minor units.

        Raises:
            InvalidArgumentError: If $divisor is zero or not a finite number.
            InvalidRoundingModeError: If $rounding_mode is not a RoundingMode.
        """
        factor = self._as_operand(divisor, "divide")

        # Raise: division by zero has no result
        if factor == 0:
            raise InvalidArgumentError("Cannot call `divide` because $divisor is 0")

        mode = resolve_rounding_mode(rounding_mode)

        return self.__class__(round_to_integer(Fraction(self._amount) / factor, mode), self._currency)

    def allocate(self, ratios: Sequence[RatioLike]) -> list[Money]:
        """Split the amount according to $ratios without losing or creating a single minor unit.

        Each share is `floor(amount * ratio / total)`. Whatever is left over is handed out one
        minor unit at a time, starting from the first share. For example, 100 split by
        ["1:3", "1:3", "1:3"] gives shares [33, 33, 33] and a remainder of 1, so the result
        is [34, 33, 33].

        Args:
            ratios: Weights as Fraction, int, Decimal or "numerator:denominator" strings.
                Weights may be zero or negative as long as their total is not zero.

        Returns:
            list[Money]: One Money per ratio, in the same order. Empty when $ratios is empty.

        Raises:
            InvalidArgumentError: If a ratio is invalid or the ratios add up to zero.
        """
        weights: list[Fraction] = []
        for ratio in ratios:
            try:
                weights.append(as_ratio(ratio))
            except (TypeError, ValueError, ZeroDivisionError) as e:
                raise InvalidArgumentError(f"Cannot call `allocate` because ratio {ratio!r} is not a valid ratio") from e

        if not weights:
            return []

        total = sum(weights, Fraction(0))

        # Raise: shares are undefined when the weights cancel out
        if total == 0:
            raise InvalidArgumentError(f"Cannot call `allocate` because $ratios add up to 0 ({[str(w) for w in weights]})")

        shares = [math.floor(self._amount * weight / total) for weight in weights]

        # Each floor loses less than one unit, so 0 <= remainder < len(shares)
        remainder = self._amount - sum(shares)
        for index in range(remainder):
            shares[index % len(shares)] += 1

        return [self.__class__(share, self._currency) for share in shares]

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.__class__(-self._amount, self._currency)

    @staticmethod
    def _as_operand(value: Operand, method_name: str) -> Fraction:
        try:
            return as_fraction(value)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Cannot call `{method_name}` because operand {value!r} is not an int, float, Decimal or Fraction") from e

    # endregion

    # region Rendering

    def to_decimal(self) -> Decimal:
        """Return the amount in major units, e.g. 10050 GBP -> Decimal("100.50")."""
        return decimal_from_scaled_int(self._amount, self._currency.minor_unit_exponent)

    def to_decimal_string(self, locale: str | None = None, *, formatter: NumberFormatter | None = None) -> str:
        """Render as a locale-formatted decimal, e.g. "100.5" (en_GB) or "100,5" (fr_FR)."""
        locale = resolve_locale(locale)
        formatter = formatter or DEFAULT_FORMATTER
        return formatter.format_decimal(self.to_decimal(), locale)

    def to_currency_string(self, locale: str | None = None, *, formatter: NumberFormatter | None = None) -> str:
        """Render with the currency symbol, e.g. "£100.00" (en_GB) or "US$150.25" (en_GB)."""
        locale = resolve_locale(locale)
        formatter = formatter or DEFAULT_FORMATTER
        return formatter.format_currency(self.to_decimal(), self._currency.code, locale)

    def to_dict(self) -> dict:
        return {"amount": self._amount, "currency": self._currency.code}

    def __str__(self) -> str:
        """Return string like '100.50 GBP'."""
        return f"{self.to_decimal():f} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(10050, GBP)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion
