from __future__ import annotations

from typing import Protocol, runtime_checkable

from suite_money.domain.iso4217 import CURRENCY_NAMES, DEFAULT_MINOR_UNIT_EXPONENT, MINOR_UNIT_EXPONENTS
from suite_money.errors import UnknownCurrencyError


class Currency:
    """Represents an ISO4217 currency.

    Only the code is stored; name and minor unit exponent are looked up from the
    read-only tables in `suite_money.domain.iso4217`.

    Attributes:
        code (str): 3-letter ISO4217 code (e.g., "USD", "JPY").
        name (str): Full currency name.
        minor_unit_exponent (int): Power of 10 relating major and minor units (USD: 2, JPY: 0, LYD: 3).
        minor_unit_multiplier (int): `10 ** minor_unit_exponent`.
    """

    __slots__ = ("_code",)

    def __init__(self, code: str):
        """Initialize a Currency from its ISO4217 code.

        Args:
            code (str): Currency code exactly as listed in the registry (e.g., "USD").

        Raises:
            TypeError: If $code is not a string.
            UnknownCurrencyError: If $code is not in the registry.
        """
        # Raise: $code must be a string
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")

        # Raise: $code must be known to the registry
        if code not in CURRENCY_NAMES:
            raise UnknownCurrencyError(code)

        self._code = code

    @classmethod
    def from_code(cls, code: str) -> Currency:
        """Create a Currency from a code, ignoring case and surrounding whitespace.

        Args:
            code (str): Currency code to look up (e.g., "usd", " EUR ").

        Returns:
            Currency: The currency instance.

        Raises:
            TypeError: If $code is not a string.
            UnknownCurrencyError: If $code is not in the registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")

        return cls(code.upper().strip())

    @staticmethod
    def codes() -> frozenset[str]:
        """Return all supported currency codes."""
        return frozenset(CURRENCY_NAMES)

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def name(self) -> str:
        """Get the currency name."""
        return CURRENCY_NAMES[self._code]

    @property
    def minor_unit_exponent(self) -> int:
        """Get the exponent relating major and minor currency units."""
        return MINOR_UNIT_EXPONENTS.get(self._code, DEFAULT_MINOR_UNIT_EXPONENT)

    @property
    def minor_unit_multiplier(self) -> int:
        """Get the number of minor units in one major unit."""
        return 10**self.minor_unit_exponent

    def to_dict(self) -> dict:
        return {"code": self._code, "minor_units": self.minor_unit_multiplier}

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self._code == other._code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self._code)

    def __str__(self) -> str:
        """Return string like 'British Pound Sterling (GBP)'."""
        return f"{self.name} ({self._code})"

    def __repr__(self) -> str:
        """Return string like "Currency('GBP')"."""
        return f"{self.__class__.__name__}('{self._code}')"


@runtime_checkable
class CurrencyHolder(Protocol):
    """Anything valued in exactly one Currency."""

    @property
    def currency(self) -> Currency: ...

    def uses_currency(self, currency: Currency) -> bool:
        """Return True if this holder uses $currency."""
        ...

    def uses_same_currency_as(self, other: CurrencyHolder) -> bool:
        """Return True if this holder uses the same currency as $other."""
        ...
