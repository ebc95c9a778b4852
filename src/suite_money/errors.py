"""Errors raised by the monetary domain.

Every error carries its own structured payload so callers can inspect what went wrong
without parsing the message.
"""

from __future__ import annotations

from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from suite_money.domain.currency import Currency


class MoneyError(ValueError):
    """Base class for all errors raised by `suite_money`."""


class UnknownCurrencyError(MoneyError):
    """Raised when a Currency is constructed with a code absent from the registry."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown ISO4217 currency code '{code}'")


class InvalidAmountError(MoneyError):
    """Raised when a minor unit amount does not fit the currency's minor unit exponent.

    For example, JPY has a minor unit exponent of 0, so an amount of ¥100.50 is not valid.
    """

    def __init__(self, currency: Currency, major: int, minor: int, reason: str):
        self.currency = currency
        self.major = major
        self.minor = minor
        super().__init__(reason)


class IncompatibleCurrencyError(MoneyError):
    """Raised when Money in different currencies is combined or compared."""

    def __init__(self, currencies: Iterable[Currency]):
        self.currencies = tuple(currencies)
        if self.currencies:
            listed = ", ".join(str(c) for c in self.currencies)
            message = f"Moneys have different currencies: {listed}"
        else:
            message = "Moneys have different currencies"
        super().__init__(message)


class InvalidArgumentError(MoneyError):
    """Raised when an operation receives an argument it cannot work with."""


class InvalidRoundingModeError(InvalidArgumentError):
    """Raised when a rounding mode is not one of the supported `RoundingMode` members."""

    def __init__(self, rounding_mode: object):
        self.rounding_mode = rounding_mode
        super().__init__(f"$rounding_mode must be one of RoundingMode.[HALF_UP | HALF_DOWN | HALF_EVEN | HALF_ODD], but provided value is: {rounding_mode!r}")
