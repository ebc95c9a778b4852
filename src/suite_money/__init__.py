__version__ = "0.1.0"

from suite_money.domain import Currency, CurrencyPair, Money, RoundingMode
from suite_money.errors import (
    IncompatibleCurrencyError,
    InvalidAmountError,
    InvalidArgumentError,
    InvalidRoundingModeError,
    MoneyError,
    UnknownCurrencyError,
)

__all__ = [
    "Currency",
    "CurrencyPair",
    "Money",
    "RoundingMode",
    "MoneyError",
    "UnknownCurrencyError",
    "InvalidAmountError",
    "IncompatibleCurrencyError",
    "InvalidArgumentError",
    "InvalidRoundingModeError",
]
