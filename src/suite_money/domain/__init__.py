"""Monetary domain package.

Currency definitions, exact Money arithmetic on integer minor units, and CurrencyPair
quotations for converting Money between currencies.
"""

from suite_money.domain.currency import Currency, CurrencyHolder
from suite_money.domain.rounding import RoundingMode
from suite_money.domain.money import Money
from suite_money.domain.currency_pair import CurrencyPair

__all__ = ["Currency", "CurrencyHolder", "RoundingMode", "Money", "CurrencyPair"]
