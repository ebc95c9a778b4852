from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP
from enum import Enum
from fractions import Fraction

from suite_money.errors import InvalidRoundingModeError
from suite_money.utils.numeric_tools import decimal_from_scaled_int

_HALF = Fraction(1, 2)


class RoundingMode(Enum):
    """How ties (values exactly halfway between two integers) are rounded.

    Values match the `decimal` module constants, so `RoundingMode(ROUND_HALF_EVEN)` works.
    """

    HALF_UP = ROUND_HALF_UP  # 2.5 -> 3, -2.5 -> -3 (away from zero)
    HALF_DOWN = ROUND_HALF_DOWN  # 2.5 -> 2, -2.5 -> -2 (toward zero)
    HALF_EVEN = ROUND_HALF_EVEN  # 2.5 -> 2, 3.5 -> 4
    HALF_ODD = "ROUND_HALF_ODD"  # 2.5 -> 3, 3.5 -> 3


def resolve_rounding_mode(value: RoundingMode | str) -> RoundingMode:
    """Return $value as a `RoundingMode` member.

    Raises:
        InvalidRoundingModeError: If $value is neither a member nor a member's value.
    """
    if isinstance(value, RoundingMode):
        return value

    try:
        return RoundingMode(value)
    except (ValueError, TypeError) as e:
        raise InvalidRoundingModeError(value) from e


def round_to_integer(value: Fraction, rounding_mode: RoundingMode) -> int:
    """Round an exact rational $value to the nearest integer.

    Args:
        value: Value to round.
        rounding_mode: Decides ties only; non-ties always go to the nearest integer.

    Returns:
        The rounded integer.
    """
    lower = math.floor(value)
    remainder = value - lower

    if remainder < _HALF:
        return lower
    if remainder > _HALF:
        return lower + 1

    # Tie between $lower and $lower + 1
    upper = lower + 1
    if rounding_mode is RoundingMode.HALF_UP:
        return upper if value > 0 else lower
    if rounding_mode is RoundingMode.HALF_DOWN:
        return lower if value > 0 else upper
    if rounding_mode is RoundingMode.HALF_EVEN:
        return lower if lower % 2 == 0 else upper
    if rounding_mode is RoundingMode.HALF_ODD:
        return lower if lower % 2 != 0 else upper

    raise InvalidRoundingModeError(rounding_mode)


def round_to_places(value: Fraction, places: int, rounding_mode: RoundingMode) -> Decimal:
    """Round an exact rational $value to $places decimal places.

    The result always carries exactly $places fractional digits, e.g. 5/4 with 4 places
    gives Decimal("1.2500").
    """
    scaled = round_to_integer(value * 10**places, rounding_mode)
    return decimal_from_scaled_int(scaled, places)
