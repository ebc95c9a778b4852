from decimal import Decimal, ROUND_HALF_EVEN
from fractions import Fraction

import pytest

from suite_money.domain.rounding import RoundingMode, resolve_rounding_mode, round_to_integer, round_to_places
from suite_money.errors import InvalidArgumentError, InvalidRoundingModeError


@pytest.mark.parametrize(
    "value, half_up, half_down, half_even, half_odd",
    [
        (Fraction(5, 2), 3, 2, 2, 3),
        (Fraction(7, 2), 4, 3, 4, 3),
        (Fraction(-5, 2), -3, -2, -2, -3),
        (Fraction(-7, 2), -4, -3, -4, -3),
        (Fraction(1, 2), 1, 0, 0, 1),
        (Fraction(-1, 2), -1, 0, 0, -1),
    ],
)
def test_ties(value, half_up, half_down, half_even, half_odd) -> None:
    assert round_to_integer(value, RoundingMode.HALF_UP) == half_up
    assert round_to_integer(value, RoundingMode.HALF_DOWN) == half_down
    assert round_to_integer(value, RoundingMode.HALF_EVEN) == half_even
    assert round_to_integer(value, RoundingMode.HALF_ODD) == half_odd


@pytest.mark.parametrize("mode", list(RoundingMode))
@pytest.mark.parametrize(
    "value, expected",
    [
        (Fraction(12, 5), 2),
        (Fraction(13, 5), 3),
        (Fraction(-12, 5), -2),
        (Fraction(-13, 5), -3),
        (Fraction(7), 7),
        (Fraction(0), 0),
    ],
)
def test_non_ties_go_to_nearest_integer(mode, value, expected) -> None:
    assert round_to_integer(value, mode) == expected


def test_round_to_places_keeps_trailing_zeros() -> None:
    assert str(round_to_places(Fraction(5, 4), 4, RoundingMode.HALF_UP)) == "1.2500"
    assert str(round_to_places(Fraction(4, 3), 4, RoundingMode.HALF_UP)) == "1.3333"
    assert round_to_places(Fraction(-1, 8), 2, RoundingMode.HALF_EVEN) == Decimal("-0.12")


def test_resolve_rounding_mode() -> None:
    assert resolve_rounding_mode(RoundingMode.HALF_ODD) is RoundingMode.HALF_ODD
    assert resolve_rounding_mode(ROUND_HALF_EVEN) is RoundingMode.HALF_EVEN


@pytest.mark.parametrize("value", ["HALF_UP", "ROUND_UP", 1, None])
def test_resolve_rounding_mode_rejects_unknown_values(value) -> None:
    with pytest.raises(InvalidRoundingModeError) as exc_info:
        resolve_rounding_mode(value)

    assert exc_info.value.rounding_mode == value
    assert isinstance(exc_info.value, InvalidArgumentError)
