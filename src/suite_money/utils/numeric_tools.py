from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Numbers accepted as operands of Money arithmetic
Operand: TypeAlias = int | float | Decimal | Fraction

# Use where optimal type is `Fraction`; strings use the "numerator:denominator" form (e.g., "1:3")
RatioLike: TypeAlias = Fraction | int | Decimal | str


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def decimal_from_scaled_int(value: int, places: int) -> Decimal:
    """Return $value / 10**$places as a `Decimal` with exactly $places fractional digits.

    Built from a string, so the result is exact regardless of the active decimal context.

    Examples:
        >>> decimal_from_scaled_int(12500, 4)
        Decimal('1.2500')
        >>> decimal_from_scaled_int(-150, 2)
        Decimal('-1.50')
    """
    return Decimal(f"{value}E-{places}")


def as_fraction(value: Operand) -> Fraction:
    """Converts a numeric operand to an exact `Fraction`.

    Floats go through `as_decimal`, so 0.1 becomes 1/10 rather than its binary approximation.

    Args:
        value: int, float, Decimal or Fraction. `bool` is rejected.

    Returns:
        Exact value as `Fraction`.

    Raises:
        TypeError: If $value is not one of the accepted numeric types.
        ValueError: If $value is not finite.
    """
    # Raise: `bool` is an `int` subclass but is never a meaningful operand
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, Fraction)):
        raise TypeError(f"Operand should be an int, float, Decimal or Fraction, but provided value is: {value!r}")

    if isinstance(value, (int, Fraction)):
        return Fraction(value)

    decimal_value = as_decimal(value)

    # Raise: NaN and infinities have no exact value
    if not decimal_value.is_finite():
        raise ValueError(f"Operand must be finite, but provided value is: {value!r}")

    return Fraction(decimal_value)


def parse_ratio(value: str) -> Fraction:
    """Parse a ratio string like "1:3" (or a plain number like "0.25") into a `Fraction`.

    Args:
        value: Ratio string.

    Returns:
        Reduced `Fraction`.

    Raises:
        ValueError: If $value is not a valid ratio.
    """
    text = value.strip()
    numerator, separator, denominator = text.partition(":")
    if not separator:
        return Fraction(text)

    # Raise: denominator must be non-zero
    denominator_value = Fraction(denominator.strip())
    if denominator_value == 0:
        raise ValueError(f"Ratio '{value}' has a zero denominator")

    return Fraction(numerator.strip()) / denominator_value


def as_ratio(value: RatioLike) -> Fraction:
    """Converts a `RatioLike` value into a `Fraction`.

    Raises:
        TypeError: If $value has an unsupported type.
        ValueError: If $value cannot be parsed or is not finite.
    """
    if isinstance(value, str):
        return parse_ratio(value)

    return as_fraction(value)


def format_ratio(ratio: Fraction) -> str:
    """Format a ratio as "numerator:denominator", e.g. Fraction(5, 4) -> "5:4"."""
    return f"{ratio.numerator}:{ratio.denominator}"
