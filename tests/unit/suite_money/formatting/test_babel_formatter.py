from decimal import Decimal

import pytest

from suite_money.formatting import BabelNumberFormatter, NumberFormatter


@pytest.fixture
def formatter() -> BabelNumberFormatter:
    return BabelNumberFormatter()


def test_implements_number_formatter() -> None:
    assert NumberFormatter in BabelNumberFormatter.__mro__


@pytest.mark.parametrize(
    "string, locale, expected",
    [
        ("1,234.5", "en_US", Decimal("1234.5")),
        ("1.234,5", "de_DE", Decimal("1234.5")),
        ("-0.75", "en_GB", Decimal("-0.75")),
        ("١٢٣٤٥٦٫٧٨٩", "ar_EG", Decimal("123456.789")),
    ],
)
def test_parse_decimal(formatter, string, locale, expected) -> None:
    assert formatter.parse_decimal(string, locale) == expected


@pytest.mark.parametrize("string", ["", "abc", "12x"])
def test_parse_decimal_raises_value_error(formatter, string) -> None:
    with pytest.raises(ValueError):
        formatter.parse_decimal(string, "en_US")


@pytest.mark.parametrize(
    "string, locale, expected",
    [
        ("$1,234.50", "en_US", (Decimal("1234.50"), "USD")),
        ("US$10", "en_GB", (Decimal("10"), "USD")),
        ("£7.25", "en_GB", (Decimal("7.25"), "GBP")),
        ("12,50 €", "de_DE", (Decimal("12.50"), "EUR")),
        ("CHF 99", "en_US", (Decimal("99"), "CHF")),
        ("-$5", "en_US", (Decimal("-5"), "USD")),
    ],
)
def test_parse_currency(formatter, string, locale, expected) -> None:
    assert formatter.parse_currency(string, locale) == expected


def test_parse_currency_prefers_longest_symbol(formatter) -> None:
    # "CA$" also contains "$"
    assert formatter.parse_currency("CA$3.00", "en_US") == (Decimal("3.00"), "CAD")


def test_parse_currency_falls_back_to_english_symbols(formatter) -> None:
    # en_GB renders USD as "US$", but a bare "$" is still understood
    assert formatter.parse_currency("$512.1", "en_GB") == (Decimal("512.1"), "USD")
    assert formatter.parse_currency("US$512.1", "en_GB") == (Decimal("512.1"), "USD")


def test_parse_currency_requires_symbol(formatter) -> None:
    with pytest.raises(ValueError):
        formatter.parse_currency("12.50", "en_US")


def test_format_decimal(formatter) -> None:
    assert formatter.format_decimal(Decimal("1234.50"), "en_US") == "1,234.5"
    assert formatter.format_decimal(Decimal("1234.50"), "de_DE") == "1.234,5"


def test_format_currency(formatter) -> None:
    assert formatter.format_currency(Decimal("1234.5"), "USD", "en_US") == "$1,234.50"
    assert formatter.format_currency(Decimal("0"), "JPY", "en_US") == "¥0"
    assert formatter.format_currency(Decimal("1.5"), "EUR", "de_DE") == "1,50\xa0€"
