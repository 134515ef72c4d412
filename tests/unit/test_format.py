import pytest

from modules.breakevencalc.core.format import format_currency, format_number
from modules.breakevencalc.core.inputs import UnsupportedCurrencyError


@pytest.mark.unit
@pytest.mark.parametrize(
    "amount,currency,expected",
    [
        (220_666.66666666666, "INR", "₹2,20,666.67"),
        (20_666.666666666668, "USD", "$20,666.67"),
        (2_206.6666666666665, "JPY", "¥2,206.67"),
        (0, "EUR", "€0.00"),
        (-1_234.5, "GBP", "-£1,234.50"),
        (12_345_678.9, "CAD", "C$1,23,45,678.90"),
        (0.125, "AUD", "A$0.13"),
        (1, "usd", "$1.00"),
    ],
)
def test_format_currency(amount, currency, expected):
    assert format_currency(amount, currency) == expected


@pytest.mark.unit
def test_rounding_uses_the_stored_binary_value():
    # 1.005 and 2.675 are stored just below the halfway point
    assert format_currency(1.005, "USD") == "$1.00"
    assert format_currency(2.675, "EUR") == "€2.67"
    assert format_currency(1.5, "USD") == "$1.50"


@pytest.mark.unit
def test_format_currency_rejects_unknown_code():
    with pytest.raises(UnsupportedCurrencyError):
        format_currency(10, "BTC")


@pytest.mark.unit
@pytest.mark.parametrize(
    "number,expected",
    [
        (10_000_000, "1,00,00,000"),
        (20_666.666666666668, "20,666.667"),
        (1_234.5, "1,234.5"),
        (100, "100"),
        (0, "0"),
        (-98_765.4321, "-98,765.432"),
    ],
)
def test_format_number(number, expected):
    assert format_number(number) == expected


@pytest.mark.unit
def test_non_finite_values():
    assert format_number(float("nan")) == "NaN"
    assert format_number(float("inf")) == "∞"
    assert format_currency(float("-inf"), "USD") == "-$∞"
