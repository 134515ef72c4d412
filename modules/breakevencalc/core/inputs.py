from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Tuple, Union

FieldValue = Union[str, float]


class BreakevenError(ValueError):
    pass


class UnknownFieldError(BreakevenError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown field '{name}'.")
        self.name = name


class UnsupportedCurrencyError(BreakevenError):
    def __init__(self, code: str) -> None:
        super().__init__(f"Unsupported currency '{code}'.")
        self.code = code


class UnsupportedModeError(BreakevenError):
    def __init__(self, mode: str) -> None:
        super().__init__(f"Unsupported mode '{mode}'.")
        self.mode = mode


class CalculatorMode(str, Enum):
    """How the calculator reacts to edits.

    MANUAL keeps sanitized strings and waits for an explicit calculate.
    LIVE parses numbers leniently and recomputes on every edit.
    """

    MANUAL = "manual"
    LIVE = "live"

    @classmethod
    def parse(cls, value: Any) -> "CalculatorMode":
        if isinstance(value, cls):
            return value
        raw = str(value or "").strip().lower()
        for mode in cls:
            if mode.value == raw:
                return mode
        raise UnsupportedModeError(str(value))


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str


CURRENCIES: Tuple[Currency, ...] = (
    Currency("INR", "Indian Rupee", "₹"),
    Currency("USD", "US Dollar", "$"),
    Currency("EUR", "Euro", "€"),
    Currency("GBP", "British Pound", "£"),
    Currency("JPY", "Japanese Yen", "¥"),
    Currency("CAD", "Canadian Dollar", "C$"),
    Currency("AUD", "Australian Dollar", "A$"),
)
CURRENCY_BY_CODE: Dict[str, Currency] = {item.code: item for item in CURRENCIES}
DEFAULT_CURRENCY = "USD"


def resolve_currency(code: Any) -> Currency:
    normalized = str(code or "").strip().upper()
    currency = CURRENCY_BY_CODE.get(normalized)
    if currency is None:
        raise UnsupportedCurrencyError(str(code))
    return currency


@dataclass(frozen=True)
class FieldMeta:
    name: str
    label: str
    placeholder: str
    monetary: bool = False


FIELD_METAS: Tuple[FieldMeta, ...] = (
    FieldMeta("total_investment", "Total Investment", "Enter total investment", True),
    FieldMeta(
        "monthly_fixed_expenses",
        "Monthly Fixed Expenses",
        "Enter monthly fixed expenses",
        True,
    ),
    FieldMeta("expected_years", "Expected Years for ROI", "Enter expected years"),
    FieldMeta(
        "operating_days_per_year",
        "Operating Days per Year",
        "Enter operating days per year",
    ),
    FieldMeta(
        "direct_expenses_per_day",
        "Direct Expenses per Day",
        "Enter direct expenses per day",
        True,
    ),
    FieldMeta("customers_per_day", "Customers per Day", "Enter customers per day"),
)
FIELD_NAMES: Tuple[str, ...] = tuple(meta.name for meta in FIELD_METAS)

MAX_OPERATING_DAYS = 365.0

LIVE_SEED: Dict[str, float] = {
    "total_investment": 10_000_000.0,
    "monthly_fixed_expenses": 100_000.0,
    "expected_years": 2.0,
    "operating_days_per_year": 300.0,
    "direct_expenses_per_day": 200_000.0,
    "customers_per_day": 100.0,
}


def parse_non_negative_number(raw: Any) -> float:
    """Coerce a raw field value into a float for calculation.

    Empty, unparseable, negative and non-finite values all become 0.0 so the
    caller never has to deal with a parse failure. Underscore separators and
    non-ASCII digits count as unparseable.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return 0.0
        # float() also takes "1_000" and non-ASCII digits; a text field should not
        if "_" in text or not text.isascii():
            return 0.0
        try:
            value = float(text)
        except ValueError:
            return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


@dataclass(frozen=True)
class InputState:
    total_investment: FieldValue = ""
    monthly_fixed_expenses: FieldValue = ""
    expected_years: FieldValue = ""
    operating_days_per_year: FieldValue = ""
    direct_expenses_per_day: FieldValue = ""
    customers_per_day: FieldValue = ""
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def initial(
        cls,
        mode: CalculatorMode = CalculatorMode.MANUAL,
        currency: str = DEFAULT_CURRENCY,
    ) -> "InputState":
        if mode is CalculatorMode.LIVE:
            return cls(currency=currency, **LIVE_SEED)
        return cls(currency=currency)

    def with_field(self, name: str, value: FieldValue) -> "InputState":
        if name not in FIELD_NAMES:
            raise UnknownFieldError(name)
        return replace(self, **{name: value})

    def with_currency(self, code: str) -> "InputState":
        return replace(self, currency=code)

    def numbers(self) -> Dict[str, float]:
        return {name: parse_non_negative_number(getattr(self, name)) for name in FIELD_NAMES}

    def as_dict(self) -> Dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


def currency_options() -> List[Dict[str, str]]:
    return [
        {"code": item.code, "name": item.name, "symbol": item.symbol}
        for item in CURRENCIES
    ]
