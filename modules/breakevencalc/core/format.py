from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any

from modules.breakevencalc.core.inputs import resolve_currency


def _group_indian(value: str, sep: str = ",") -> str:
    """Group digits en-IN style: last three, then pairs (1,00,00,000)."""
    if len(value) <= 3:
        return value
    head, tail = value[:-3], value[-3:]
    parts = []
    while head:
        parts.append(head[-2:])
        head = head[:-2]
    return sep.join(reversed(parts)) + sep + tail


def _non_finite(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"
    return None


def _split(value: float, decimals: int) -> tuple[str, str, str]:
    quant = Decimal("1") if decimals == 0 else Decimal("1." + "0" * decimals)
    # round the exact binary value: 1.005 is stored as 1.00499... and gives 1.00
    # doubles reach ~1.8e308, so the default 28 digits are not enough
    with localcontext() as ctx:
        ctx.prec = 400
        rounded = Decimal(value).quantize(quant, rounding=ROUND_HALF_UP)
    normalized = format(rounded, "f")
    sign = ""
    if normalized.startswith("-"):
        sign = "-"
        normalized = normalized[1:]
    if "." in normalized:
        integer_part, fraction = normalized.split(".", 1)
    else:
        integer_part, fraction = normalized, ""
    if sign and not integer_part.strip("0") and not fraction.strip("0"):
        sign = ""
    return sign, integer_part, fraction


def format_currency(amount: Any, currency: str) -> str:
    symbol = resolve_currency(currency).symbol
    value = float(amount)
    special = _non_finite(value)
    if special is not None:
        sign = "-" if special.startswith("-") else ""
        return f"{sign}{symbol}{special.lstrip('-')}"

    sign, integer_part, fraction = _split(value, 2)
    return f"{sign}{symbol}{_group_indian(integer_part)}.{fraction}"


def format_number(number: Any) -> str:
    value = float(number)
    special = _non_finite(value)
    if special is not None:
        return special

    sign, integer_part, fraction = _split(value, 3)
    fraction = fraction.rstrip("0")
    grouped = _group_indian(integer_part)
    if fraction:
        return f"{sign}{grouped}.{fraction}"
    return f"{sign}{grouped}"
