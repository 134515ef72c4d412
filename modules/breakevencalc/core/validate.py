from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from modules.breakevencalc.core.inputs import (
    FIELD_NAMES,
    MAX_OPERATING_DAYS,
    CalculatorMode,
    FieldValue,
    UnknownFieldError,
    parse_non_negative_number,
)

OPERATING_DAYS_MESSAGE = "Operating days cannot exceed 365 days per year"


@dataclass(frozen=True)
class FieldConstraintViolation:
    """Advisory problem with a single field. Never blocks entry or calculation."""

    field: str
    message: str


@dataclass(frozen=True)
class FieldValidation:
    field: str
    value: FieldValue
    violation: FieldConstraintViolation | None = None

    @property
    def error(self) -> str | None:
        return self.violation.message if self.violation else None


def sanitize_numeric_text(raw: Any) -> str:
    """Keep digits and one decimal point, drop everything else.

    A second decimal point ends the number: "1.2.3" becomes "1.2".
    """
    if raw is None:
        return ""
    kept = []
    seen_point = False
    for char in str(raw):
        if "0" <= char <= "9":
            kept.append(char)
        elif char == ".":
            if seen_point:
                break
            kept.append(char)
            seen_point = True
    return "".join(kept)


def _check_constraints(name: str, value: FieldValue) -> FieldConstraintViolation | None:
    if name != "operating_days_per_year":
        return None
    if value == "":
        return None
    if parse_non_negative_number(value) > MAX_OPERATING_DAYS:
        return FieldConstraintViolation(name, OPERATING_DAYS_MESSAGE)
    return None


def validate_field(
    name: str,
    raw: Any,
    *,
    mode: CalculatorMode = CalculatorMode.MANUAL,
) -> FieldValidation:
    if name not in FIELD_NAMES:
        raise UnknownFieldError(name)

    value: FieldValue
    if mode is CalculatorMode.LIVE:
        value = parse_non_negative_number(raw)
    else:
        value = sanitize_numeric_text(raw)

    return FieldValidation(name, value, _check_constraints(name, value))
