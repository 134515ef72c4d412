from __future__ import annotations

from typing import Any, Dict

import structlog

from modules.breakevencalc.core.break_even import ResultState, calculate_from_state
from modules.breakevencalc.core.format import format_currency, format_number
from modules.breakevencalc.core.inputs import (
    DEFAULT_CURRENCY,
    FIELD_NAMES,
    CalculatorMode,
    FieldValue,
    InputState,
    resolve_currency,
)
from modules.breakevencalc.core.validate import FieldValidation, validate_field

logger = structlog.get_logger(__name__)


class BreakevenController:
    """Owns one calculator's inputs, results and field errors.

    All mutation goes through ``set_field``, ``calculate``, ``reset`` and
    ``set_currency``. Results are only ever replaced as a whole.
    """

    def __init__(
        self,
        mode: CalculatorMode | str = CalculatorMode.MANUAL,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self.mode = CalculatorMode.parse(mode)
        self._initial_currency = resolve_currency(currency).code
        self._inputs = InputState.initial(self.mode, self._initial_currency)
        self._results = ResultState.zero()
        self._errors: Dict[str, str] = {}

    @property
    def inputs(self) -> InputState:
        return self._inputs

    @property
    def results(self) -> ResultState:
        return self._results

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def currency(self) -> str:
        return self._inputs.currency

    def set_field(self, name: str, value: Any) -> FieldValidation:
        validation = validate_field(name, value, mode=self.mode)

        self._errors.pop(name, None)
        if validation.violation is not None:
            self._errors[name] = validation.violation.message
            logger.info(
                "field_constraint_violation",
                field=name,
                value=validation.value,
                message=validation.violation.message,
            )

        self._inputs = self._inputs.with_field(name, validation.value)
        if self.mode is CalculatorMode.LIVE:
            self._results = calculate_from_state(self._inputs)
        return validation

    def set_fields(self, values: Dict[str, Any]) -> None:
        for name in FIELD_NAMES:
            if name in values and values[name] is not None:
                self.set_field(name, values[name])

    def calculate(self) -> ResultState:
        self._results = calculate_from_state(self._inputs)
        logger.debug("calculated", mode=self.mode.value, **self._results.as_dict())
        return self._results

    def reset(self) -> None:
        self._inputs = InputState.initial(self.mode, self._initial_currency)
        self._results = ResultState.zero()
        self._errors = {}
        logger.debug("reset", mode=self.mode.value)

    def set_currency(self, code: str) -> None:
        currency = resolve_currency(code)
        self._inputs = self._inputs.with_currency(currency.code)

    def formatted(self) -> Dict[str, Any]:
        code = self.currency
        numbers = self._inputs.numbers()
        inputs: Dict[str, str] = {}
        for name in FIELD_NAMES:
            value: FieldValue = getattr(self._inputs, name)
            inputs[name] = "" if value == "" else format_number(numbers[name])
        return {
            "results": {
                key: format_currency(amount, code)
                for key, amount in self._results.as_dict().items()
            },
            "inputs": inputs,
        }

    def snapshot(self) -> Dict[str, Any]:
        values = self._inputs.as_dict()
        currency = values.pop("currency")
        return {
            "mode": self.mode.value,
            "currency": currency,
            "inputs": values,
            "errors": self.errors,
            "results": self._results.as_dict(),
            "formatted": self.formatted(),
        }
