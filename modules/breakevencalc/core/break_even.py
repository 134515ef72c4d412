from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from modules.breakevencalc.core.inputs import InputState, parse_non_negative_number


@dataclass(frozen=True)
class ResultState:
    daily_return_needed: float = 0.0
    targeted_sale_value_per_day: float = 0.0
    targeted_sale_value_per_customer: float = 0.0

    @classmethod
    def zero(cls) -> "ResultState":
        return cls()

    def as_dict(self) -> Dict[str, float]:
        return {
            "daily_return_needed": self.daily_return_needed,
            "targeted_sale_value_per_day": self.targeted_sale_value_per_day,
            "targeted_sale_value_per_customer": self.targeted_sale_value_per_customer,
        }


def calculate_break_even(
    total_investment: Any,
    monthly_fixed_expenses: Any,
    expected_years: Any,
    operating_days_per_year: Any,
    direct_expenses_per_day: Any,
    customers_per_day: Any,
) -> ResultState:
    """Daily sales targets needed to recover the investment and expenses.

    Every argument goes through ``parse_non_negative_number``. If any of them
    ends up at zero the zero result is returned and nothing is divided.
    """
    investment = parse_non_negative_number(total_investment)
    monthly = parse_non_negative_number(monthly_fixed_expenses)
    years = parse_non_negative_number(expected_years)
    days = parse_non_negative_number(operating_days_per_year)
    direct = parse_non_negative_number(direct_expenses_per_day)
    customers = parse_non_negative_number(customers_per_day)

    if min(investment, monthly, years, days, direct, customers) <= 0:
        return ResultState.zero()

    daily_return = (investment + monthly * years * 12) / (days * years)
    per_day = direct + daily_return
    per_customer = per_day / customers

    return ResultState(
        daily_return_needed=daily_return,
        targeted_sale_value_per_day=per_day,
        targeted_sale_value_per_customer=per_customer,
    )


def calculate_from_state(inputs: InputState) -> ResultState:
    numbers = inputs.numbers()
    return calculate_break_even(
        numbers["total_investment"],
        numbers["monthly_fixed_expenses"],
        numbers["expected_years"],
        numbers["operating_days_per_year"],
        numbers["direct_expenses_per_day"],
        numbers["customers_per_day"],
    )
