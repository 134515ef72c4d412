from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from dowell.settings import BreakevenSettings
from modules.breakevencalc.core.inputs import CalculatorMode
from modules.breakevencalc.tool.app import create_app

SCENARIO = {
    "total_investment": "10000000",
    "monthly_fixed_expenses": "100000",
    "expected_years": "2",
    "operating_days_per_year": "300",
    "direct_expenses_per_day": "200000",
    "customers_per_day": "100",
}


def make_settings(**overrides) -> BreakevenSettings:
    base = BreakevenSettings(
        mode=CalculatorMode.MANUAL,
        default_currency="USD",
        log_level="INFO",
        log_json=True,
        mount="/breakevencalc",
        templates_dir=None,
    )
    return replace(base, **overrides)


@pytest.fixture()
def scenario() -> dict:
    return dict(SCENARIO)


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app(make_settings()))


@pytest.fixture()
def live_client() -> TestClient:
    return TestClient(create_app(make_settings(mode=CalculatorMode.LIVE)))


@pytest.fixture()
def settings_factory():
    return make_settings
