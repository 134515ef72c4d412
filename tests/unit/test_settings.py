import pytest

from dowell.settings import DEFAULT_MOUNT, load_settings
from modules.breakevencalc.core.inputs import CalculatorMode


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "BREAKEVEN_MODE",
        "BREAKEVEN_DEFAULT_CURRENCY",
        "BREAKEVEN_LOG_LEVEL",
        "BREAKEVEN_LOG_JSON",
        "BREAKEVEN_MOUNT",
        "BREAKEVEN_TEMPLATES",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
def test_defaults():
    settings = load_settings()
    assert settings.mode is CalculatorMode.MANUAL
    assert settings.default_currency == "USD"
    assert settings.log_level == "INFO"
    assert settings.log_json is True
    assert settings.mount == DEFAULT_MOUNT
    assert settings.templates_dir is None


@pytest.mark.unit
def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("BREAKEVEN_MODE", "Live")
    monkeypatch.setenv("BREAKEVEN_DEFAULT_CURRENCY", "inr")
    monkeypatch.setenv("BREAKEVEN_LOG_LEVEL", "debug")
    monkeypatch.setenv("BREAKEVEN_LOG_JSON", "off")
    monkeypatch.setenv("BREAKEVEN_MOUNT", "calc/")
    monkeypatch.setenv("BREAKEVEN_TEMPLATES", str(tmp_path))

    settings = load_settings()
    assert settings.mode is CalculatorMode.LIVE
    assert settings.default_currency == "INR"
    assert settings.log_level == "DEBUG"
    assert settings.log_json is False
    assert settings.mount == "/calc"
    assert settings.templates_dir == tmp_path


@pytest.mark.unit
def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("BREAKEVEN_MODE", "sometimes")
    monkeypatch.setenv("BREAKEVEN_DEFAULT_CURRENCY", "XYZ")
    settings = load_settings()
    assert settings.mode is CalculatorMode.MANUAL
    assert settings.default_currency == "USD"
