from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from modules.breakevencalc.core.inputs import (
    DEFAULT_CURRENCY,
    BreakevenError,
    CalculatorMode,
    resolve_currency,
)

DEFAULT_MOUNT = "/breakevencalc"


@dataclass(frozen=True)
class BreakevenSettings:
    mode: CalculatorMode
    default_currency: str
    log_level: str
    log_json: bool
    mount: str
    templates_dir: Path | None


def _flag(name: str, default: str = "off") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "on"}


def _mode_env(name: str) -> CalculatorMode:
    raw = os.getenv(name, "").strip()
    if not raw:
        return CalculatorMode.MANUAL
    try:
        return CalculatorMode.parse(raw)
    except BreakevenError:
        return CalculatorMode.MANUAL


def _currency_env(name: str) -> str:
    raw = os.getenv(name, "").strip()
    if not raw:
        return DEFAULT_CURRENCY
    try:
        return resolve_currency(raw).code
    except BreakevenError:
        return DEFAULT_CURRENCY


def _mount_env(name: str) -> str:
    mount = os.getenv(name, "").strip() or DEFAULT_MOUNT
    if not mount.startswith("/"):
        mount = "/" + mount
    if mount != "/" and mount.endswith("/"):
        mount = mount.rstrip("/")
    return mount


def templates_dir_override() -> Path | None:
    env_path = os.getenv("BREAKEVEN_TEMPLATES")
    if env_path:
        return Path(env_path)
    return None


def load_settings() -> BreakevenSettings:
    return BreakevenSettings(
        mode=_mode_env("BREAKEVEN_MODE"),
        default_currency=_currency_env("BREAKEVEN_DEFAULT_CURRENCY"),
        log_level=os.getenv("BREAKEVEN_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        log_json=_flag("BREAKEVEN_LOG_JSON", "on"),
        mount=_mount_env("BREAKEVEN_MOUNT"),
        templates_dir=templates_dir_override(),
    )
