from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import structlog
from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from dowell.errors import ValidationNormalizeMiddleware
from dowell.settings import BreakevenSettings, load_settings
from modules.breakevencalc.core.controller import BreakevenController
from modules.breakevencalc.core.inputs import (
    CURRENCIES,
    FIELD_METAS,
    BreakevenError,
    currency_options,
)

logger = structlog.get_logger(__name__)

BASE_DIR = Path(__file__).parent


def _calc_with(
    settings: BreakevenSettings,
    values: Dict[str, Any],
    currency: str | None,
    mode: str | None,
) -> Tuple[Dict[str, Any] | None, str | None]:
    try:
        controller = BreakevenController(
            mode=mode or settings.mode,
            currency=currency or settings.default_currency,
        )
    except BreakevenError as exc:
        return None, str(exc)

    controller.set_fields(values)
    controller.calculate()
    return controller.snapshot(), None


def _validate_with(
    settings: BreakevenSettings,
    field: str,
    value: str | None,
    mode: str | None,
) -> Tuple[Dict[str, Any] | None, str | None]:
    try:
        controller = BreakevenController(mode=mode or settings.mode)
        validation = controller.set_field(field, value)
    except BreakevenError as exc:
        return None, str(exc)
    return {
        "field": validation.field,
        "value": validation.value,
        "error": validation.error,
    }, None


def create_app(settings: BreakevenSettings | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="Breakeven Point Calculator")
    app.add_middleware(ValidationNormalizeMiddleware)

    template_dirs = [str(BASE_DIR / "templates")]
    if settings.templates_dir is not None:
        template_dirs.insert(0, str(settings.templates_dir))
    templates = Jinja2Templates(directory=template_dirs)
    templates.env.auto_reload = True
    templates.env.cache = {}

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        base_path = request.url.path.rstrip("/")
        controller = BreakevenController(
            mode=settings.mode, currency=settings.default_currency
        )
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "base_path": base_path,
                "fields": FIELD_METAS,
                "currencies": CURRENCIES,
                "state": controller.snapshot(),
            },
        )

    @app.get("/state")
    def initial_state(mode: str | None = None):
        try:
            controller = BreakevenController(
                mode=mode or settings.mode, currency=settings.default_currency
            )
        except BreakevenError as exc:
            return JSONResponse({"error": str(exc)}, status_code=400)
        return controller.snapshot()

    @app.get("/currencies")
    def currencies():
        return {"default": settings.default_currency, "currencies": currency_options()}

    @app.post("/validate")
    def validate(
        field: str = Form(...),
        value: str | None = Form(None),
        mode: str | None = Form(None),
    ):
        result, error = _validate_with(settings, field, value, mode)
        if error:
            logger.info("validate_rejected", field=field, error=error)
            return JSONResponse({"error": error}, status_code=400)
        return result

    @app.post("/calc")
    def calc(
        total_investment: str | None = Form(None),
        monthly_fixed_expenses: str | None = Form(None),
        expected_years: str | None = Form(None),
        operating_days_per_year: str | None = Form(None),
        direct_expenses_per_day: str | None = Form(None),
        customers_per_day: str | None = Form(None),
        currency: str | None = Form(None),
        mode: str | None = Form(None),
    ):
        values = {
            "total_investment": total_investment,
            "monthly_fixed_expenses": monthly_fixed_expenses,
            "expected_years": expected_years,
            "operating_days_per_year": operating_days_per_year,
            "direct_expenses_per_day": direct_expenses_per_day,
            "customers_per_day": customers_per_day,
        }
        result, error = _calc_with(settings, values, currency, mode)
        if error:
            logger.info("calc_rejected", currency=currency, mode=mode, error=error)
            return JSONResponse({"error": error}, status_code=400)
        return result

    app.state.settings = settings
    return app


app = create_app()
