from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from dowell.logs import setup_logger
from dowell.settings import BreakevenSettings, load_settings
from modules.breakevencalc.tool.app import create_app as create_calculator


def build_app(settings: BreakevenSettings | None = None) -> FastAPI:
    settings = settings or load_settings()
    logger = setup_logger(settings.log_level, json=settings.log_json)

    app = FastAPI(title="DoWell Breakeven")

    if settings.mount != "/":

        @app.get("/", include_in_schema=False)
        def root():
            return RedirectResponse(url=f"{settings.mount}/")

    @app.get("/healthz")
    def healthz():
        return {"status": "ok", "mode": settings.mode.value}

    app.mount(settings.mount, create_calculator(settings))
    logger.info(
        "app_built",
        mount=settings.mount,
        mode=settings.mode.value,
        currency=settings.default_currency,
    )
    return app


app = build_app()
