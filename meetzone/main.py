from __future__ import annotations

from fastapi import FastAPI

from meetzone.api.routes import router as api_router
from meetzone.config import Settings, load_settings
from meetzone.core.clock import Clock
from meetzone.observability.logs import configure_logging
from meetzone.observability.metrics import Metrics
from meetzone.service import ConversionService


def create_app(settings: Settings | None = None, *, clock: Clock | None = None) -> FastAPI:
    app_settings = settings or load_settings()
    configure_logging(app_settings.log_level)

    metrics = Metrics()
    service = ConversionService(clock=clock, metrics=metrics)

    app = FastAPI(title="meetzone", version="0.1.0")
    app.state.settings = app_settings
    app.state.metrics = metrics
    app.state.service = service

    app.include_router(api_router)
    return app


app = create_app()
