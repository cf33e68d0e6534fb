"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Ładuje pluginy z settings.plugins_dir i składa ewaluator (bootstrap.py)
  - Przy zamknięciu wyładowuje pluginy

Uruchomienie: uvicorn api.main:app
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routers import evaluate, providers
from api.schemas import HealthResponse
from bootstrap import build_evaluator
from config import Settings
from contracts import EvaluationError

logger = logging.getLogger("plugcalc")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    logger.info("Loading function providers from %s...", settings.plugins_dir)
    evaluator, loader = build_evaluator(settings)
    app.state.evaluator = evaluator
    app.state.plugin_loader = loader

    logger.info("PlugCalc API ready (%d providers).", len(evaluator.registry))
    yield

    logger.info("Shutting down, unloading plugins.")
    loader.unload_all()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(providers.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request):
        registry = request.app.state.evaluator.registry
        return HealthResponse(
            status="ok" if len(registry) else "degraded",
            providers=len(registry),
            number_type=settings.number_type,
            version=settings.app_version,
        )

    # Globalny handler błędów ewaluacji
    @app.exception_handler(EvaluationError)
    async def evaluation_error_handler(request: Request, exc: EvaluationError):
        return JSONResponse(
            status_code=422,
            content={"code": exc.code, "detail": str(exc)},
        )

    return app


app = create_app()
