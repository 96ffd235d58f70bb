"""Predictor API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PredictorAPIError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store connected on startup via lifespan; a failed connect aborts startup
      before any request is served
    - Exactly one PredictorStore per app, held on app.state and closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: startup failure and cleanup in one place
    - create_app() factory: tests build apps without a live store
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from predictor_api.api.error_handlers import register_error_handlers
from predictor_api.api.routes import health, predictors
from predictor_api.config import Settings, get_settings
from predictor_api.core.errors import StorageConnectionError
from predictor_api.infrastructure.database import connect
from predictor_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    try:
        store = await connect(
            settings.mongo_uri,
            settings.mongo_database,
            settings.mongo_collection,
            timeout_seconds=settings.mongo_connect_timeout_seconds,
        )
    except StorageConnectionError as e:
        logger.critical(
            f"Failed to connect to document store: {e.message}",
            extra={"error_code": e.code},
        )
        raise
    app.state.predictor_store = store
    logger.info("Predictor API started")
    yield
    logger.info("Predictor API shutting down")
    store.close()
    app.state.predictor_store = None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with routes and error handlers."""
    settings = settings or get_settings()
    app = FastAPI(title="Predictor API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.predictor_store = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(predictors.router)

    register_error_handlers(app)
    return app


app = create_app()
