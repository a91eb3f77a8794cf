"""
FastAPI application factory.

Each call to create_app() builds a fresh container (data store, session
manager, use cases), so every app instance has its own session. The
module-level ``app`` is the one uvicorn serves.

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    app = create_app()  # settings from the environment

    test_app = create_app(
        settings=Settings(environment="test", session_marker_backend="memory", _env_file=None)
    )
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.container import build_container
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the app and its container.

    Args:
        settings: Settings to use; defaults to get_settings().

    Returns:
        The FastAPI application, with the session already restored.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Workout Log API",
        description="Session and data store for workout templates and logs",
        version="1.0.0",
    )

    # Composition root: one store and one session per app
    app.state.container = build_container(settings)

    _configure_cors(app, settings)
    _include_routers(app)

    return app


def _configure_logging(settings: Settings) -> None:
    """Set the root log level from settings."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for workout-log")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    trusted_origins.extend(settings.cors_allowed_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        data_router,
        health_router,
        logged_workouts_router,
        session_router,
        templates_router,
    )

    # /health has no prefix
    app.include_router(health_router)

    app.include_router(session_router)
    app.include_router(templates_router)
    app.include_router(logged_workouts_router)
    app.include_router(data_router)


# uvicorn backend.main:app
app = create_app()
