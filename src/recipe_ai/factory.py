"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application with appropriate settings
- Sets up the middleware stack
- Registers exception handlers
- Mounts API routers and metrics
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_ai.api.v1.router import router as v1_router
from recipe_ai.core.config import Settings, get_settings
from recipe_ai.core.events import lifespan
from recipe_ai.core.exceptions import setup_exception_handlers
from recipe_ai.core.middleware import LoggingMiddleware, RequestIDMiddleware
from recipe_ai.observability.metrics import setup_metrics


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="Recipe generation with caching, rate limiting and quality-gated fallback",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        debug=settings.app.debug,
    )

    app.state.settings = settings

    setup_exception_handlers(app)
    _setup_middleware(app, settings)
    app.include_router(v1_router, prefix=settings.api.v1_prefix)
    setup_metrics(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Middleware is executed in reverse order of addition, so the request ID
    is bound before the logging middleware runs.
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Process-Time", "X-Recipe-Source"],
        )

    prefix = settings.api.v1_prefix
    app.add_middleware(
        LoggingMiddleware,
        exclude_paths={f"{prefix}/health", f"{prefix}/ready", f"{prefix}/metrics"},
    )
    app.add_middleware(RequestIDMiddleware)
