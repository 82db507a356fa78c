"""Application lifespan event handlers.

This module defines the lifespan context manager that handles:
- Application startup: shared store, provider and generation service
- Application shutdown: drain usage notifications, close connections
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from recipe_ai.core.config import Settings, StorageBackend, get_settings
from recipe_ai.observability.logging import get_logger, setup_logging
from recipe_ai.services.generation import create_generation_service
from recipe_ai.storage import MemoryStore, RedisStore, close_redis_pool, init_redis_pool


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from recipe_ai.storage import KeyValueStore

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.

    Raises:
        ProviderUnavailableError: If no provider is usable and fallback is
            disabled.
    """
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        storage_backend=str(settings.storage.backend),
        ai_enabled=settings.llm.enabled,
    )

    store = await _init_store(settings)
    app.state.store = store

    try:
        service = create_generation_service(settings, store)
        await service.initialize()
    except Exception:
        logger.error("Generation service failed to start")
        if isinstance(store, RedisStore):
            await close_redis_pool()
        raise
    app.state.generation_service = service

    logger.info(
        "Application startup complete",
        provider_status=str(service.provider_status),
    )


async def _init_store(settings: Settings) -> KeyValueStore:
    """Create the shared store, falling back to process memory without Redis."""
    if settings.storage.backend != StorageBackend.REDIS:
        return MemoryStore()

    try:
        client = await init_redis_pool(
            settings.redis_url,
            max_connections=settings.redis.max_connections,
        )
    except (RedisError, OSError):
        logger.exception("Failed to initialize Redis - using in-memory store")
        return MemoryStore()
    return RedisStore(client)


async def _shutdown(app: FastAPI) -> None:
    """Shutdown all application services.

    Args:
        app: The FastAPI application instance.
    """
    logger.info("Shutting down application")

    service = getattr(app.state, "generation_service", None)
    if service is not None:
        await service.shutdown()

    if isinstance(getattr(app.state, "store", None), RedisStore):
        await close_redis_pool()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    yield
    await _shutdown(app)
