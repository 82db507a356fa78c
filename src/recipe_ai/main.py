"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn recipe_ai.main:app --reload
"""

from recipe_ai.factory import create_app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    from recipe_ai.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "recipe_ai.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )
