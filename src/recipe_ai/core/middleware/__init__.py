"""Custom middleware components."""

from recipe_ai.core.middleware.logging import LoggingMiddleware
from recipe_ai.core.middleware.request_id import RequestIDMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
]
