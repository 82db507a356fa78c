"""Request ID middleware for request tracing.

This middleware:
- Generates or propagates request IDs for each request
- Adds request ID to response headers
- Binds request and caller IDs to logging context for correlation
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from recipe_ai.observability.logging import bind_context, clear_context


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware to add request ID to all requests.

    Propagates existing X-Request-ID header or generates a new one.
    The request ID is stored in request.state and added to response headers.
    """

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = "X-Request-ID",
        caller_header: str = "X-Caller-ID",
    ) -> None:
        super().__init__(app)
        self.header_name = header_name
        self.caller_header = caller_header

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add request ID."""
        clear_context()

        request_id = request.headers.get(self.header_name, str(uuid.uuid4()))
        request.state.request_id = request_id

        context = {"request_id": request_id}
        caller_id = request.headers.get(self.caller_header)
        if caller_id:
            context["caller_id"] = caller_id
        bind_context(**context)

        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response
