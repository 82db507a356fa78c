"""Unit tests for logging middleware.

Tests cover:
- Excluded paths
- Request context binding
- Process time header
- Client IP extraction
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from recipe_ai.core.middleware.logging import LoggingMiddleware


pytestmark = pytest.mark.unit


def _request(path: str = "/api/v1/recipe-ai/recipes/generate", **headers: str) -> MagicMock:
    request = MagicMock()
    request.url.path = path
    request.method = "POST"
    request.headers = headers
    request.query_params = {}
    request.client.host = "10.0.0.5"
    return request


def _call_next() -> AsyncMock:
    response = MagicMock()
    response.headers = {}
    response.status_code = 200
    return AsyncMock(return_value=response)


class TestLoggingMiddleware:
    """Tests for LoggingMiddleware."""

    async def test_skips_excluded_paths(self) -> None:
        """Should pass excluded paths straight through."""
        middleware = LoggingMiddleware(MagicMock(), exclude_paths={"/health"})
        call_next = _call_next()

        with patch("recipe_ai.core.middleware.logging.bind_context") as mock_bind:
            result = await middleware.dispatch(_request("/health"), call_next)

        mock_bind.assert_not_called()
        assert "X-Process-Time" not in result.headers

    async def test_binds_request_context(self) -> None:
        """Should bind method, path and client IP."""
        middleware = LoggingMiddleware(MagicMock())

        with patch("recipe_ai.core.middleware.logging.bind_context") as mock_bind:
            await middleware.dispatch(_request(), _call_next())

        mock_bind.assert_called_once_with(
            method="POST",
            path="/api/v1/recipe-ai/recipes/generate",
            client_ip="10.0.0.5",
        )

    async def test_adds_process_time_header(self) -> None:
        """Should report request duration in milliseconds."""
        middleware = LoggingMiddleware(MagicMock())

        with patch("recipe_ai.core.middleware.logging.bind_context"):
            result = await middleware.dispatch(_request(), _call_next())

        assert result.headers["X-Process-Time"].endswith("ms")


class TestGetClientIp:
    """Tests for client IP extraction."""

    def test_prefers_forwarded_for(self) -> None:
        """Should use the first address of X-Forwarded-For."""
        middleware = LoggingMiddleware(MagicMock())
        request = _request(**{"x-forwarded-for": "1.2.3.4, 10.0.0.1"})

        assert middleware._get_client_ip(request) == "1.2.3.4"

    def test_uses_real_ip(self) -> None:
        """Should fall back to X-Real-IP."""
        middleware = LoggingMiddleware(MagicMock())
        request = _request(**{"x-real-ip": "5.6.7.8"})

        assert middleware._get_client_ip(request) == "5.6.7.8"

    def test_unknown_without_client(self) -> None:
        """Should report unknown when nothing identifies the client."""
        middleware = LoggingMiddleware(MagicMock())
        request = _request()
        request.client = None

        assert middleware._get_client_ip(request) == "unknown"
