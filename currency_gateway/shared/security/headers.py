"""
Response hardening for a JSON-only API.

Every response, errors included, carries headers suited to a JSON API
whose answers are never cached.
"""

from collections.abc import Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

JSON_API_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add hardening headers to responses that do not already set them."""

    def __init__(
        self, app: ASGIApp, headers: Mapping[str, str] = JSON_API_HEADERS
    ) -> None:
        super().__init__(app)
        self._headers = dict(headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers.setdefault(name, value)
        return response
