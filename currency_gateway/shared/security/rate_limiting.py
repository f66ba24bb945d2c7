"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-client rate limits on the conversion route.
Protects the upstream quota against abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from currency_gateway.core.config import settings

HTTP_429 = 429

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a single error field.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": f"rate limit exceeded: {exc.detail}"},
    )
