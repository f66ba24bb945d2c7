"""
Centralized error handlers for FastAPI.

Maps request rejections and conversion errors to HTTP responses.
Every error response is `{"error": "<message>"}` with a JSON content type.
No stack traces or internal details are exposed for unexpected errors.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from currency_gateway.domain.conversion.errors import (
    ConversionError,
    ConversionErrorKind,
    UpstreamTransportError,
)
from currency_gateway.shared.errors.exceptions import (
    HTTP_400,
    HTTP_405,
    MethodNotAllowedError,
    RequestRejectedError,
)

logger = logging.getLogger(__name__)

HTTP_500 = 500

CONVERSION_ERROR_STATUS = {
    ConversionErrorKind.INVALID_SOURCE_CURRENCY: HTTP_400,
    ConversionErrorKind.INVALID_TARGET_CURRENCY: HTTP_400,
    ConversionErrorKind.INVALID_CONVERSION_AMOUNT: HTTP_400,
    ConversionErrorKind.UNCLASSIFIED: HTTP_500,
}


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestRejectedError)
    async def handle_request_rejected(
        _request: Request, exc: RequestRejectedError
    ) -> JSONResponse:
        """Handle requests refused before the upstream is called."""
        logger.info("Request rejected (%d): %s", exc.status_code, exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(ConversionError)
    async def handle_conversion_error(
        _request: Request, exc: ConversionError
    ) -> JSONResponse:
        """Handle conversions the upstream refused."""
        logger.warning("Conversion refused (%s): %s", exc.kind.name, exc.message)
        return _error_response(CONVERSION_ERROR_STATUS[exc.kind], exc.message)

    @app.exception_handler(UpstreamTransportError)
    async def handle_upstream_transport(
        _request: Request, exc: UpstreamTransportError
    ) -> JSONResponse:
        """Handle an unreachable or misbehaving upstream."""
        logger.error("Upstream failure: %s", exc.message)
        return _error_response(HTTP_500, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing-level errors raised by Starlette itself."""
        if exc.status_code == HTTP_405:
            return _error_response(HTTP_405, MethodNotAllowedError().message)
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "internal server error")
