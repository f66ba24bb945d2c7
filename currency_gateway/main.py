"""
Application entry point.

Creates the FastAPI application and wires together:
- The conversion router (catches every path)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The upstream converter, built once per process

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from currency_gateway.core.config import settings
from currency_gateway.domain.conversion.ports import CurrencyConverter
from currency_gateway.infrastructure.conversion.apilayer_converter import (
    ApiLayerConverter,
)
from currency_gateway.interfaces.conversion.router import router as conversion_router
from currency_gateway.shared.errors.handlers import register_error_handlers
from currency_gateway.shared.logging import configure_logging
from currency_gateway.shared.security.headers import SecurityHeadersMiddleware
from currency_gateway.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: build and release the upstream converter."""
    owned_converter = None
    if getattr(app.state, "converter", None) is None:
        owned_converter = ApiLayerConverter(
            base_uri=settings.upstream_base_uri,
            api_key=settings.api_key,
            timeout=settings.upstream_timeout_seconds,
        )
        app.state.converter = owned_converter

    logger.info("Forwarding conversions to %s", settings.upstream_base_uri)
    yield

    if owned_converter is not None:
        await owned_converter.aclose()
        app.state.converter = None


def create_app(converter: CurrencyConverter | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers the router, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        converter: Optional converter to use instead of the upstream
            adapter built at startup. The caller keeps ownership of it.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, secrets=(settings.api_key,))

    # Documentation routes stay off: every path belongs to the converter.
    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.converter = converter

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(conversion_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured address."""
    logger.info("Listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        "currency_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
