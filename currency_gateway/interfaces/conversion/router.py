"""
FastAPI router for the conversion bounded context.

One route answers every path and every method. Requests are checked
in a fixed order and the first failing check wins:

    1. method is POST                        → 405
    2. Content-Type allows application/json  → 415
    3. Accept allows application/json        → 406
    4. body decodes into a payload           → 400

Only then is the request counted against the rate limit and the
upstream called. Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from currency_gateway.application.conversion.convert_currency import (
    ConvertCurrencyUseCase,
)
from currency_gateway.application.conversion.dtos import ConvertCurrencyCommand
from currency_gateway.core.config import settings
from currency_gateway.interfaces.conversion.dependencies import (
    get_convert_currency_use_case,
)
from currency_gateway.interfaces.conversion.negotiation import header_allows
from currency_gateway.interfaces.conversion.responses import DecimalJSONResponse
from currency_gateway.interfaces.conversion.schemas import (
    ConversionPayload,
    describe_validation_error,
)
from currency_gateway.shared.decimal_json import loads_exact
from currency_gateway.shared.errors.exceptions import (
    MalformedPayloadError,
    MethodNotAllowedError,
    NotAcceptableError,
    UnsupportedMediaTypeError,
)
from currency_gateway.shared.security.rate_limiting import limiter

JSON_MEDIA_TYPE = "application/json"
ALL_METHODS = [
    "GET",
    "HEAD",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "OPTIONS",
    "TRACE",
    "CONNECT",
]

router = APIRouter(tags=["conversion"])


def check_request_headers(request: Request) -> None:
    """Validate method and content negotiation, in that order.

    Raises:
        MethodNotAllowedError: If the method is not POST.
        UnsupportedMediaTypeError: If Content-Type excludes JSON.
        NotAcceptableError: If Accept excludes JSON.
    """
    if request.method != "POST":
        raise MethodNotAllowedError()
    if not header_allows(request.headers.getlist("content-type"), JSON_MEDIA_TYPE):
        raise UnsupportedMediaTypeError()
    if not header_allows(request.headers.getlist("accept"), JSON_MEDIA_TYPE):
        raise NotAcceptableError()


async def read_payload(request: Request) -> ConversionPayload:
    """Decode the request body, keeping `sourceValue` exact.

    Raises:
        MalformedPayloadError: If the body is not a valid conversion payload.
    """
    body = await request.body()
    try:
        document = loads_exact(body)
    except ValueError as exc:
        raise MalformedPayloadError(str(exc)) from exc
    try:
        return ConversionPayload.model_validate(document)
    except ValidationError as exc:
        raise MalformedPayloadError(describe_validation_error(exc)) from exc


async def get_valid_payload(request: Request) -> ConversionPayload:
    """Dependency running every request check before the route body.

    FastAPI resolves dependencies before the rate-limit wrapper runs,
    so only requests that pass these checks count against the limit.
    """
    check_request_headers(request)
    return await read_payload(request)


@router.api_route(
    "/{path:path}",
    methods=ALL_METHODS,
    response_class=DecimalJSONResponse,
    include_in_schema=False,
)
@limiter.limit(settings.rate_limit_default)
async def convert_currency(
    request: Request,
    payload: ConversionPayload = Depends(get_valid_payload),
    use_case: ConvertCurrencyUseCase = Depends(get_convert_currency_use_case),
) -> DecimalJSONResponse:
    """Convert the posted amount into the requested currency."""
    command = ConvertCurrencyCommand(
        source_currency=payload.source_currency,
        source_value=payload.source_value,
        target_currency=payload.target_currency,
    )
    result = await use_case.execute(command)
    return DecimalJSONResponse(
        status_code=200,
        content={"currency": result.currency, "value": result.value},
    )
