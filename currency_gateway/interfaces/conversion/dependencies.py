"""
Dependency injection for the conversion bounded context.

The converter is built once in the application lifespan and kept on
`app.state`; use cases are built per request around it.
"""

from fastapi import Request

from currency_gateway.application.conversion.convert_currency import (
    ConvertCurrencyUseCase,
)
from currency_gateway.domain.conversion.ports import CurrencyConverter


def get_converter(request: Request) -> CurrencyConverter:
    """Return the application-wide converter."""
    return request.app.state.converter


def get_convert_currency_use_case(request: Request) -> ConvertCurrencyUseCase:
    """Build ConvertCurrencyUseCase with its infrastructure dependencies."""
    return ConvertCurrencyUseCase(converter=get_converter(request))
