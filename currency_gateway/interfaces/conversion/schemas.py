"""
Pydantic schema for the conversion request payload.

The body is decoded with numbers parsed as `Quantity` before it reaches
this schema, so `sourceValue` is never held as a float and keeps the
exact text the client wrote.
No business logic belongs here.
"""

import re
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, ValidationError

from currency_gateway.domain.conversion.entities import Quantity, quantity_text

JSON_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def parse_source_value(value: Any) -> Quantity:
    """Accept a JSON number or a string holding one, keeping its text."""
    if isinstance(value, Quantity):
        return value
    if isinstance(value, str) and JSON_NUMBER.fullmatch(value):
        return Quantity(value)
    if isinstance(value, Decimal) and value.is_finite():
        return Quantity(quantity_text(value))
    raise ValueError("Input should be a JSON number or a numeric string")


class ConversionPayload(BaseModel):
    """Request schema for the conversion endpoint.

    Attributes:
        source_currency: Currency the value is expressed in (`sourceCurrency`).
        source_value: Exact decimal value to convert (`sourceValue`),
            given as a JSON number or a numeric string.
        target_currency: Currency to convert into (`targetCurrency`).
    """

    model_config = ConfigDict(extra="ignore")

    source_currency: str = Field(..., alias="sourceCurrency")
    source_value: Annotated[Decimal, PlainValidator(parse_source_value)] = Field(
        ..., alias="sourceValue"
    )
    target_currency: str = Field(..., alias="targetCurrency")


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a Pydantic validation error into a one-line message.

    `sourceValue: Value error, ...; targetCurrency: Field required`
    """
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(problems)
