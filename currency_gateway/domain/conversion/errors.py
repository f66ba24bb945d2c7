"""
Domain-specific errors for the conversion bounded context.

All errors raised while classifying an upstream answer are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

import json
from enum import Enum

from currency_gateway.domain.conversion.entities import Amount, Currency


class ConversionErrorKind(Enum):
    """Conversion failures the upstream reports, keyed by its error code."""

    INVALID_SOURCE_CURRENCY = "invalid_from_currency"
    INVALID_TARGET_CURRENCY = "invalid_to_currency"
    INVALID_CONVERSION_AMOUNT = "invalid_conversion_amount"
    UNCLASSIFIED = "unclassified"


class ConversionDomainError(Exception):
    """Base error for all conversion domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConversionError(ConversionDomainError):
    """The upstream rejected the conversion as semantically invalid."""

    kind: ConversionErrorKind = ConversionErrorKind.UNCLASSIFIED


class InvalidSourceCurrencyError(ConversionError):
    """Raised when the upstream does not know the source currency."""

    kind = ConversionErrorKind.INVALID_SOURCE_CURRENCY

    def __init__(self, currency: Currency) -> None:
        super().__init__(f"invalid source currency {currency}")
        self.currency = currency


class InvalidTargetCurrencyError(ConversionError):
    """Raised when the upstream does not know the target currency."""

    kind = ConversionErrorKind.INVALID_TARGET_CURRENCY

    def __init__(self, currency: Currency) -> None:
        super().__init__(f"invalid target currency {currency}")
        self.currency = currency


class InvalidConversionAmountError(ConversionError):
    """Raised when the upstream refuses the amount to convert."""

    kind = ConversionErrorKind.INVALID_CONVERSION_AMOUNT

    def __init__(self, quantity_text: str) -> None:
        super().__init__(f"invalid conversion amount {quantity_text}")
        self.quantity_text = quantity_text


class UnclassifiedConversionError(ConversionError):
    """Raised for an upstream error code outside the known table."""

    kind = ConversionErrorKind.UNCLASSIFIED

    def __init__(self, code: str, detail: str) -> None:
        super().__init__(f"error {json.dumps(code, ensure_ascii=False)}: {detail}")
        self.code = code
        self.detail = detail


class UpstreamTransportError(ConversionDomainError):
    """Raised when the upstream could not be reached or answered unusably.

    Covers network failures, timeouts, undecodable bodies and
    unexpected HTTP statuses. Never a statement about the request itself.
    """


def classify_upstream_error(
    code: str,
    detail: str,
    source_amount: Amount,
    target_currency: Currency,
) -> ConversionError:
    """Turn an upstream error code into the matching conversion error.

    Args:
        code: The `error.code` field of the upstream 400 body.
        detail: The `error.message` field of the upstream 400 body.
        source_amount: The amount that was sent upstream.
        target_currency: The currency that was requested.

    Returns:
        The conversion error for the code, `UnclassifiedConversionError`
        when the code is not in the table.
    """
    try:
        kind = ConversionErrorKind(code)
    except ValueError:
        kind = ConversionErrorKind.UNCLASSIFIED

    if kind is ConversionErrorKind.INVALID_SOURCE_CURRENCY:
        return InvalidSourceCurrencyError(source_amount.currency)
    if kind is ConversionErrorKind.INVALID_TARGET_CURRENCY:
        return InvalidTargetCurrencyError(target_currency)
    if kind is ConversionErrorKind.INVALID_CONVERSION_AMOUNT:
        return InvalidConversionAmountError(source_amount.quantity_text)
    return UnclassifiedConversionError(code, detail)
