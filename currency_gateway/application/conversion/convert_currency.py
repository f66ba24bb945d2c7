"""
Use case: Convert an amount from one currency into another.

Input: ConvertCurrencyCommand (source currency, source value, target currency)
Output: ConvertCurrencyResult
Side effects: Exactly one call to the upstream exchange service.
Failure cases: ConversionError subclasses, UpstreamTransportError.
"""

import logging

from currency_gateway.application.conversion.dtos import (
    ConvertCurrencyCommand,
    ConvertCurrencyResult,
)
from currency_gateway.domain.conversion.entities import (
    Amount,
    ConversionRequest,
    Currency,
)
from currency_gateway.domain.conversion.ports import CurrencyConverter

logger = logging.getLogger(__name__)


class ConvertCurrencyUseCase:
    """Orchestrates a single currency conversion.

    Builds the domain request from the command and delegates to the
    CurrencyConverter port. Errors raised by the port propagate unchanged.
    """

    def __init__(self, converter: CurrencyConverter) -> None:
        self._converter = converter

    async def execute(self, command: ConvertCurrencyCommand) -> ConvertCurrencyResult:
        """Run the conversion use case.

        Args:
            command: The conversion request from the interface layer.

        Returns:
            The converted amount in the target currency.
        """
        request = ConversionRequest(
            source_amount=Amount(
                quantity=command.source_value,
                currency=Currency(command.source_currency),
            ),
            target_currency=Currency(command.target_currency),
        )

        logger.info(
            "Converting %s %s to %s",
            request.source_amount.quantity_text,
            request.source_amount.currency,
            request.target_currency,
        )

        converted = await self._converter.convert(
            request.source_amount, request.target_currency
        )

        return ConvertCurrencyResult(
            currency=converted.currency,
            value=converted.quantity,
        )
