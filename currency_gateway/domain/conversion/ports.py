"""
Port interfaces (ABCs) for the conversion bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from currency_gateway.domain.conversion.entities import Amount, Currency


class CurrencyConverter(ABC):
    """Port for converting an amount through an exchange-rate provider."""

    @abstractmethod
    async def convert(self, source_amount: Amount, target_currency: Currency) -> Amount:
        """Convert an amount into the target currency.

        Performs exactly one call to the provider. Never retries.

        Args:
            source_amount: The quantity and currency to convert from.
            target_currency: The currency to convert into.

        Returns:
            The converted amount, expressed in the target currency.

        Raises:
            ConversionError: If the provider rejected the conversion.
            UpstreamTransportError: If the provider could not be used.
        """
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release any resource held by the converter."""
        return None
