"""
Data Transfer Objects for the conversion application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ConvertCurrencyCommand:
    """Input DTO for a currency conversion.

    Attributes:
        source_currency: Currency code the amount is expressed in.
        source_value: Exact quantity to convert.
        target_currency: Currency code to convert into.
    """

    source_currency: str
    source_value: Decimal
    target_currency: str


@dataclass(frozen=True)
class ConvertCurrencyResult:
    """Output DTO for a successful conversion.

    Attributes:
        currency: The target currency code.
        value: The converted quantity, exactly as the upstream reported it.
    """

    currency: str
    value: Decimal
