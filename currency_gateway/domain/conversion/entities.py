"""
Domain entities for the conversion bounded context.

Quantities are always `Decimal`: they travel from the inbound payload
to the upstream query and back without ever becoming a float.
A quantity read from JSON also keeps the exact text it was written as,
so `0.0000001` is never rewritten as `1E-7` on its way through.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import NewType

Currency = NewType("Currency", str)
"""Opaque currency code. Only the upstream decides whether it is valid."""


class Quantity(Decimal):
    """A Decimal that remembers the text it was parsed from.

    Arithmetic and comparisons behave like any other Decimal; only
    `str()` differs, returning the original lexeme unchanged.
    """

    def __new__(cls, text: str) -> "Quantity":
        quantity = super().__new__(cls, text)
        quantity._text = text
        return quantity

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Quantity({self._text!r})"


def quantity_text(quantity: Decimal) -> str:
    """Exact textual form of a quantity.

    A `Quantity` gives back its original text. Any other Decimal is
    written in positional notation, never in scientific notation.
    """
    if isinstance(quantity, Quantity):
        return str(quantity)
    return format(quantity, "f")


@dataclass(frozen=True)
class Amount:
    """A quantity expressed in a currency."""

    quantity: Decimal
    currency: Currency

    @property
    def quantity_text(self) -> str:
        """Exact textual form of the quantity, as sent upstream."""
        return quantity_text(self.quantity)


@dataclass(frozen=True)
class ConversionRequest:
    """A validated request to convert an amount into another currency."""

    source_amount: Amount
    target_currency: Currency
