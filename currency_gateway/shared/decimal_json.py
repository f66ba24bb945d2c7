"""
Exact-precision JSON encoding and decoding.

Every JSON number is read as a `Quantity` (a Decimal that keeps its
source text) and every Decimal is written back as a bare JSON number
with that same text. Quantities never pass through a binary float.
"""

from decimal import Decimal
from typing import Any

import simplejson

from currency_gateway.domain.conversion.entities import Quantity, quantity_text


def loads_exact(text: str | bytes) -> Any:
    """Decode a JSON document, parsing every number as a Quantity.

    Raises:
        ValueError: If the text is not valid UTF-8 JSON.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    return simplejson.loads(text, parse_float=Quantity, parse_int=Quantity)


def _encode_decimal(value: Any) -> simplejson.RawJSON:
    if isinstance(value, Decimal) and value.is_finite():
        return simplejson.RawJSON(quantity_text(value))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps_exact(content: Any) -> str:
    """Encode a document, writing Decimal values as their exact text."""
    return simplejson.dumps(
        content,
        use_decimal=False,
        default=_encode_decimal,
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
    )
