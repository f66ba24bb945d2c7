"""
Tests for the exact-precision JSON helpers.

Numbers must come out of a decode and go back into an encode with the
same text, whatever their magnitude.
"""

from decimal import Decimal

import pytest

from currency_gateway.domain.conversion.entities import Quantity
from currency_gateway.shared.decimal_json import dumps_exact, loads_exact


class TestLoadsExact:
    """Tests for decoding."""

    def test_numbers_become_quantities(self) -> None:
        document = loads_exact('{"small": 0.0000001, "big": 1e2, "whole": 12}')

        assert all(isinstance(value, Quantity) for value in document.values())
        assert {key: str(value) for key, value in document.items()} == {
            "small": "0.0000001",
            "big": "1e2",
            "whole": "12",
        }

    def test_accepts_bytes(self) -> None:
        assert loads_exact(b'{"result": 9.5}') == {"result": Decimal("9.5")}

    def test_invalid_json_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            loads_exact("{nope")

    def test_invalid_utf8_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            loads_exact(b'{"a": "\xff"}')


class TestDumpsExact:
    """Tests for encoding."""

    def test_decoded_numbers_written_unchanged(self) -> None:
        text = '{"a":0.00000095,"b":9.5E-7,"c":2.50,"d":-0}'
        assert dumps_exact(loads_exact(text)) == text

    def test_plain_decimal_written_positionally(self) -> None:
        assert dumps_exact({"value": Decimal("1E-7")}) == '{"value":0.0000001}'

    def test_non_ascii_kept(self) -> None:
        assert dumps_exact({"error": "invalid source currency €"}) == (
            '{"error":"invalid source currency €"}'
        )

    def test_non_finite_decimal_rejected(self) -> None:
        with pytest.raises(TypeError):
            dumps_exact({"value": Decimal("NaN")})
