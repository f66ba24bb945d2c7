"""
Tests for header content negotiation.

Pure functions, no application needed.
"""

import pytest

from currency_gateway.interfaces.conversion.negotiation import (
    header_allows,
    split_media_ranges,
)

JSON = "application/json"


class TestSplitMediaRanges:
    """Tests for splitting a raw header value."""

    def test_strips_weights_and_spaces(self) -> None:
        assert split_media_ranges("text/html, application/*;q=0.9") == [
            "text/html",
            "application/*",
        ]

    def test_single_value(self) -> None:
        assert split_media_ranges("application/json") == ["application/json"]


class TestHeaderAllows:
    """Tests for matching header values against application/json."""

    @pytest.mark.parametrize(
        "value",
        [
            "application/json",
            "application/*",
            "*/*",
            "application/*;q=0.9",
            "text/html, application/json",
            "application/json; charset=utf-8",
        ],
    )
    def test_matching_values(self, value: str) -> None:
        assert header_allows([value], JSON) is True

    @pytest.mark.parametrize(
        "value",
        ["text/plain", "text/*", "application/xml", "text/html, image/*;q=0.8", ""],
    )
    def test_non_matching_values(self, value: str) -> None:
        assert header_allows([value], JSON) is False

    def test_absent_header_allows_everything(self) -> None:
        assert header_allows([], JSON) is True

    def test_any_occurrence_may_match(self) -> None:
        assert header_allows(["text/plain", "application/json"], JSON) is True

    def test_expected_type_must_have_a_slash(self) -> None:
        with pytest.raises(ValueError, match="invalid MIME type json"):
            header_allows(["application/json"], "json")
