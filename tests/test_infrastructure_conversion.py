"""
Tests for the APILayer conversion adapter.

The upstream is simulated with httpx.MockTransport; no network calls.
"""

from decimal import Decimal

import httpx
import pytest

from currency_gateway.domain.conversion.entities import Amount, Currency, Quantity
from currency_gateway.domain.conversion.errors import (
    InvalidConversionAmountError,
    InvalidSourceCurrencyError,
    InvalidTargetCurrencyError,
    UnclassifiedConversionError,
    UpstreamTransportError,
)
from currency_gateway.infrastructure.conversion.apilayer_converter import (
    ApiLayerConverter,
)

BASE_URI = "https://upstream.test"
API_KEY = "alan-key"

SUCCESS_BODY = """{
    "success": true,
    "query": {"from": "EUR", "to": "USD", "amount": 10},
    "info": {"timestamp": 1661180044, "rate": 0.95},
    "date": "2022-08-22",
    "result": 9.5}"""


def _converter(handler) -> ApiLayerConverter:
    """Build an adapter whose HTTP client answers through `handler`."""
    client = httpx.AsyncClient(
        base_url=BASE_URI, transport=httpx.MockTransport(handler)
    )
    return ApiLayerConverter(base_uri=BASE_URI, api_key=API_KEY, client=client)


def _json_handler(body: str, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    return handler


def _bad_request(code: str):
    return _json_handler(
        f'{{"error": {{"code": "{code}", "message": "oopsie"}}}}', status_code=400
    )


def _amount(quantity: str = "10", currency: str = "EUR") -> Amount:
    return Amount(quantity=Decimal(quantity), currency=Currency(currency))


class TestSuccessfulConversion:
    """Tests for upstream 200 answers."""

    @pytest.mark.asyncio
    async def test_converts_currency(self):
        converter = _converter(_json_handler(SUCCESS_BODY))

        result = await converter.convert(_amount(), Currency("USD"))

        assert result == Amount(quantity=Decimal("9.5"), currency=Currency("USD"))
        assert result.quantity_text == "9.5"

    @pytest.mark.asyncio
    async def test_result_keeps_full_precision(self):
        body = '{"result": 1234567.890123456789012345678}'
        converter = _converter(_json_handler(body))

        result = await converter.convert(_amount(), Currency("USD"))

        assert result.quantity_text == "1234567.890123456789012345678"

    @pytest.mark.asyncio
    async def test_integer_result_is_decimal(self):
        converter = _converter(_json_handler('{"result": 12}'))

        result = await converter.convert(_amount(), Currency("USD"))

        assert isinstance(result.quantity, Decimal)
        assert result.quantity_text == "12"

    @pytest.mark.asyncio
    async def test_sends_query_and_headers(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=SUCCESS_BODY.encode("utf-8"))

        converter = _converter(handler)
        await converter.convert(_amount("10.50", "EUR"), Currency("USD"))

        assert len(seen) == 1
        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/exchangerates_data/convert"
        assert request.url.params["from"] == "EUR"
        assert request.url.params["amount"] == "10.50"
        assert request.url.params["to"] == "USD"
        assert request.headers["apikey"] == API_KEY
        assert request.headers["accept"] == "application/json"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["0.0000001", "1e2", "1E+2"])
    async def test_amount_sent_as_written(self, text):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=SUCCESS_BODY.encode("utf-8"))

        converter = _converter(handler)
        source = Amount(quantity=Quantity(text), currency=Currency("EUR"))
        await converter.convert(source, Currency("BTC"))

        assert seen[0].url.params["amount"] == text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["0.00000095", "9.5E-7", "12.50"])
    async def test_result_text_is_kept(self, text):
        converter = _converter(_json_handler(f'{{"result": {text}}}'))

        result = await converter.convert(_amount(), Currency("BTC"))

        assert result.quantity_text == text


class TestBadRequestClassification:
    """Tests for upstream 400 answers."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("code", "error_type", "message"),
        [
            ("invalid_from_currency", InvalidSourceCurrencyError, "invalid source currency EUR"),
            ("invalid_to_currency", InvalidTargetCurrencyError, "invalid target currency USD"),
            ("invalid_conversion_amount", InvalidConversionAmountError, "invalid conversion amount 10"),
            ("something_else", UnclassifiedConversionError, 'error "something_else": oopsie'),
        ],
    )
    async def test_error_code_mapping(self, code, error_type, message):
        converter = _converter(_bad_request(code))

        with pytest.raises(error_type) as exc_info:
            await converter.convert(_amount(), Currency("USD"))

        assert exc_info.value.message == message

    @pytest.mark.asyncio
    async def test_malformed_error_body_is_transport_error(self):
        converter = _converter(_json_handler("not json", status_code=400))

        with pytest.raises(UpstreamTransportError) as exc_info:
            await converter.convert(_amount(), Currency("USD"))

        assert exc_info.value.message.startswith(
            "failed to parse conversion error response: "
        )

    @pytest.mark.asyncio
    async def test_error_body_without_error_object(self):
        converter = _converter(_json_handler('{"oops": 1}', status_code=400))

        with pytest.raises(UpstreamTransportError, match="missing error object"):
            await converter.convert(_amount(), Currency("USD"))


class TestTransportFailures:
    """Tests for failures that are not the request's fault."""

    @pytest.mark.asyncio
    async def test_unexpected_status_passes_body_through(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                500, content=b"nope", headers={"Content-Type": "text/plain"}
            )

        converter = _converter(handler)

        with pytest.raises(UpstreamTransportError) as exc_info:
            await converter.convert(_amount(), Currency("USD"))

        assert exc_info.value.message == "unexpected error (upstream status 500): nope"

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        converter = _converter(handler)

        with pytest.raises(UpstreamTransportError) as exc_info:
            await converter.convert(_amount(), Currency("USD"))

        assert exc_info.value.message == (
            "failed to perform conversion: connection refused"
        )
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        converter = _converter(handler)

        with pytest.raises(UpstreamTransportError, match="failed to perform conversion"):
            await converter.convert(_amount(), Currency("USD"))

    @pytest.mark.asyncio
    async def test_malformed_success_body(self):
        converter = _converter(_json_handler("{"))

        with pytest.raises(UpstreamTransportError) as exc_info:
            await converter.convert(_amount(), Currency("USD"))

        assert exc_info.value.message.startswith("could not read conversion response: ")

    @pytest.mark.asyncio
    async def test_success_body_without_result(self):
        converter = _converter(_json_handler('{"success": true}'))

        with pytest.raises(UpstreamTransportError, match="missing result field"):
            await converter.convert(_amount(), Currency("USD"))

    @pytest.mark.asyncio
    async def test_non_numeric_result(self):
        converter = _converter(_json_handler('{"result": "9.5"}'))

        with pytest.raises(UpstreamTransportError, match="result is not a number"):
            await converter.convert(_amount(), Currency("USD"))


class TestClientLifecycle:
    """Tests for the owned HTTP client."""

    @pytest.mark.asyncio
    async def test_aclose_closes_client(self):
        client = httpx.AsyncClient(
            base_url=BASE_URI, transport=httpx.MockTransport(_json_handler(SUCCESS_BODY))
        )
        converter = ApiLayerConverter(base_uri=BASE_URI, api_key=API_KEY, client=client)

        await converter.aclose()

        assert client.is_closed
