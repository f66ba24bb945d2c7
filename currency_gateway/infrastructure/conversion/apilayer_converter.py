"""
APILayer exchange-rates adapter.

Implements CurrencyConverter against the APILayer
`exchangerates_data/convert` endpoint:

    GET {base}/exchangerates_data/convert?from=EUR&amount=10&to=USD
    apikey: <key>

    200 → {"success": true, "query": {...}, "info": {...}, "result": 9.5}
    400 → {"error": {"code": "invalid_from_currency", "message": "..."}}

Bodies are decoded with every number parsed as `Decimal`, so the
converted quantity is returned exactly as the upstream wrote it.
One HTTP call per conversion, never retried.
"""

import logging
from decimal import Decimal

import httpx

from currency_gateway.domain.conversion.entities import Amount, Currency
from currency_gateway.domain.conversion.errors import (
    ConversionDomainError,
    UpstreamTransportError,
    classify_upstream_error,
)
from currency_gateway.domain.conversion.ports import CurrencyConverter
from currency_gateway.shared.decimal_json import loads_exact

logger = logging.getLogger(__name__)

CONVERT_PATH = "/exchangerates_data/convert"
DEFAULT_TIMEOUT_SECONDS = 10.0


class ApiLayerConverter(CurrencyConverter):
    """Converts amounts through the APILayer exchange-rates API.

    Owns a single long-lived `httpx.AsyncClient`. The client is created
    once and only read afterwards, so one instance serves all requests.
    """

    def __init__(
        self,
        base_uri: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            base_uri: Upstream base URI, e.g. https://api.apilayer.com.
            api_key: APILayer credential, sent in the `apikey` header.
            timeout: Timeout in seconds for each upstream call.
            client: Optional pre-built HTTP client (tests inject one
                backed by `httpx.MockTransport`).
        """
        self._api_key = api_key
        self._client = client or httpx.AsyncClient(
            base_url=base_uri, timeout=timeout
        )

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def convert(self, source_amount: Amount, target_currency: Currency) -> Amount:
        """Convert an amount through the upstream API.

        Raises:
            ConversionError: The upstream answered 400 with an error code.
            UpstreamTransportError: Network failure, undecodable body,
                or any status other than 200 and 400.
        """
        try:
            response = await self._client.get(
                CONVERT_PATH,
                params={
                    "from": source_amount.currency,
                    "amount": source_amount.quantity_text,
                    "to": target_currency,
                },
                headers={
                    "apikey": self._api_key,
                    "Accept": "application/json",
                },
            )
        except httpx.HTTPError as exc:
            logger.error("Upstream conversion call failed: %s", exc)
            raise UpstreamTransportError(
                f"failed to perform conversion: {exc}"
            ) from exc

        if response.status_code == httpx.codes.BAD_REQUEST:
            raise self._classify_bad_request(response, source_amount, target_currency)
        if response.status_code != httpx.codes.OK:
            logger.error("Upstream answered with status %d", response.status_code)
            raise UpstreamTransportError(
                f"unexpected error (upstream status {response.status_code}): "
                f"{response.text}"
            )

        return Amount(
            quantity=self._extract_result(response),
            currency=target_currency,
        )

    @staticmethod
    def _extract_result(response: httpx.Response) -> Decimal:
        """Read the exact `result` quantity out of a 200 body."""
        try:
            data = loads_exact(response.text)
        except ValueError as exc:
            raise UpstreamTransportError(
                f"could not read conversion response: {exc}"
            ) from exc

        if not isinstance(data, dict) or "result" not in data:
            raise UpstreamTransportError(
                "could not read conversion response: missing result field"
            )
        result = data["result"]
        if not isinstance(result, Decimal) or not result.is_finite():
            raise UpstreamTransportError(
                f"could not read conversion response: result is not a number: {result!r}"
            )
        return result

    @staticmethod
    def _classify_bad_request(
        response: httpx.Response,
        source_amount: Amount,
        target_currency: Currency,
    ) -> ConversionDomainError:
        """Map an upstream 400 body to a conversion error."""
        try:
            data = loads_exact(response.text)
        except ValueError as exc:
            return UpstreamTransportError(
                f"failed to parse conversion error response: {exc}"
            )

        error = data.get("error") if isinstance(data, dict) else None
        if not isinstance(error, dict):
            return UpstreamTransportError(
                "failed to parse conversion error response: missing error object"
            )

        code = str(error.get("code") or "")
        detail = str(error.get("message") or "")
        logger.warning("Upstream rejected conversion with code %r", code)
        return classify_upstream_error(code, detail, source_amount, target_currency)
