"""JSON response that writes Decimal values as exact JSON numbers."""

from typing import Any

from fastapi.responses import JSONResponse

from currency_gateway.shared.decimal_json import dumps_exact


class DecimalJSONResponse(JSONResponse):
    """JSONResponse rendering `Decimal` verbatim instead of through float."""

    def render(self, content: Any) -> bytes:
        return dumps_exact(content).encode("utf-8")
