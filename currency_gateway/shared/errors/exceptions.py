"""
Errors raised while validating an inbound request.

These are detected before any upstream call is made and are
translated into 4xx responses by the centralized error handlers.
"""

HTTP_400 = 400
HTTP_405 = 405
HTTP_406 = 406
HTTP_415 = 415


class RequestRejectedError(Exception):
    """Base error for requests refused before reaching a use case."""

    status_code: int = HTTP_400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MethodNotAllowedError(RequestRejectedError):
    """Raised when the request method is not POST."""

    status_code = HTTP_405

    def __init__(self) -> None:
        super().__init__("only POST requests are supported")


class UnsupportedMediaTypeError(RequestRejectedError):
    """Raised when the request body is declared as something other than JSON."""

    status_code = HTTP_415

    def __init__(self) -> None:
        super().__init__("only JSON requests are supported")


class NotAcceptableError(RequestRejectedError):
    """Raised when the client does not accept a JSON response."""

    status_code = HTTP_406

    def __init__(self) -> None:
        super().__init__("only JSON responses are supported")


class MalformedPayloadError(RequestRejectedError):
    """Raised when the request body cannot be decoded into a conversion."""

    status_code = HTTP_400
