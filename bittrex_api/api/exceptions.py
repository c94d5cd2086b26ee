"""Custom exceptions for Bittrex API operations"""


class ExchangeAPIError(Exception):
    """Base exception for all Bittrex API errors"""

    pass


class UnsupportedInVersionError(ExchangeAPIError):
    """Raised when an operation has no endpoint under the active API version"""

    def __init__(self, operation: str, version: str) -> None:
        self.operation = operation
        self.version = version
        super().__init__(
            f"{operation} is not available under API version {version}"
        )


class TransportError(ExchangeAPIError):
    """Raised when network communication with the exchange fails"""

    pass


class MalformedResponseError(ExchangeAPIError):
    """Raised when the response body is not a JSON object"""

    pass


class ApiFailureError(ExchangeAPIError):
    """Raised when the exchange answers with success=false"""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or ""
        super().__init__(f"Bittrex API failure: {self.message or 'no message'}")


class InvalidOrderError(ExchangeAPIError):
    """Raised when order or withdrawal arguments are invalid"""

    pass
