"""Uniform outcome of one API dispatch."""

from dataclasses import dataclass
from typing import Any

from bittrex_api.api.exceptions import ApiFailureError, ExchangeAPIError


@dataclass(frozen=True)
class ApiResult:
    """
    Either a success payload or an error, never both.

    ``payload`` is the envelope's ``result`` field on success. On failure
    ``error`` holds the typed exception (UnsupportedInVersionError,
    TransportError, MalformedResponseError or ApiFailureError) and
    ``payload`` is None.
    """

    payload: Any = None
    error: ExchangeAPIError | None = None
    message: str = ""

    @classmethod
    def success(cls, payload: Any, message: str = "") -> "ApiResult":
        return cls(payload=payload, message=message)

    @classmethod
    def failure(cls, error: ExchangeAPIError) -> "ApiResult":
        message = error.message if isinstance(error, ApiFailureError) else str(error)
        return cls(error=error, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the payload, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.payload

    def __bool__(self) -> bool:
        return self.ok
