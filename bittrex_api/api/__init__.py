"""Bittrex API client modules"""

from bittrex_api.api.client import BittrexClient
from bittrex_api.api.constants import (
    ApiVersion,
    CallProtection,
    ConditionType,
    DepthType,
    OrderType,
    TickInterval,
    TimeInEffect,
)
from bittrex_api.api.exceptions import (
    ApiFailureError,
    ExchangeAPIError,
    InvalidOrderError,
    MalformedResponseError,
    TransportError,
    UnsupportedInVersionError,
)
from bittrex_api.api.result import ApiResult

__all__ = [
    "BittrexClient",
    "ApiResult",
    "ApiVersion",
    "CallProtection",
    "DepthType",
    "TickInterval",
    "OrderType",
    "TimeInEffect",
    "ConditionType",
    "ExchangeAPIError",
    "UnsupportedInVersionError",
    "TransportError",
    "MalformedResponseError",
    "ApiFailureError",
    "InvalidOrderError",
]
