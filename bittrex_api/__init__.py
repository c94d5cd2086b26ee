"""Async client for the Bittrex REST API (v1.1 and v2.0)"""

from bittrex_api.api import (
    ApiFailureError,
    ApiResult,
    ApiVersion,
    BittrexClient,
    CallProtection,
    ConditionType,
    DepthType,
    ExchangeAPIError,
    InvalidOrderError,
    MalformedResponseError,
    OrderType,
    TickInterval,
    TimeInEffect,
    TransportError,
    UnsupportedInVersionError,
)
from bittrex_api.config import ClientConfig, ConfigManager

__version__ = "0.1.0"

__all__ = [
    "BittrexClient",
    "ApiResult",
    "ClientConfig",
    "ConfigManager",
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
