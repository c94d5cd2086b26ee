"""
Wire-level constants of the Bittrex REST API.

Every enum value is the exact string the exchange expects in a query string.
"""

from enum import Enum


class ApiVersion(str, Enum):
    """Bittrex API versions (not request/response compatible)"""

    V1_1 = "v1.1"
    V2_0 = "v2.0"


class CallProtection(str, Enum):
    """Whether an endpoint needs credentials"""

    PUBLIC = "pub"
    PRIVATE = "prv"


class DepthType(str, Enum):
    """Order book side"""

    BUY = "buy"
    SELL = "sell"
    BOTH = "both"


class TickInterval(str, Enum):
    """Candle interval"""

    ONE_MIN = "oneMin"
    FIVE_MIN = "fiveMin"
    THIRTY_MIN = "thirtyMin"
    HOUR = "hour"
    DAY = "Day"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"


class TimeInEffect(str, Enum):
    GOOD_TIL_CANCELLED = "GOOD_TIL_CANCELLED"
    IMMEDIATE_OR_CANCEL = "IMMEDIATE_OR_CANCEL"
    FILL_OR_KILL = "FILL_OR_KILL"


class ConditionType(str, Enum):
    """Condition attached to a v2.0 trade order"""

    NONE = "null"
    GREATER_THAN = "GREATER_THAN"
    LESS_THAN = "LESS_THAN"
    STOP_LOSS_FIXED = "STOP_LOSS_FIXED"
    STOP_LOSS_PERCENTAGE = "STOP_LOSS_PERCENTAGE"


# One template per version, formatted with the endpoint path.
BASE_URLS: dict[ApiVersion, str] = {
    ApiVersion.V1_1: "https://bittrex.com/api/v1.1{path}",
    ApiVersion.V2_0: "https://bittrex.com/api/v2.0{path}",
}

SIGNATURE_HEADER = "apisign"
