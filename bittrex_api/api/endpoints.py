"""
Endpoint catalog for the Bittrex REST API.

Each entry maps the API versions that support an operation to that version's
path. A version missing from ``paths`` means the operation does not exist
there; nothing falls back to the other version.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from bittrex_api.api.constants import ApiVersion, CallProtection
from bittrex_api.api.exceptions import UnsupportedInVersionError

V1_1 = ApiVersion.V1_1
V2_0 = ApiVersion.V2_0
PUBLIC = CallProtection.PUBLIC
PRIVATE = CallProtection.PRIVATE


@dataclass(frozen=True, eq=False)
class Endpoint:
    """One exchange operation and its path under each supported version."""

    name: str
    paths: Mapping[ApiVersion, str]
    protection: CallProtection = PUBLIC

    def __post_init__(self) -> None:
        object.__setattr__(self, "paths", MappingProxyType(dict(self.paths)))

    @property
    def is_private(self) -> bool:
        return self.protection is PRIVATE

    def supports(self, version: ApiVersion) -> bool:
        return version in self.paths

    def path_for(self, version: ApiVersion) -> str:
        """
        Resolve the path for an API version.

        Raises:
            UnsupportedInVersionError: If the operation has no path for version
        """
        try:
            return self.paths[version]
        except KeyError:
            raise UnsupportedInVersionError(self.name, version.value) from None


# =========================================================================
# Public market data
# =========================================================================

GET_MARKETS = Endpoint(
    "get_markets",
    {V1_1: "/public/getmarkets"},
)
GET_CURRENCIES = Endpoint(
    "get_currencies",
    {V1_1: "/public/getcurrencies", V2_0: "/pub/Currencies/GetCurrencies"},
)
GET_TICKER = Endpoint(
    "get_ticker",
    {V1_1: "/public/getticker"},
)
GET_MARKET_SUMMARIES = Endpoint(
    "get_market_summaries",
    {V1_1: "/public/getmarketsummaries", V2_0: "/pub/Markets/GetMarketSummaries"},
)
GET_MARKET_SUMMARY = Endpoint(
    "get_market_summary",
    {V1_1: "/public/getmarketsummary", V2_0: "/pub/Market/GetMarketSummary"},
)
GET_ORDERBOOK = Endpoint(
    "get_orderbook",
    {V1_1: "/public/getorderbook", V2_0: "/pub/Market/GetMarketOrderBook"},
)
GET_MARKET_HISTORY = Endpoint(
    "get_market_history",
    {V1_1: "/public/getmarkethistory"},
)
GET_WALLET_HEALTH = Endpoint(
    "get_wallet_health",
    {V2_0: "/pub/Currencies/GetWalletHealth"},
)
GET_BALANCE_DISTRIBUTION = Endpoint(
    "get_balance_distribution",
    {V2_0: "/pub/Currency/GetBalanceDistribution"},
)
GET_CANDLES = Endpoint(
    "get_candles",
    {V2_0: "/pub/market/GetTicks"},
)
GET_LATEST_CANDLE = Endpoint(
    "get_latest_candle",
    {V2_0: "/pub/market/GetLatestTick"},
)

# =========================================================================
# Trading
# =========================================================================

BUY_LIMIT = Endpoint(
    "buy_limit",
    {V1_1: "/market/buylimit"},
    PRIVATE,
)
SELL_LIMIT = Endpoint(
    "sell_limit",
    {V1_1: "/market/selllimit"},
    PRIVATE,
)
TRADE_BUY = Endpoint(
    "trade_buy",
    {V2_0: "/key/market/tradebuy"},
    PRIVATE,
)
TRADE_SELL = Endpoint(
    "trade_sell",
    {V2_0: "/key/market/tradesell"},
    PRIVATE,
)
CANCEL = Endpoint(
    "cancel",
    {V1_1: "/market/cancel", V2_0: "/key/market/tradecancel"},
    PRIVATE,
)
GET_OPEN_ORDERS = Endpoint(
    "get_open_orders",
    {V1_1: "/market/getopenorders", V2_0: "/key/market/getopenorders"},
    PRIVATE,
)
GET_ORDER = Endpoint(
    "get_order",
    {V1_1: "/account/getorder", V2_0: "/key/orders/getorder"},
    PRIVATE,
)
GET_MARKET_ORDER_HISTORY = Endpoint(
    "get_order_history",
    {V1_1: "/account/getorderhistory", V2_0: "/key/market/GetOrderHistory"},
    PRIVATE,
)
GET_ORDER_HISTORY = Endpoint(
    "get_order_history",
    {V1_1: "/account/getorderhistory", V2_0: "/key/orders/getorderhistory"},
    PRIVATE,
)

# =========================================================================
# Account / balances
# =========================================================================

GET_BALANCES = Endpoint(
    "get_balances",
    {V1_1: "/account/getbalances", V2_0: "/key/balance/getbalances"},
    PRIVATE,
)
GET_BALANCE = Endpoint(
    "get_balance",
    {V1_1: "/account/getbalance", V2_0: "/key/balance/getbalance"},
    PRIVATE,
)
GET_DEPOSIT_ADDRESS = Endpoint(
    "get_deposit_address",
    {V1_1: "/account/getdepositaddress", V2_0: "/key/balance/getdepositaddress"},
    PRIVATE,
)
GENERATE_DEPOSIT_ADDRESS = Endpoint(
    "generate_deposit_address",
    {V2_0: "/key/balance/generatedepositaddress"},
    PRIVATE,
)
WITHDRAW = Endpoint(
    "withdraw",
    {V1_1: "/account/withdraw", V2_0: "/key/balance/withdrawcurrency"},
    PRIVATE,
)
GET_WITHDRAWAL_HISTORY = Endpoint(
    "get_withdrawal_history",
    {V1_1: "/account/getwithdrawalhistory", V2_0: "/key/balance/getwithdrawalhistory"},
    PRIVATE,
)
GET_DEPOSIT_HISTORY = Endpoint(
    "get_deposit_history",
    {V1_1: "/account/getdeposithistory", V2_0: "/key/balance/getdeposithistory"},
    PRIVATE,
)
GET_PENDING_WITHDRAWALS = Endpoint(
    "get_pending_withdrawals",
    {V2_0: "/key/balance/getpendingwithdrawals"},
    PRIVATE,
)
GET_PENDING_DEPOSITS = Endpoint(
    "get_pending_deposits",
    {V2_0: "/key/balance/getpendingdeposits"},
    PRIVATE,
)

CATALOG: tuple[Endpoint, ...] = (
    GET_MARKETS,
    GET_CURRENCIES,
    GET_TICKER,
    GET_MARKET_SUMMARIES,
    GET_MARKET_SUMMARY,
    GET_ORDERBOOK,
    GET_MARKET_HISTORY,
    GET_WALLET_HEALTH,
    GET_BALANCE_DISTRIBUTION,
    GET_CANDLES,
    GET_LATEST_CANDLE,
    BUY_LIMIT,
    SELL_LIMIT,
    TRADE_BUY,
    TRADE_SELL,
    CANCEL,
    GET_OPEN_ORDERS,
    GET_ORDER,
    GET_MARKET_ORDER_HISTORY,
    GET_ORDER_HISTORY,
    GET_BALANCES,
    GET_BALANCE,
    GET_DEPOSIT_ADDRESS,
    GENERATE_DEPOSIT_ADDRESS,
    WITHDRAW,
    GET_WITHDRAWAL_HISTORY,
    GET_DEPOSIT_HISTORY,
    GET_PENDING_WITHDRAWALS,
    GET_PENDING_DEPOSITS,
)
