"""
Bittrex REST API client for API versions v1.1 and v2.0.

Key features:
- One method per exchange operation, routed through a single query path
- Version-aware endpoint resolution without cross-version fallback
- HMAC-SHA512 request signing over the full URI (``apisign`` header)
- Per-instance rate limiting that serializes concurrent calls
- Uniform ApiResult for success, API failure, transport and parse errors
"""

import asyncio
import json
from decimal import Decimal
from types import TracebackType
from typing import Any

import aiohttp
from pydantic import BaseModel, ValidationError
from yarl import URL

from bittrex_api.api import endpoints
from bittrex_api.api.auth import RequestSigner
from bittrex_api.api.constants import (
    ApiVersion,
    ConditionType,
    DepthType,
    OrderType,
    TickInterval,
    TimeInEffect,
)
from bittrex_api.api.endpoints import Endpoint
from bittrex_api.api.exceptions import (
    ApiFailureError,
    ExchangeAPIError,
    InvalidOrderError,
    MalformedResponseError,
    TransportError,
    UnsupportedInVersionError,
)
from bittrex_api.api.models import LimitOrderRequest, TradeOrderRequest, WithdrawalRequest
from bittrex_api.api.rate_limiter import RateLimiter
from bittrex_api.api.result import ApiResult
from bittrex_api.api.uri import ParamValue, build_uri
from bittrex_api.config.schemas import ClientConfig
from bittrex_api.utils.logger import get_logger, log_context

logger = get_logger(__name__)

Number = float | Decimal


class BittrexClient:
    """
    Async Bittrex API client.

    Usage:
        async with BittrexClient(key, secret, api_version=ApiVersion.V2_0) as client:
            result = await client.get_balances()
            if result.ok:
                print(result.payload)
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        calls_per_second: float = 1,
        api_version: ApiVersion | str = ApiVersion.V1_1,
        request_timeout: float = 10.0,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """
        Initialize Bittrex client.

        Args:
            api_key: Bittrex API key
            api_secret: Bittrex API secret
            calls_per_second: Maximum request rate for this instance
            api_version: Active API version ('v1.1' or 'v2.0')
            request_timeout: Total HTTP timeout in seconds
            session: Optional aiohttp session owned by the caller

        Raises:
            pydantic.ValidationError: If the configuration is malformed
        """
        config = ClientConfig(
            api_key=api_key,
            api_secret=api_secret,
            calls_per_second=calls_per_second,
            api_version=api_version,
            request_timeout=request_timeout,
        )
        self._config = config
        self._signer = RequestSigner(config.api_key, config.api_secret)
        self._rate_limiter = RateLimiter(config.calls_per_second)

        # Session for connection pooling; an injected one is never closed here
        self._session = session
        self._owns_session = session is None

        # Statistics
        self._request_count = 0
        self._error_count = 0

        logger.info(
            "Initializing Bittrex client",
            api_version=config.api_version.value,
            calls_per_second=config.calls_per_second,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        session: aiohttp.ClientSession | None = None,
    ) -> "BittrexClient":
        """Build a client from a validated ClientConfig (e.g. from ConfigManager)."""
        return cls(
            api_key=config.api_key.get_secret_value(),
            api_secret=config.api_secret.get_secret_value(),
            calls_per_second=config.calls_per_second,
            api_version=config.api_version,
            request_timeout=config.request_timeout,
            session=session,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_version(self) -> ApiVersion:
        return self._config.api_version

    @property
    def is_initialized(self) -> bool:
        return self._session is not None and not self._session.closed

    async def initialize(self) -> None:
        """Open the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._config.request_timeout)
            )
            self._owns_session = True
            logger.info("Bittrex client initialized")

    async def close(self) -> None:
        """Close HTTP session"""
        if self._session and self._owns_session:
            await self._session.close()
            logger.info(
                "Bittrex client closed",
                total_requests=self._request_count,
                total_errors=self._error_count,
            )
        self._session = None

    async def __aenter__(self) -> "BittrexClient":
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    # =========================================================================
    # Dispatch core
    # =========================================================================

    async def _api_query(
        self,
        endpoint: Endpoint,
        params: dict[str, ParamValue] | None = None,
    ) -> ApiResult:
        """
        Resolve, authenticate, sign, throttle and send one request.

        Args:
            endpoint: Catalog entry of the operation
            params: Query params in declaration order, None values are dropped

        Returns:
            ApiResult with the envelope's result, or the typed failure

        Raises:
            ExchangeAPIError: If the client has no open session
        """
        version = self._config.api_version

        with log_context(operation=endpoint.name, api_version=version.value):
            try:
                path = endpoint.path_for(version)
            except UnsupportedInVersionError as e:
                logger.warning("Method call not available under API version")
                return ApiResult.failure(e)

            if self._session is None:
                raise ExchangeAPIError("Client not initialized")

            if endpoint.is_private:
                params = self._signer.authenticate(params)
            uri = build_uri(version, path, params)
            headers = self._signer.build_headers(uri)

            async with self._rate_limiter:
                self._request_count += 1
                logger.debug(
                    "bittrex_api_request",
                    path=path,
                    protection=endpoint.protection.value,
                )
                try:
                    body = await self._send(uri, headers)
                except TransportError as e:
                    self._error_count += 1
                    logger.error("Network error", error=str(e))
                    return ApiResult.failure(e)

            result = self._classify(body)
            if not result.ok:
                self._error_count += 1
                logger.warning(
                    "Bittrex API error",
                    error_type=type(result.error).__name__,
                    message=result.message,
                )
            return result

    async def _send(self, uri: str, headers: dict[str, str]) -> bytes:
        """GET the URI exactly as signed and return the raw body."""
        try:
            async with self._session.get(URL(uri, encoded=True), headers=headers) as response:
                return await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Network error: {e}") from e

    @staticmethod
    def _classify(body: bytes) -> ApiResult:
        """Turn a response body into a success payload or a typed failure."""
        try:
            data = json.loads(body.decode("utf-8"))
        except ValueError as e:
            return ApiResult.failure(MalformedResponseError(f"Invalid JSON response: {e}"))

        if not isinstance(data, dict):
            return ApiResult.failure(
                MalformedResponseError(f"Expected JSON object, got {type(data).__name__}")
            )

        message = data.get("message") or ""
        if not data.get("success"):
            return ApiResult.failure(ApiFailureError(message))

        return ApiResult.success(data.get("result"), message)

    @staticmethod
    def _validate(model: type[BaseModel], **kwargs: Any) -> Any:
        try:
            return model(**kwargs)
        except ValidationError as e:
            raise InvalidOrderError(f"Invalid {model.__name__}: {e}") from e

    def get_statistics(self) -> dict[str, Any]:
        """Get client statistics"""
        return {
            "exchange": "bittrex",
            "api_version": self._config.api_version.value,
            "initialized": self.is_initialized,
            "total_requests": self._request_count,
            "total_errors": self._error_count,
            "error_rate": (
                self._error_count / self._request_count if self._request_count > 0 else 0
            ),
            "rate_limit_wait": round(self._rate_limiter.total_wait, 3),
        }

    # =========================================================================
    # Public market data
    # =========================================================================

    async def get_markets(self) -> ApiResult:
        """
        Get the open and available trading markets along with other metadata.

        Endpoint:
            1.1 /public/getmarkets
            2.0 NO equivalent

        Example payload::

            [{'MarketCurrency': 'LTC', 'BaseCurrency': 'BTC',
              'MarketName': 'BTC-LTC', 'MinTradeSize': 1e-08,
              'IsActive': True, ...}, ...]
        """
        return await self._api_query(endpoints.GET_MARKETS)

    async def get_currencies(self) -> ApiResult:
        """
        Get all supported currencies along with other metadata.

        Endpoint:
            1.1 /public/getcurrencies
            2.0 /pub/Currencies/GetCurrencies
        """
        return await self._api_query(endpoints.GET_CURRENCIES)

    async def get_ticker(self, market: str) -> ApiResult:
        """
        Get the current tick values for a market.

        Endpoint:
            1.1 /public/getticker
            2.0 NO equivalent

        Args:
            market: Market name (e.g. 'BTC-LTC')
        """
        return await self._api_query(endpoints.GET_TICKER, {"market": market})

    async def get_market_summaries(self) -> ApiResult:
        """Get the last 24 hour summary of all active markets."""
        return await self._api_query(endpoints.GET_MARKET_SUMMARIES)

    async def get_market_summary(self, market: str) -> ApiResult:
        """Get the last 24 hour summary of one market."""
        return await self._api_query(
            endpoints.GET_MARKET_SUMMARY,
            {"market": market, "marketName": market},
        )

    async def get_orderbook(
        self,
        market: str,
        depth_type: DepthType | str = DepthType.BOTH,
    ) -> ApiResult:
        """
        Get the order book for a market.

        The v2.0 endpoint always returns both sides, so depth_type is sent
        as 'both' under v2.0 whatever was requested.

        Endpoint:
            1.1 /public/getorderbook
            2.0 /pub/Market/GetMarketOrderBook

        Args:
            market: Market name (e.g. 'BTC-LTC')
            depth_type: buy, sell or both
        """
        depth_type = DepthType(depth_type)
        if self.api_version is ApiVersion.V2_0 and depth_type is not DepthType.BOTH:
            logger.debug(
                "Order book depth type overridden",
                requested=depth_type.value,
                sent=DepthType.BOTH.value,
            )
            depth_type = DepthType.BOTH

        return await self._api_query(
            endpoints.GET_ORDERBOOK,
            {"market": market, "marketname": market, "type": depth_type},
        )

    async def get_market_history(self, market: str) -> ApiResult:
        """
        Get the latest trades that have occurred for a market.

        Endpoint:
            1.1 /public/getmarkethistory
            2.0 NO equivalent
        """
        return await self._api_query(
            endpoints.GET_MARKET_HISTORY,
            {"market": market, "marketname": market},
        )

    async def list_markets_by_currency(self, currency: str) -> ApiResult:
        """
        List the markets a currency trades in.

        Built on get_markets, so only available under v1.1.

        Example::

            >>> (await client.list_markets_by_currency('LTC')).payload
            ['BTC-LTC', 'ETH-LTC', 'USDT-LTC']
        """
        result = await self.get_markets()
        if not result.ok:
            return result

        suffix = currency.lower()
        names = []
        for market in result.payload or []:
            if not isinstance(market, dict):
                continue
            name = market.get("MarketName") or ""
            if name.lower().endswith(suffix):
                names.append(name)
        return ApiResult.success(names, result.message)

    async def get_wallet_health(self) -> ApiResult:
        """v2.0 only: /pub/Currencies/GetWalletHealth"""
        return await self._api_query(endpoints.GET_WALLET_HEALTH)

    async def get_balance_distribution(self) -> ApiResult:
        """v2.0 only: /pub/Currency/GetBalanceDistribution"""
        return await self._api_query(endpoints.GET_BALANCE_DISTRIBUTION)

    async def get_candles(self, market: str, tick_interval: TickInterval | str) -> ApiResult:
        """
        Get all tick candles for a market.

        Endpoint:
            1.1 NO equivalent
            2.0 /pub/market/GetTicks

        Example payload::

            [{'O': 421.20630125, 'H': 424.03951276, 'L': 421.20630125,
              'C': 421.20630125, 'V': 0.05187504,
              'T': '2016-04-08T00:00:00', 'BV': 21.87921187}, ...]
        """
        return await self._api_query(
            endpoints.GET_CANDLES,
            {"marketName": market, "tickInterval": TickInterval(tick_interval)},
        )

    async def get_latest_candle(
        self, market: str, tick_interval: TickInterval | str
    ) -> ApiResult:
        """Get the latest candle for a market (v2.0 only)."""
        return await self._api_query(
            endpoints.GET_LATEST_CANDLE,
            {"marketName": market, "tickInterval": TickInterval(tick_interval)},
        )

    # =========================================================================
    # Trading
    # =========================================================================

    async def buy_limit(self, market: str, quantity: Number, rate: Number) -> ApiResult:
        """
        Place a limit buy order.

        Endpoint:
            1.1 /market/buylimit
            2.0 NO direct equivalent, use trade_buy

        Args:
            market: Market name (e.g. 'BTC-LTC')
            quantity: Amount to purchase
            rate: Limit price

        Raises:
            InvalidOrderError: If the arguments are invalid
        """
        order = self._validate(LimitOrderRequest, market=market, quantity=quantity, rate=rate)
        return await self._api_query(endpoints.BUY_LIMIT, order.to_params())

    async def sell_limit(self, market: str, quantity: Number, rate: Number) -> ApiResult:
        """
        Place a limit sell order.

        Endpoint:
            1.1 /market/selllimit
            2.0 NO direct equivalent, use trade_sell
        """
        order = self._validate(LimitOrderRequest, market=market, quantity=quantity, rate=rate)
        return await self._api_query(endpoints.SELL_LIMIT, order.to_params())

    async def trade_buy(
        self,
        market: str,
        order_type: OrderType | str,
        quantity: Number,
        rate: Number | None = None,
        time_in_effect: TimeInEffect | str | None = None,
        condition_type: ConditionType | str = ConditionType.NONE,
        target: Number = 0,
    ) -> ApiResult:
        """
        Enter a buy order into the book.

        Endpoint:
            1.1 NO equivalent, see buy_limit
            2.0 /key/market/tradebuy

        Args:
            market: Market name (e.g. 'BTC-LTC')
            order_type: LIMIT or MARKET
            quantity: Amount to purchase
            rate: Limit price, not needed for market orders
            time_in_effect: GOOD_TIL_CANCELLED, IMMEDIATE_OR_CANCEL or FILL_OR_KILL
            condition_type: Order condition, 'null' for none
            target: Trigger value used together with condition_type

        Raises:
            InvalidOrderError: If the arguments are invalid
        """
        return await self._trade(
            endpoints.TRADE_BUY,
            market, order_type, quantity, rate, time_in_effect, condition_type, target,
        )

    async def trade_sell(
        self,
        market: str,
        order_type: OrderType | str,
        quantity: Number,
        rate: Number | None = None,
        time_in_effect: TimeInEffect | str | None = None,
        condition_type: ConditionType | str = ConditionType.NONE,
        target: Number = 0,
    ) -> ApiResult:
        """Enter a sell order into the book (v2.0 only). Same arguments as trade_buy."""
        return await self._trade(
            endpoints.TRADE_SELL,
            market, order_type, quantity, rate, time_in_effect, condition_type, target,
        )

    async def _trade(
        self,
        endpoint: Endpoint,
        market: str,
        order_type: OrderType | str,
        quantity: Number,
        rate: Number | None,
        time_in_effect: TimeInEffect | str | None,
        condition_type: ConditionType | str,
        target: Number,
    ) -> ApiResult:
        order = self._validate(
            TradeOrderRequest,
            market=market,
            order_type=order_type,
            quantity=quantity,
            rate=rate,
            time_in_effect=time_in_effect,
            condition_type=condition_type,
            target=target,
        )
        return await self._api_query(endpoint, order.to_params())

    async def cancel(self, uuid: str) -> ApiResult:
        """
        Cancel a buy or sell order.

        Endpoint:
            1.1 /market/cancel
            2.0 /key/market/tradecancel
        """
        return await self._api_query(endpoints.CANCEL, {"uuid": uuid, "orderid": uuid})

    async def get_open_orders(self, market: str | None = None) -> ApiResult:
        """Get open orders, for one market or for all when market is None."""
        return await self._api_query(
            endpoints.GET_OPEN_ORDERS,
            {"market": market, "marketname": market},
        )

    async def get_order(self, uuid: str) -> ApiResult:
        """
        Get the details of one order.

        Endpoint:
            1.1 /account/getorder
            2.0 /key/orders/getorder

        Args:
            uuid: Order UUID returned when the order was placed
        """
        return await self._api_query(endpoints.GET_ORDER, {"uuid": uuid, "orderid": uuid})

    async def get_order_history(self, market: str | None = None) -> ApiResult:
        """
        Get the order trade history of the account.

        Endpoint:
            1.1 /account/getorderhistory
            2.0 /key/market/GetOrderHistory with a market,
                /key/orders/getorderhistory without one
        """
        if market:
            return await self._api_query(
                endpoints.GET_MARKET_ORDER_HISTORY,
                {"market": market, "marketname": market},
            )
        return await self._api_query(endpoints.GET_ORDER_HISTORY)

    # =========================================================================
    # Account / balances
    # =========================================================================

    async def get_balances(self) -> ApiResult:
        """
        Get all balances from the account.

        Endpoint:
            1.1 /account/getbalances
            2.0 /key/balance/getbalances

        Example payload::

            [{'Currency': '1ST', 'Balance': 10.0, 'Available': 10.0,
              'Pending': 0.0, 'CryptoAddress': None}, ...]
        """
        return await self._api_query(endpoints.GET_BALANCES)

    async def get_balance(self, currency: str) -> ApiResult:
        """
        Get the balance of one currency.

        Args:
            currency: Currency code (e.g. 'BTC')
        """
        return await self._api_query(
            endpoints.GET_BALANCE,
            {"currency": currency, "currencyname": currency},
        )

    async def get_deposit_address(self, currency: str) -> ApiResult:
        """
        Get the deposit address of a currency.

        Endpoint:
            1.1 /account/getdepositaddress
            2.0 /key/balance/getdepositaddress
        """
        return await self._api_query(
            endpoints.GET_DEPOSIT_ADDRESS,
            {"currency": currency, "currencyname": currency},
        )

    async def generate_deposit_address(self, currency: str) -> ApiResult:
        """Request a new deposit address for a currency (v2.0 only)."""
        return await self._api_query(
            endpoints.GENERATE_DEPOSIT_ADDRESS,
            {"currencyname": currency},
        )

    async def withdraw(self, currency: str, quantity: Number, address: str) -> ApiResult:
        """
        Withdraw funds from the account.

        Endpoint:
            1.1 /account/withdraw
            2.0 /key/balance/withdrawcurrency

        Args:
            currency: Currency code (e.g. 'BTC')
            quantity: Amount to withdraw
            address: Destination address

        Raises:
            InvalidOrderError: If the arguments are invalid
        """
        request = self._validate(
            WithdrawalRequest, currency=currency, quantity=quantity, address=address
        )
        return await self._api_query(endpoints.WITHDRAW, request.to_params())

    async def get_withdrawal_history(self, currency: str | None = None) -> ApiResult:
        """Get withdrawal history, for one currency or for all when None."""
        return await self._api_query(
            endpoints.GET_WITHDRAWAL_HISTORY,
            {"currency": currency, "currencyname": currency},
        )

    async def get_deposit_history(self, currency: str | None = None) -> ApiResult:
        """Get deposit history, for one currency or for all when None."""
        return await self._api_query(
            endpoints.GET_DEPOSIT_HISTORY,
            {"currency": currency, "currencyname": currency},
        )

    async def get_pending_withdrawals(self, currency: str | None = None) -> ApiResult:
        """
        Get withdrawals not yet processed, for one currency or for all when None.

        Endpoint:
            1.1 NO equivalent
            2.0 /key/balance/getpendingwithdrawals
        """
        return await self._api_query(
            endpoints.GET_PENDING_WITHDRAWALS,
            {"currencyname": currency},
        )

    async def get_pending_deposits(self, currency: str | None = None) -> ApiResult:
        """
        Get deposits not yet credited, for one currency or for all when None.

        Endpoint:
            1.1 NO equivalent
            2.0 /key/balance/getpendingdeposits
        """
        return await self._api_query(
            endpoints.GET_PENDING_DEPOSITS,
            {"currencyname": currency},
        )
