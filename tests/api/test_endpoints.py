"""Tests for the endpoint catalog and version resolution."""

import pytest

from bittrex_api.api import endpoints
from bittrex_api.api.constants import ApiVersion, CallProtection
from bittrex_api.api.endpoints import CATALOG, Endpoint
from bittrex_api.api.exceptions import UnsupportedInVersionError


class TestEndpointResolution:
    def test_path_for_supported_version(self):
        assert endpoints.GET_CURRENCIES.path_for(ApiVersion.V1_1) == "/public/getcurrencies"
        assert (
            endpoints.GET_CURRENCIES.path_for(ApiVersion.V2_0)
            == "/pub/Currencies/GetCurrencies"
        )

    def test_missing_version_raises_unsupported(self):
        with pytest.raises(UnsupportedInVersionError) as exc_info:
            endpoints.GET_MARKETS.path_for(ApiVersion.V2_0)
        assert exc_info.value.operation == "get_markets"
        assert exc_info.value.version == "v2.0"

    def test_no_fallback_to_other_version(self):
        """A v2.0-only private call must not degrade to some v1.1 path."""
        assert not endpoints.TRADE_BUY.supports(ApiVersion.V1_1)
        with pytest.raises(UnsupportedInVersionError):
            endpoints.TRADE_BUY.path_for(ApiVersion.V1_1)

    def test_paths_are_read_only(self):
        endpoint = Endpoint("demo", {ApiVersion.V1_1: "/x"})
        with pytest.raises(TypeError):
            endpoint.paths[ApiVersion.V2_0] = "/y"  # type: ignore[index]

    def test_default_protection_is_public(self):
        assert Endpoint("demo", {ApiVersion.V1_1: "/x"}).protection is CallProtection.PUBLIC


class TestCatalogAsymmetry:
    @pytest.mark.parametrize(
        "endpoint",
        [endpoints.GET_MARKETS, endpoints.GET_TICKER, endpoints.GET_MARKET_HISTORY,
         endpoints.BUY_LIMIT, endpoints.SELL_LIMIT],
        ids=lambda e: e.name,
    )
    def test_v1_only(self, endpoint):
        assert endpoint.supports(ApiVersion.V1_1)
        assert not endpoint.supports(ApiVersion.V2_0)

    @pytest.mark.parametrize(
        "endpoint",
        [endpoints.TRADE_BUY, endpoints.TRADE_SELL, endpoints.GET_CANDLES,
         endpoints.GET_LATEST_CANDLE, endpoints.GET_WALLET_HEALTH,
         endpoints.GET_BALANCE_DISTRIBUTION, endpoints.GET_PENDING_WITHDRAWALS,
         endpoints.GET_PENDING_DEPOSITS, endpoints.GENERATE_DEPOSIT_ADDRESS],
        ids=lambda e: e.name,
    )
    def test_v2_only(self, endpoint):
        assert endpoint.supports(ApiVersion.V2_0)
        assert not endpoint.supports(ApiVersion.V1_1)

    def test_every_entry_has_at_least_one_version(self):
        for endpoint in CATALOG:
            assert endpoint.paths, endpoint.name
            for path in endpoint.paths.values():
                assert path.startswith("/")

    def test_account_and_trading_calls_are_private(self):
        private_names = {e.name for e in CATALOG if e.is_private}
        assert {"buy_limit", "cancel", "get_balances", "withdraw", "trade_buy"} <= private_names
        public_names = {e.name for e in CATALOG if not e.is_private}
        assert {"get_markets", "get_orderbook", "get_candles"} <= public_names
