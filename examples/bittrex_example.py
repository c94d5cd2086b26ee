"""
Example: query public market data and balances with BittrexClient.

Usage:
    BITTREX_API_KEY=... BITTREX_API_SECRET=... python examples/bittrex_example.py
"""

import asyncio
import os

from bittrex_api import ApiVersion, BittrexClient, UnsupportedInVersionError
from bittrex_api.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


async def main() -> None:
    setup_logging(log_level="INFO", log_to_file=False)

    async with BittrexClient(
        api_key=os.environ.get("BITTREX_API_KEY", ""),
        api_secret=os.environ.get("BITTREX_API_SECRET", ""),
        calls_per_second=1,
        api_version=ApiVersion.V2_0,
    ) as client:
        summaries = await client.get_market_summaries()
        if summaries.ok:
            logger.info("Market summaries", count=len(summaries.payload or []))
        else:
            logger.error("Market summaries failed", message=summaries.message)

        # get_markets only exists under v1.1
        markets = await client.get_markets()
        if isinstance(markets.error, UnsupportedInVersionError):
            logger.info("get_markets skipped", reason=markets.message)

        book = await client.get_orderbook("BTC-LTC", "buy")
        if book.ok:
            logger.info("Order book sides", sides=sorted(book.payload))

        logger.info("Statistics", **client.get_statistics())


if __name__ == "__main__":
    asyncio.run(main())
