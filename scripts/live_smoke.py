"""
Smoke test against the live CoinGecko API.
Uses COINGECKO_API_KEY / COINGECKO_API_TYPE from the environment or .env.
"""

import asyncio

from geckoclient import CoinGeckoClient, RequestFailure
from geckoclient.logs import configure_logging

configure_logging()

CHECKS = [
    ("get_api_status", {}),
    ("get_nft_by_contract_address", {
        "asset_platform_id": "ethereum",
        "contract_address": "0xbc4ca0eda7647a8ab7c2061c2e118a18a936f13d",
    }),
    ("get_exchange_rates", {}),
    ("search", {"query": "btc"}),
    ("get_trending", {}),
    ("get_global", {}),
    ("get_global_defi", {}),
    ("get_companies_public_treasury", {"coin_id": "bitcoin"}),
    ("get_exchange_tickers", {"id": "binance", "coin_ids": ["bitcoin"]}),
]  # fmt: skip


async def run_checks():
    failures = 0
    async with CoinGeckoClient.from_settings() as cg:
        for operation, params in CHECKS:
            try:
                result = await getattr(cg, operation)(**params)
                print(f"✅ {operation}: {type(result).__name__}")
            except RequestFailure as e:
                failures += 1
                print(f"❌ {operation}: {e.message} (status={e.status_code})")

    print(f"\n{len(CHECKS) - failures}/{len(CHECKS)} checks passed")


if __name__ == "__main__":
    asyncio.run(run_checks())
