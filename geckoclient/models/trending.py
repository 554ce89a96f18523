from pydantic import Field

from geckoclient.models.common import GeckoModel


class TrendingCoinItem(GeckoModel):
    id: str
    coin_id: int | None = None
    name: str | None = None
    symbol: str | None = None
    market_cap_rank: int | None = None
    thumb: str | None = None
    small: str | None = None
    large: str | None = None
    slug: str | None = None
    price_btc: float | None = None
    score: int | None = None


class TrendingCoin(GeckoModel):
    item: TrendingCoinItem


class TrendingNft(GeckoModel):
    id: str | None = None
    name: str | None = None
    symbol: str | None = None
    thumb: str | None = None
    nft_contract_id: int | None = None
    floor_price_in_native_currency: float | None = None
    floor_price_24h_percentage_change: float | None = None


class Trending(GeckoModel):
    coins: list[TrendingCoin] = Field(default_factory=list)
    nfts: list[TrendingNft] = Field(default_factory=list)
