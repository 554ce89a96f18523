from pydantic import Field

from geckoclient.models.common import GeckoModel


class SearchCoinItem(GeckoModel):
    id: str
    name: str | None = None
    api_symbol: str | None = None
    symbol: str | None = None
    market_cap_rank: int | None = None
    thumb: str | None = None
    large: str | None = None


class SearchExchangeItem(GeckoModel):
    id: str
    name: str | None = None
    market_type: str | None = None
    thumb: str | None = None
    large: str | None = None


class SearchCategoryItem(GeckoModel):
    id: int | str
    name: str | None = None


class SearchNftItem(GeckoModel):
    id: str | None = None
    name: str | None = None
    symbol: str | None = None
    thumb: str | None = None


class SearchResult(GeckoModel):
    coins: list[SearchCoinItem] = Field(default_factory=list)
    exchanges: list[SearchExchangeItem] = Field(default_factory=list)
    categories: list[SearchCategoryItem] = Field(default_factory=list)
    nfts: list[SearchNftItem] = Field(default_factory=list)
