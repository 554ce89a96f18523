from typing import Literal

from pydantic import Field

from geckoclient.models.common import GeckoModel, Params


class CoinCategoryParams(Params):
    order: (
        Literal[
            "market_cap_asc",
            "market_cap_desc",
            "name_desc",
            "name_asc",
            "market_cap_change_24h_desc",
            "market_cap_change_24h_asc",
        ]
        | None
    ) = None


class CoinCategoryListItem(GeckoModel):
    category_id: str
    name: str | None = None


class CoinCategory(GeckoModel):
    id: str
    name: str | None = None
    market_cap: float | None = None
    market_cap_change_24h: float | None = None
    content: str | None = None
    top_3_coins: list[str] = Field(default_factory=list)
    volume_24h: float | None = None
    updated_at: str | None = None
