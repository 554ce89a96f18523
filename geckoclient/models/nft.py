from typing import Literal

from pydantic import Field

from geckoclient.models.common import GeckoModel, ImageData, PaginationParams, Params


class NftListParams(PaginationParams):
    asset_platform_id: str | None = None
    order: (
        Literal[
            "h24_volume_native_asc",
            "h24_volume_native_desc",
            "floor_price_native_asc",
            "floor_price_native_desc",
            "market_cap_native_asc",
            "market_cap_native_desc",
            "market_cap_usd_asc",
            "market_cap_usd_desc",
        ]
        | None
    ) = None


class NftByIdParams(Params):
    id: str


class NftByContractParams(Params):
    asset_platform_id: str
    contract_address: str


class NftListItem(GeckoModel):
    id: str
    contract_address: str | None = None
    name: str | None = None
    asset_platform_id: str | None = None
    symbol: str | None = None


class NftValues(GeckoModel):
    native_currency: float | None = None
    usd: float | None = None


class NftLinks(GeckoModel):
    homepage: str | None = None
    twitter: str | None = None
    discord: str | None = None


class NftExplorer(GeckoModel):
    name: str | None = None
    link: str | None = None


class NftItem(GeckoModel):
    """NFT collection detail, returned by both the id and the contract lookup."""

    id: str
    contract_address: str | None = None
    asset_platform_id: str | None = None
    name: str | None = None
    symbol: str | None = None
    image: ImageData | None = None
    description: str | None = None
    native_currency: str | None = None
    native_currency_symbol: str | None = None
    floor_price: NftValues | None = None
    market_cap: NftValues | None = None
    volume_24h: NftValues | None = None
    floor_price_in_usd_24h_percentage_change: float | None = None
    floor_price_24h_percentage_change: NftValues | None = None
    market_cap_24h_percentage_change: NftValues | None = None
    volume_24h_percentage_change: NftValues | None = None
    number_of_unique_addresses: int | None = None
    number_of_unique_addresses_24h_percentage_change: float | None = None
    volume_in_usd_24h_percentage_change: float | None = None
    total_supply: float | None = None
    links: NftLinks | None = None
    floor_price_7d_percentage_change: NftValues | None = None
    floor_price_14d_percentage_change: NftValues | None = None
    floor_price_30d_percentage_change: NftValues | None = None
    floor_price_60d_percentage_change: NftValues | None = None
    floor_price_1y_percentage_change: NftValues | None = None
    explorers: list[NftExplorer] = Field(default_factory=list)
