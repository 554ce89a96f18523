from pydantic import Field

from geckoclient.models.common import GeckoModel


class GlobalMarket(GeckoModel):
    active_cryptocurrencies: int | None = None
    upcoming_icos: int | None = None
    ongoing_icos: int | None = None
    ended_icos: int | None = None
    markets: int | None = None
    total_market_cap: dict[str, float] = Field(default_factory=dict)
    total_volume: dict[str, float] = Field(default_factory=dict)
    market_cap_percentage: dict[str, float] = Field(default_factory=dict)
    market_cap_change_percentage_24h_usd: float | None = None
    updated_at: int | None = None


class GlobalData(GeckoModel):
    data: GlobalMarket


class GlobalDeFi(GeckoModel):
    # The API reports these as decimal strings.
    defi_market_cap: str | None = None
    eth_market_cap: str | None = None
    defi_to_eth_ratio: str | None = None
    trading_volume_24h: str | None = None
    defi_dominance: str | None = None
    top_coin_name: str | None = None
    top_coin_defi_dominance: float | None = None


class GlobalDeFiData(GeckoModel):
    data: GlobalDeFi
