from typing import Literal

from pydantic import Field

from geckoclient.models.coin import Ticker
from geckoclient.models.common import GeckoModel, Params

# [timestamp_ms, volume_btc]
ExchangeVolumeChart = list[tuple[float, float]]


class ExchangeByIdParams(Params):
    id: str


class ExchangeTickerParams(Params):
    id: str
    coin_ids: list[str] | None = Field(None, description="Restrict to these coin ids.")
    include_exchange_logo: bool | None = None
    page: int | None = None
    order: Literal["trust_score_desc", "trust_score_asc", "volume_desc"] | None = None
    depth: bool | None = None


class ExchangeVolumeChartParams(Params):
    id: str
    days: Literal[1, 7, 14, 30, 90, 180, 365]


class Exchange(GeckoModel):
    id: str
    name: str | None = None
    year_established: int | None = None
    country: str | None = None
    description: str | None = None
    url: str | None = None
    image: str | None = None
    has_trading_incentive: bool | None = None
    trust_score: int | None = None
    trust_score_rank: int | None = None
    trade_volume_24h_btc: float | None = None
    trade_volume_24h_btc_normalized: float | None = None


class ExchangeListItem(GeckoModel):
    id: str
    name: str | None = None


class ExchangeVerbose(GeckoModel):
    name: str | None = None
    year_established: int | None = None
    country: str | None = None
    description: str | None = None
    url: str | None = None
    image: str | None = None
    has_trading_incentive: bool | None = None
    trust_score: int | None = None
    trust_score_rank: int | None = None
    trade_volume_24h_btc: float | None = None
    trade_volume_24h_btc_normalized: float | None = None
    facebook_url: str | None = None
    reddit_url: str | None = None
    telegram_url: str | None = None
    slack_url: str | None = None
    other_url_1: str | None = None
    other_url_2: str | None = None
    twitter_handle: str | None = None
    centralized: bool | None = None
    public_notice: str | None = None
    alert_notice: str | None = None
    tickers: list[Ticker] = Field(default_factory=list)


# TODO: check ExchangeTicker against a recorded exchanges/{id}/tickers response;
# the shape comes from the API docs and has not been confirmed live.
class ExchangeTicker(GeckoModel):
    name: str | None = None
    tickers: list[Ticker] = Field(default_factory=list)
