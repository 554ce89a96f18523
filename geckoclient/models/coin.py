import datetime as dt
from typing import Literal

from pydantic import Field

from geckoclient.models.common import GeckoModel, ImageData, Locale, PaginationParams, Params, Precision

CurrencyMap = dict[str, float | None]

# [timestamp_ms, open, high, low, close]
CoinOhlc = list[tuple[float, float, float, float, float]]


# ============================================
# Parameter bags
# ============================================


class CoinsListParams(Params):
    include_platform: bool | None = Field(None, description="Include platform contract addresses.")


class MarketParams(PaginationParams):
    vs_currency: str = Field(..., description="Target currency of market data, e.g. 'usd'.")
    ids: list[str] | None = Field(None, description="Restrict to these coin ids.")
    category: str | None = None
    order: (
        Literal["market_cap_asc", "market_cap_desc", "volume_asc", "volume_desc", "id_asc", "id_desc"]
        | None
    ) = None
    sparkline: bool | None = None
    price_change_percentage: list[str] | None = Field(None, description="Windows such as ['1h', '24h', '7d'].")
    locale: Locale | None = None
    precision: Precision | None = None


class CoinByIdParams(Params):
    id: str
    localization: bool | None = None
    tickers: bool | None = None
    market_data: bool | None = None
    community_data: bool | None = None
    developer_data: bool | None = None
    sparkline: bool | None = None


class TickerParams(Params):
    id: str
    exchange_ids: list[str] | None = Field(None, description="Restrict to these exchange ids.")
    include_exchange_logo: bool | None = None
    page: int | None = None
    order: Literal["trust_score_desc", "trust_score_asc", "volume_desc"] | None = None
    depth: bool | None = None


class CoinHistoryParams(Params):
    id: str
    date: dt.datetime | dt.date | int | float = Field(
        ..., description="Snapshot day as epoch seconds, date or datetime (UTC)."
    )
    localization: bool | None = None


class _ChartParams(Params):
    id: str
    vs_currency: str
    precision: Precision | None = None


class MarketChartParams(_ChartParams):
    days: int | Literal["max"]
    interval: Literal["daily"] | None = None


class MarketChartRangeParams(_ChartParams):
    from_: int | float = Field(..., alias="from", description="Range start, epoch seconds.")
    to: int | float = Field(..., description="Range end, epoch seconds.")


class CoinOhlcParams(_ChartParams):
    days: Literal[1, 7, 14, 30, 90, 180, 365, "max"]


class ContractInfoParams(Params):
    id: str = Field(..., description="Asset platform id, e.g. 'ethereum'.")
    contract_address: str


class MarketChartFromContractParams(_ChartParams):
    days: int | Literal["max"]
    contract_address: str


class MarketChartRangeFromContractParams(MarketChartRangeParams):
    contract_address: str


# ============================================
# Response shapes
# ============================================


class Coin(GeckoModel):
    id: str
    symbol: str | None = None
    name: str | None = None
    platforms: dict[str, str | None] | None = None


class Roi(GeckoModel):
    times: float | None = None
    currency: str | None = None
    percentage: float | None = None


class Market(GeckoModel):
    id: str
    symbol: str | None = None
    name: str | None = None
    image: str | None = None
    current_price: float | None = None
    market_cap: float | None = None
    market_cap_rank: int | None = None
    fully_diluted_valuation: float | None = None
    total_volume: float | None = None
    high_24h: float | None = None
    low_24h: float | None = None
    price_change_24h: float | None = None
    price_change_percentage_24h: float | None = None
    market_cap_change_24h: float | None = None
    market_cap_change_percentage_24h: float | None = None
    circulating_supply: float | None = None
    total_supply: float | None = None
    max_supply: float | None = None
    ath: float | None = None
    ath_change_percentage: float | None = None
    ath_date: str | None = None
    atl: float | None = None
    atl_change_percentage: float | None = None
    atl_date: str | None = None
    roi: Roi | float | None = None
    last_updated: str | None = None


class TickerMarket(GeckoModel):
    name: str | None = None
    identifier: str | None = None
    has_trading_incentive: bool | None = None
    logo: str | None = None


class Ticker(GeckoModel):
    base: str | None = None
    target: str | None = None
    market: TickerMarket | None = None
    last: float | None = None
    volume: float | None = None
    converted_last: CurrencyMap | None = None
    converted_volume: CurrencyMap | None = None
    trust_score: str | None = None
    bid_ask_spread_percentage: float | None = None
    timestamp: str | None = None
    last_traded_at: str | None = None
    last_fetch_at: str | None = None
    is_anomaly: bool | None = None
    is_stale: bool | None = None
    trade_url: str | None = None
    token_info_url: str | None = None
    coin_id: str | None = None
    target_coin_id: str | None = None


class CommunityData(GeckoModel):
    facebook_likes: int | None = None
    twitter_followers: int | None = None
    reddit_average_posts_48h: float | None = None
    reddit_average_comments_48h: float | None = None
    reddit_subscribers: int | None = None
    reddit_accounts_active_48h: int | None = None
    telegram_channel_user_count: int | None = None


class CodeChanges(GeckoModel):
    additions: int | None = None
    deletions: int | None = None


class DeveloperData(GeckoModel):
    forks: int | None = None
    stars: int | None = None
    subscribers: int | None = None
    total_issues: int | None = None
    closed_issues: int | None = None
    pull_requests_merged: int | None = None
    pull_request_contributors: int | None = None
    code_additions_deletions_4_weeks: CodeChanges | None = None
    commit_count_4_weeks: int | None = None
    last_4_weeks_commit_activity_series: list[int] | None = None


class InterestStats(GeckoModel):
    alexa_rank: int | None = None
    bing_matches: int | None = None


class Sparkline(GeckoModel):
    price: list[float] = Field(default_factory=list)


class MarketData(GeckoModel):
    current_price: CurrencyMap | None = None
    total_value_locked: float | dict | None = None
    mcap_to_tvl_ratio: float | None = None
    fdv_to_tvl_ratio: float | None = None
    roi: Roi | float | None = None
    ath: CurrencyMap | None = None
    ath_change_percentage: CurrencyMap | None = None
    ath_date: dict[str, str | None] | None = None
    atl: CurrencyMap | None = None
    atl_change_percentage: CurrencyMap | None = None
    atl_date: dict[str, str | None] | None = None
    market_cap: CurrencyMap | None = None
    market_cap_rank: int | None = None
    fully_diluted_valuation: CurrencyMap | None = None
    total_volume: CurrencyMap | None = None
    high_24h: CurrencyMap | None = None
    low_24h: CurrencyMap | None = None
    price_change_24h: float | None = None
    price_change_percentage_24h: float | None = None
    price_change_percentage_7d: float | None = None
    price_change_percentage_14d: float | None = None
    price_change_percentage_30d: float | None = None
    price_change_percentage_60d: float | None = None
    price_change_percentage_200d: float | None = None
    price_change_percentage_1y: float | None = None
    market_cap_change_24h: float | None = None
    market_cap_change_percentage_24h: float | None = None
    price_change_24h_in_currency: CurrencyMap | None = None
    price_change_percentage_1h_in_currency: CurrencyMap | None = None
    price_change_percentage_24h_in_currency: CurrencyMap | None = None
    price_change_percentage_7d_in_currency: CurrencyMap | None = None
    price_change_percentage_14d_in_currency: CurrencyMap | None = None
    price_change_percentage_30d_in_currency: CurrencyMap | None = None
    price_change_percentage_60d_in_currency: CurrencyMap | None = None
    price_change_percentage_200d_in_currency: CurrencyMap | None = None
    price_change_percentage_1y_in_currency: CurrencyMap | None = None
    market_cap_change_24h_in_currency: CurrencyMap | None = None
    market_cap_change_percentage_24h_in_currency: CurrencyMap | None = None
    total_supply: float | None = None
    max_supply: float | None = None
    circulating_supply: float | None = None
    sparkline_7d: Sparkline | None = None
    last_updated: str | None = None


class HistoryMarketData(GeckoModel):
    current_price: CurrencyMap | None = None
    total_volume: CurrencyMap | None = None
    market_cap: CurrencyMap | None = None


class ReposUrl(GeckoModel):
    github: list[str] = Field(default_factory=list)
    bitbucket: list[str] = Field(default_factory=list)


class CoinLinks(GeckoModel):
    homepage: list[str] = Field(default_factory=list)
    blockchain_site: list[str] = Field(default_factory=list)
    official_forum_url: list[str] = Field(default_factory=list)
    chat_url: list[str] = Field(default_factory=list)
    announcement_url: list[str] = Field(default_factory=list)
    twitter_screen_name: str | None = None
    facebook_username: str | None = None
    bitcointalk_thread_identifier: str | int | None = None
    telegram_channel_identifier: str | None = None
    subreddit_url: str | None = None
    repos_url: ReposUrl | None = None


class DetailPlatform(GeckoModel):
    decimal_place: int | None = None
    contract_address: str | None = None


class CoinVerbose(GeckoModel):
    """Full coin record from ``coins/{id}`` and the contract lookup endpoint."""

    id: str
    symbol: str | None = None
    name: str | None = None
    asset_platform_id: str | None = None
    platforms: dict[str, str | None] | None = None
    detail_platforms: dict[str, DetailPlatform] | None = None
    block_time_in_minutes: int | None = None
    hashing_algorithm: str | None = None
    categories: list[str | None] = Field(default_factory=list)
    public_notice: str | list[str] | None = None
    additional_notices: list[str] = Field(default_factory=list)
    localization: dict[str, str] | None = None
    description: dict[str, str] | None = None
    links: CoinLinks | None = None
    image: ImageData | None = None
    country_origin: str | None = None
    genesis_date: str | None = None
    contract_address: str | None = None
    sentiment_votes_up_percentage: float | None = None
    sentiment_votes_down_percentage: float | None = None
    watchlist_portfolio_users: int | None = None
    market_cap_rank: int | None = None
    coingecko_rank: int | None = None
    coingecko_score: float | None = None
    developer_score: float | None = None
    community_score: float | None = None
    liquidity_score: float | None = None
    public_interest_score: float | None = None
    market_data: MarketData | None = None
    community_data: CommunityData | None = None
    developer_data: DeveloperData | None = None
    public_interest_stats: InterestStats | None = None
    status_updates: list = Field(default_factory=list)
    last_updated: str | None = None
    tickers: list[Ticker] = Field(default_factory=list)


class CoinHistory(GeckoModel):
    id: str
    symbol: str | None = None
    name: str | None = None
    localization: dict[str, str] | None = None
    image: ImageData | None = None
    market_data: HistoryMarketData | None = None
    community_data: CommunityData | None = None
    developer_data: DeveloperData | None = None
    public_interest_stats: InterestStats | None = None


class CoinTickers(GeckoModel):
    name: str | None = None
    tickers: list[Ticker] = Field(default_factory=list)


class MarketChart(GeckoModel):
    """Series of ``[timestamp_ms, value]`` pairs."""

    prices: list[tuple[float, float | None]] = Field(default_factory=list)
    market_caps: list[tuple[float, float | None]] = Field(default_factory=list)
    total_volumes: list[tuple[float, float | None]] = Field(default_factory=list)
