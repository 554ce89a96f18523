"""Request parameter bags and response shapes for the CoinGecko v3 API."""

from geckoclient.models.category import CoinCategory, CoinCategoryListItem, CoinCategoryParams
from geckoclient.models.coin import (
    Coin,
    CoinByIdParams,
    CoinHistory,
    CoinHistoryParams,
    CoinOhlc,
    CoinOhlcParams,
    CoinsListParams,
    CoinTickers,
    CoinVerbose,
    ContractInfoParams,
    Market,
    MarketChart,
    MarketChartFromContractParams,
    MarketChartParams,
    MarketChartRangeFromContractParams,
    MarketChartRangeParams,
    MarketData,
    MarketParams,
    Ticker,
    TickerParams,
)
from geckoclient.models.common import GeckoModel, ImageData, Locale, PaginationParams, Params, Precision
from geckoclient.models.company import CompaniesData, Company, CompanyDataParams
from geckoclient.models.derivative import (
    Derivative,
    DerivativeExchange,
    DerivativeExchangeById,
    DerivativeExchangeByIdParams,
    DerivativeExchangeParams,
    DerivativeParams,
)
from geckoclient.models.exchange import (
    Exchange,
    ExchangeByIdParams,
    ExchangeListItem,
    ExchangeTicker,
    ExchangeTickerParams,
    ExchangeVerbose,
    ExchangeVolumeChart,
    ExchangeVolumeChartParams,
)
from geckoclient.models.global_data import GlobalData, GlobalDeFiData
from geckoclient.models.nft import NftByContractParams, NftByIdParams, NftItem, NftListItem, NftListParams
from geckoclient.models.platform import AssetPlatform, AssetPlatformParams
from geckoclient.models.price import Price, PriceByContractParams, PriceByIdParams
from geckoclient.models.search import SearchResult
from geckoclient.models.status import ApiStatus, ExchangeRate, ExchangeRates, Status
from geckoclient.models.trending import Trending

__all__ = [
    "ApiStatus",
    "AssetPlatform",
    "AssetPlatformParams",
    "Coin",
    "CoinByIdParams",
    "CoinCategory",
    "CoinCategoryListItem",
    "CoinCategoryParams",
    "CoinHistory",
    "CoinHistoryParams",
    "CoinOhlc",
    "CoinOhlcParams",
    "CoinTickers",
    "CoinVerbose",
    "CoinsListParams",
    "CompaniesData",
    "Company",
    "CompanyDataParams",
    "ContractInfoParams",
    "Derivative",
    "DerivativeExchange",
    "DerivativeExchangeById",
    "DerivativeExchangeByIdParams",
    "DerivativeExchangeParams",
    "DerivativeParams",
    "Exchange",
    "ExchangeByIdParams",
    "ExchangeListItem",
    "ExchangeRate",
    "ExchangeRates",
    "ExchangeTicker",
    "ExchangeTickerParams",
    "ExchangeVerbose",
    "ExchangeVolumeChart",
    "ExchangeVolumeChartParams",
    "GeckoModel",
    "GlobalData",
    "GlobalDeFiData",
    "ImageData",
    "Locale",
    "Market",
    "MarketChart",
    "MarketChartFromContractParams",
    "MarketChartParams",
    "MarketChartRangeFromContractParams",
    "MarketChartRangeParams",
    "MarketData",
    "MarketParams",
    "NftByContractParams",
    "NftByIdParams",
    "NftItem",
    "NftListItem",
    "NftListParams",
    "PaginationParams",
    "Params",
    "Precision",
    "Price",
    "PriceByContractParams",
    "PriceByIdParams",
    "SearchResult",
    "Status",
    "Ticker",
    "TickerParams",
    "Trending",
]
