import logging
from collections.abc import Mapping
from functools import lru_cache
from types import TracebackType
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from geckoclient.config import ApiType, Settings
from geckoclient.errors import RequestFailure
from geckoclient.formatting import join_values, to_api_date
from geckoclient.models import (
    ApiStatus,
    AssetPlatform,
    AssetPlatformParams,
    Coin,
    CoinByIdParams,
    CoinCategory,
    CoinCategoryListItem,
    CoinCategoryParams,
    CoinHistory,
    CoinHistoryParams,
    CoinOhlc,
    CoinOhlcParams,
    CoinsListParams,
    CoinTickers,
    CoinVerbose,
    CompaniesData,
    CompanyDataParams,
    ContractInfoParams,
    Derivative,
    DerivativeExchange,
    DerivativeExchangeById,
    DerivativeExchangeByIdParams,
    DerivativeExchangeParams,
    DerivativeParams,
    Exchange,
    ExchangeByIdParams,
    ExchangeListItem,
    ExchangeRates,
    ExchangeTicker,
    ExchangeTickerParams,
    ExchangeVerbose,
    ExchangeVolumeChart,
    ExchangeVolumeChartParams,
    GlobalData,
    GlobalDeFiData,
    Market,
    MarketChart,
    MarketChartFromContractParams,
    MarketChartParams,
    MarketChartRangeFromContractParams,
    MarketChartRangeParams,
    MarketParams,
    NftByContractParams,
    NftByIdParams,
    NftItem,
    NftListItem,
    NftListParams,
    PaginationParams,
    Params,
    Price,
    PriceByContractParams,
    PriceByIdParams,
    SearchResult,
    Status,
    TickerParams,
    Trending,
)

logger = logging.getLogger(__name__)

BASE_URLS = {
    ApiType.DEMO: "https://api.coingecko.com/api/v3",
    ApiType.PRO: "https://pro-api.coingecko.com/api/v3",
}

# The key travels as a query parameter under the tier's header name.
API_KEY_PARAMS = {
    ApiType.DEMO: "x-cg-demo-api-key",
    ApiType.PRO: "x-cg-pro-api-key",
}

DEFAULT_TIMEOUT = 30.0

# Public endpoint methods, in API documentation order.
OPERATIONS = (
    "get_api_status",
    "get_price_by_id",
    "get_price_by_contract_address",
    "get_supported_vs_currencies",
    "get_coin_list",
    "get_coin_markets",
    "get_coin_by_id",
    "get_coin_tickers",
    "get_coin_history",
    "get_coin_market_chart",
    "get_coin_market_chart_range",
    "get_coin_ohlc",
    "get_contract_info",
    "get_contract_market_chart",
    "get_contract_market_chart_range",
    "get_asset_platforms",
    "get_coin_categories_list",
    "get_coin_categories",
    "get_exchanges",
    "get_exchanges_list",
    "get_exchange_by_id",
    "get_exchange_tickers",
    "get_exchange_volume_chart",
    "get_derivatives",
    "get_derivatives_exchanges",
    "get_derivatives_exchange_by_id",
    "get_derivatives_exchanges_list",
    "get_nfts_list",
    "get_nft_by_id",
    "get_nft_by_contract_address",
    "get_exchange_rates",
    "search",
    "get_trending",
    "get_global",
    "get_global_defi",
    "get_companies_public_treasury",
)

ParamsArg = Params | Mapping[str, Any] | None

P = TypeVar("P", bound=Params)


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _bag(model: type[P], params: ParamsArg, overrides: Mapping[str, Any]) -> P:
    """Coerce a bag instance, a mapping or keyword arguments into ``model``."""
    if params is None:
        return model.model_validate(dict(overrides))
    if isinstance(params, Params):
        if not overrides and isinstance(params, model):
            return params
        params = params.model_dump(exclude_unset=True)
    return model.model_validate({**params, **overrides})


def _segment(value: Any) -> str:
    """Percent-encode ``value`` as exactly one path segment (``/``, ``?`` and ``..`` included)."""
    return quote(str(value), safe="")


def _query(bag: Params, *, path: tuple[str, ...] = (), joined: tuple[str, ...] = ()) -> dict[str, Any]:
    """Dump a bag to query parameters, dropping path fields and joining list filters."""
    query = bag.model_dump(by_alias=True, exclude_none=True, exclude=set(path))
    for name in joined:
        if name in query:
            query[name] = join_values(query[name])
    return query


def _remote_error(response: httpx.Response) -> tuple[str | None, Any]:
    """Extract the service's own (message, code) from an error body, if it sent one."""
    try:
        body = response.json()
    except ValueError:
        return None, None

    if not isinstance(body, dict):
        return None, None

    status = body.get("status")
    if isinstance(status, dict):
        message = status.get("error_message") or status.get("message")
        if message:
            return str(message), status.get("error_code")
    elif isinstance(status, str) and status:
        return status, None

    # Unknown ids come back as {"error": "coin not found"}.
    error = body.get("error")
    if isinstance(error, str) and error:
        return error, None

    return None, None


class CoinGeckoClient:
    """
    Async client for the CoinGecko v3 market-data API.

    The access tier is fixed at construction. It picks the base host and the
    query parameter that carries the API key for every request.

    Example:
        >>> async with CoinGeckoClient(api_key="CG-...", api_type="PRO") as cg:
        ...     prices = await cg.get_price_by_id(ids=["bitcoin"], vs_currencies=["usd"])
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        api_type: ApiType | str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ):
        self._api_type = ApiType(api_type)
        self._base_url = BASE_URLS[self._api_type]
        self.api_key = api_key
        self.timeout = timeout

        # An injected transport keeps its own timeout and is not closed by us.
        self._owns_client = client is None
        self.client = client if client is not None else httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "CoinGeckoClient":
        """Build a client from environment-backed settings."""
        if settings is None:
            settings = Settings()
        options = {"api_key": settings.api_key, "api_type": settings.api_type, "timeout": settings.timeout}
        options.update(kwargs)
        return cls(**options)

    @property
    def api_type(self) -> ApiType:
        return self._api_type

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key_param(self) -> str:
        return API_KEY_PARAMS[self._api_type]

    async def __aenter__(self) -> "CoinGeckoClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
            logger.debug("CoinGeckoClient transport closed")

    # ============================================
    # Request dispatcher
    # ============================================

    async def _create_request(self, endpoint: str, params: Mapping[str, Any] | None, response_type: Any) -> Any:
        """
        Perform one GET against ``{base_url}/{endpoint}`` and parse the body.

        Args:
            endpoint: Path below the API root, already interpolated.
            params: Query parameters. ``None`` values are dropped.
            response_type: Type the JSON body is validated into.

        Returns:
            The body validated as ``response_type``.

        Raises:
            RequestFailure: On a transport error, a non-2xx status or a body
                that cannot be decoded into ``response_type``.
        """
        caller_params = {k: v for k, v in (params or {}).items() if v is not None}
        query = dict(caller_params)
        if self.api_key is not None:
            query[self.api_key_param] = self.api_key

        url = f"{self._base_url}/{endpoint}"
        logger.debug(
            f"GET {endpoint}",
            extra={"props": {"event": "request", "endpoint": endpoint, "params": caller_params}},
        )

        try:
            response = await self.client.get(url, params=query)
            response.raise_for_status()
            return _adapter(response_type).validate_python(response.json())
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            message, code = _remote_error(e.response)
            logger.error(
                f"HTTP error: {status_code} - {endpoint}: {message or e}",
                extra={"props": {"event": "failure", "endpoint": endpoint, "status_code": status_code, "code": code}},
            )
            raise RequestFailure(message or str(e), status_code=status_code, code=code, cause=e) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(
                f"API request failed: {endpoint}: {e!r}",
                extra={"props": {"event": "failure", "endpoint": endpoint}},
            )
            raise RequestFailure(str(e) or repr(e), cause=e) from e
        except ValueError as e:
            # Undecodable JSON or a body that does not fit the response type.
            logger.error(
                f"Unexpected response from {endpoint}: {e}",
                extra={"props": {"event": "failure", "endpoint": endpoint}},
            )
            raise RequestFailure(str(e) or repr(e), cause=e) from e
        except Exception as e:
            # Anything an injected transport raises still reaches the caller as a RequestFailure.
            logger.error(
                f"Unexpected error calling {endpoint}: {e!r}",
                extra={"props": {"event": "failure", "endpoint": endpoint}},
            )
            raise RequestFailure(str(e) or repr(e), cause=e) from e

    # ============================================
    # Ping / simple
    # ============================================

    async def get_api_status(self) -> ApiStatus:
        """Check API server status. ``active`` when the greeting mentions the Moon."""
        status = await self._create_request("ping", {}, Status)
        return ApiStatus.from_status(status)

    async def get_price_by_id(self, params: ParamsArg = None, /, **kwargs: Any) -> Price:
        """
        Current price of coins by id.

        Args:
            params: ``PriceByIdParams`` or an equivalent mapping; keyword
                arguments are merged on top.

        Returns:
            ``{coin_id: {currency: price, ...}}``
        """
        bag = _bag(PriceByIdParams, params, kwargs)
        return await self._create_request(
            "simple/price", _query(bag, joined=("ids", "vs_currencies")), Price
        )

    async def get_price_by_contract_address(self, params: ParamsArg = None, /, **kwargs: Any) -> Price:
        """Current price of tokens on one asset platform, keyed by contract address."""
        bag = _bag(PriceByContractParams, params, kwargs)
        return await self._create_request(
            f"simple/token_price/{_segment(bag.id)}",
            _query(bag, path=("id",), joined=("contract_addresses", "vs_currencies")),
            Price,
        )

    async def get_supported_vs_currencies(self) -> list[str]:
        return await self._create_request("simple/supported_vs_currencies", {}, list[str])

    # ============================================
    # Coins
    # ============================================

    async def get_coin_list(self, params: ParamsArg = None, /, **kwargs: Any) -> list[Coin]:
        bag = _bag(CoinsListParams, params, kwargs)
        return await self._create_request("coins/list", _query(bag), list[Coin])

    async def get_coin_markets(self, params: ParamsArg = None, /, **kwargs: Any) -> list[Market]:
        """Market data (price, market cap, volume) for coins, paginated."""
        bag = _bag(MarketParams, params, kwargs)
        return await self._create_request(
            "coins/markets", _query(bag, joined=("ids", "price_change_percentage")), list[Market]
        )

    async def get_coin_by_id(self, params: ParamsArg = None, /, **kwargs: Any) -> CoinVerbose:
        bag = _bag(CoinByIdParams, params, kwargs)
        return await self._create_request(f"coins/{_segment(bag.id)}", _query(bag, path=("id",)), CoinVerbose)

    async def get_coin_tickers(self, params: ParamsArg = None, /, **kwargs: Any) -> CoinTickers:
        """Tickers of one coin across exchanges, 100 per page."""
        bag = _bag(TickerParams, params, kwargs)
        return await self._create_request(
            f"coins/{_segment(bag.id)}/tickers", _query(bag, path=("id",), joined=("exchange_ids",)), CoinTickers
        )

    async def get_coin_history(self, params: ParamsArg = None, /, **kwargs: Any) -> CoinHistory:
        """
        Snapshot of a coin at 00:00 UTC on the given day.

        Args:
            params: ``CoinHistoryParams``. ``date`` may be epoch seconds, a
                ``date`` or a ``datetime``; it is sent as ``dd-mm-yyyy``.
        """
        bag = _bag(CoinHistoryParams, params, kwargs)
        query = _query(bag, path=("id",))
        query["date"] = to_api_date(bag.date)
        return await self._create_request(f"coins/{_segment(bag.id)}/history", query, CoinHistory)

    async def get_coin_market_chart(self, params: ParamsArg = None, /, **kwargs: Any) -> MarketChart:
        bag = _bag(MarketChartParams, params, kwargs)
        return await self._create_request(
            f"coins/{_segment(bag.id)}/market_chart", _query(bag, path=("id",)), MarketChart
        )

    async def get_coin_market_chart_range(self, params: ParamsArg = None, /, **kwargs: Any) -> MarketChart:
        bag = _bag(MarketChartRangeParams, params, kwargs)
        return await self._create_request(
            f"coins/{_segment(bag.id)}/market_chart/range", _query(bag, path=("id",)), MarketChart
        )

    async def get_coin_ohlc(self, params: ParamsArg = None, /, **kwargs: Any) -> CoinOhlc:
        bag = _bag(CoinOhlcParams, params, kwargs)
        return await self._create_request(f"coins/{_segment(bag.id)}/ohlc", _query(bag, path=("id",)), CoinOhlc)

    # ============================================
    # Contract
    # ============================================

    # contract_address stays in the query as well as the path for these three.

    async def get_contract_info(self, params: ParamsArg = None, /, **kwargs: Any) -> CoinVerbose:
        """Coin record looked up by token contract address on an asset platform."""
        bag = _bag(ContractInfoParams, params, kwargs)
        return await self._create_request(
            f"coins/{_segment(bag.id)}/contract/{_segment(bag.contract_address)}",
            _query(bag, path=("id",)),
            CoinVerbose,
        )

    async def get_contract_market_chart(self, params: ParamsArg = None, /, **kwargs: Any) -> MarketChart:
        bag = _bag(MarketChartFromContractParams, params, kwargs)
        return await self._create_request(
            f"coins/{_segment(bag.id)}/contract/{_segment(bag.contract_address)}/market_chart",
            _query(bag, path=("id",)),
            MarketChart,
        )

    async def get_contract_market_chart_range(self, params: ParamsArg = None, /, **kwargs: Any) -> MarketChart:
        bag = _bag(MarketChartRangeFromContractParams, params, kwargs)
        return await self._create_request(
            f"coins/{_segment(bag.id)}/contract/{_segment(bag.contract_address)}/market_chart/range",
            _query(bag, path=("id",)),
            MarketChart,
        )

    # ============================================
    # Asset platforms / categories
    # ============================================

    async def get_asset_platforms(self, params: ParamsArg = None, /, **kwargs: Any) -> list[AssetPlatform]:
        bag = _bag(AssetPlatformParams, params, kwargs)
        return await self._create_request("asset_platforms", _query(bag), list[AssetPlatform])

    async def get_coin_categories_list(self) -> list[CoinCategoryListItem]:
        return await self._create_request("coins/categories/list", {}, list[CoinCategoryListItem])

    async def get_coin_categories(self, params: ParamsArg = None, /, **kwargs: Any) -> list[CoinCategory]:
        """Categories with market data."""
        bag = _bag(CoinCategoryParams, params, kwargs)
        return await self._create_request("coins/categories", _query(bag), list[CoinCategory])

    # ============================================
    # Exchanges
    # ============================================

    async def get_exchanges(self, params: ParamsArg = None, /, **kwargs: Any) -> list[Exchange]:
        bag = _bag(PaginationParams, params, kwargs)
        return await self._create_request("exchanges", _query(bag), list[Exchange])

    async def get_exchanges_list(self) -> list[ExchangeListItem]:
        return await self._create_request("exchanges/list", {}, list[ExchangeListItem])

    async def get_exchange_by_id(self, params: ParamsArg = None, /, **kwargs: Any) -> ExchangeVerbose:
        bag = _bag(ExchangeByIdParams, params, kwargs)
        return await self._create_request(f"exchanges/{_segment(bag.id)}", _query(bag, path=("id",)), ExchangeVerbose)

    async def get_exchange_tickers(self, params: ParamsArg = None, /, **kwargs: Any) -> ExchangeTicker:
        bag = _bag(ExchangeTickerParams, params, kwargs)
        return await self._create_request(
            f"exchanges/{_segment(bag.id)}/tickers", _query(bag, path=("id",), joined=("coin_ids",)), ExchangeTicker
        )

    async def get_exchange_volume_chart(self, params: ParamsArg = None, /, **kwargs: Any) -> ExchangeVolumeChart:
        """BTC trade volume of one exchange as ``[timestamp_ms, volume]`` pairs."""
        bag = _bag(ExchangeVolumeChartParams, params, kwargs)
        return await self._create_request(
            f"exchanges/{_segment(bag.id)}/volume_chart", _query(bag, path=("id",)), ExchangeVolumeChart
        )

    # ============================================
    # Derivatives
    # ============================================

    async def get_derivatives(self, params: ParamsArg = None, /, **kwargs: Any) -> list[Derivative]:
        bag = _bag(DerivativeParams, params, kwargs)
        return await self._create_request("derivatives", _query(bag), list[Derivative])

    async def get_derivatives_exchanges(
        self, params: ParamsArg = None, /, **kwargs: Any
    ) -> list[DerivativeExchange]:
        bag = _bag(DerivativeExchangeParams, params, kwargs)
        return await self._create_request("derivatives/exchanges", _query(bag), list[DerivativeExchange])

    async def get_derivatives_exchange_by_id(
        self, params: ParamsArg = None, /, **kwargs: Any
    ) -> DerivativeExchangeById:
        bag = _bag(DerivativeExchangeByIdParams, params, kwargs)
        return await self._create_request(
            f"derivatives/exchanges/{_segment(bag.id)}", _query(bag, path=("id",)), DerivativeExchangeById
        )

    async def get_derivatives_exchanges_list(self) -> list[ExchangeListItem]:
        return await self._create_request("derivatives/exchanges/list", {}, list[ExchangeListItem])

    # ============================================
    # NFTs
    # ============================================

    async def get_nfts_list(self, params: ParamsArg = None, /, **kwargs: Any) -> list[NftListItem]:
        bag = _bag(NftListParams, params, kwargs)
        return await self._create_request("nfts/list", _query(bag), list[NftListItem])

    async def get_nft_by_id(self, params: ParamsArg = None, /, **kwargs: Any) -> NftItem:
        bag = _bag(NftByIdParams, params, kwargs)
        return await self._create_request(f"nfts/{_segment(bag.id)}", _query(bag, path=("id",)), NftItem)

    async def get_nft_by_contract_address(self, params: ParamsArg = None, /, **kwargs: Any) -> NftItem:
        bag = _bag(NftByContractParams, params, kwargs)
        return await self._create_request(
            f"nfts/{_segment(bag.asset_platform_id)}/contract/{_segment(bag.contract_address)}",
            _query(bag, path=("asset_platform_id", "contract_address")),
            NftItem,
        )

    # ============================================
    # Rates / search / global / companies
    # ============================================

    async def get_exchange_rates(self) -> ExchangeRates:
        """BTC-to-currency exchange rates."""
        return await self._create_request("exchange_rates", {}, ExchangeRates)

    async def search(self, query: str) -> SearchResult:
        """Search coins, exchanges, categories and NFTs by name or symbol."""
        return await self._create_request("search", {"query": query}, SearchResult)

    async def get_trending(self) -> Trending:
        return await self._create_request("search/trending", {}, Trending)

    async def get_global(self) -> GlobalData:
        return await self._create_request("global", {}, GlobalData)

    async def get_global_defi(self) -> GlobalDeFiData:
        return await self._create_request("global/decentralized_finance_defi", {}, GlobalDeFiData)

    async def get_companies_public_treasury(self, params: ParamsArg = None, /, **kwargs: Any) -> CompaniesData:
        """Public companies' bitcoin or ethereum holdings."""
        bag = _bag(CompanyDataParams, params, kwargs)
        return await self._create_request(
            f"companies/public_treasury/{_segment(bag.coin_id)}", _query(bag, path=("coin_id",)), CompaniesData
        )
