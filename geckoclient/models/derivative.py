from typing import Any, Literal

from pydantic import Field

from geckoclient.models.common import GeckoModel, PaginationParams, Params


class DerivativeParams(Params):
    include_tickers: Literal["unexpired", "all"] | None = None


class DerivativeExchangeParams(PaginationParams):
    order: (
        Literal[
            "name_asc",
            "name_desc",
            "open_interest_btc_asc",
            "open_interest_btc_desc",
            "trade_volume_24h_btc_asc",
            "trade_volume_24h_btc_desc",
        ]
        | None
    ) = None


class DerivativeExchangeByIdParams(DerivativeParams):
    id: str


class Derivative(GeckoModel):
    market: str | None = None
    symbol: str | None = None
    index_id: str | None = None
    price: str | None = None
    price_percentage_change_24h: float | None = None
    contract_type: str | None = None
    index: float | None = None
    basis: float | None = None
    spread: float | None = None
    funding_rate: float | None = None
    open_interest: float | None = None
    volume_24h: float | None = None
    last_traded_at: int | None = None
    expired_at: str | None = None


class DerivativeExchangeById(GeckoModel):
    name: str | None = None
    open_interest_btc: float | None = None
    trade_volume_24h_btc: str | None = None
    number_of_perpetual_pairs: int | None = None
    number_of_futures_pairs: int | None = None
    image: str | None = None
    year_established: int | None = None
    country: str | None = None
    description: str | None = None
    url: str | None = None
    # Only present when include_tickers is sent.
    tickers: list[dict[str, Any]] = Field(default_factory=list)


class DerivativeExchange(DerivativeExchangeById):
    id: str
