from pydantic import Field

from geckoclient.models.common import Params, Precision

# {coin id or contract address: {currency or field: value}}
Price = dict[str, dict[str, float | None]]


class _PriceParams(Params):
    vs_currencies: list[str] = Field(..., description="Target currencies, e.g. ['usd', 'eur'].")
    include_market_cap: bool | None = None
    include_24hr_vol: bool | None = None
    include_24hr_change: bool | None = None
    include_last_updated_at: bool | None = None
    precision: Precision | None = None


class PriceByIdParams(_PriceParams):
    ids: list[str] = Field(..., description="Coin ids, e.g. ['bitcoin', 'ethereum'].")


class PriceByContractParams(_PriceParams):
    id: str = Field(..., description="Asset platform id, e.g. 'ethereum'.")
    contract_addresses: list[str] = Field(..., description="Token contract addresses.")
