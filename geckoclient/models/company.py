from typing import Literal

from pydantic import Field

from geckoclient.models.common import GeckoModel, Params


class CompanyDataParams(Params):
    coin_id: Literal["bitcoin", "ethereum"]


class Company(GeckoModel):
    name: str | None = None
    symbol: str | None = None
    country: str | None = None
    total_holdings: float | None = None
    total_entry_value_usd: float | None = None
    total_current_value_usd: float | None = None
    percentage_of_total_supply: float | None = None


class CompaniesData(GeckoModel):
    """Public company treasury holdings of one coin."""

    total_holdings: float | None = None
    total_value_usd: float | None = None
    market_cap_dominance: float | None = None
    companies: list[Company] = Field(default_factory=list)
