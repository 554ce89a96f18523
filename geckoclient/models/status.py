from typing import Literal

from pydantic import Field

from geckoclient.models.common import GeckoModel

# Health-check greeting marker. The API answers "(V3) To the Moon!" when up.
ACTIVE_MARKER = "the Moon!"


class Status(GeckoModel):
    gecko_says: str = ""


class ApiStatus(GeckoModel):
    status: Literal["active", "inactive"]

    @classmethod
    def from_status(cls, status: Status) -> "ApiStatus":
        return cls(status="active" if ACTIVE_MARKER in status.gecko_says else "inactive")


class ExchangeRate(GeckoModel):
    name: str | None = None
    unit: str | None = None
    value: float | None = None
    type: str | None = None


class ExchangeRates(GeckoModel):
    """BTC-to-currency exchange rates keyed by currency code."""

    rates: dict[str, ExchangeRate] = Field(default_factory=dict)
