from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiType(StrEnum):
    """CoinGecko access tier. Selects the host and the API-key parameter name."""

    DEMO = "DEMO"
    PRO = "PRO"


class Settings(BaseSettings):
    # Core Settings
    api_key: str | None = Field(None, description="CoinGecko API key (demo or pro)")
    api_type: ApiType = Field(ApiType.DEMO, description="Access tier: DEMO or PRO")
    timeout: float = Field(30.0, description="Request timeout in seconds")

    # Logging Settings
    log_level: str = Field("INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(False, description="Emit JSON log lines")

    model_config = SettingsConfigDict(env_file=".env", env_prefix="COINGECKO_", extra="ignore")


settings = Settings()
