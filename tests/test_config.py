from unittest.mock import patch

import pytest

from geckoclient import ApiType, CoinGeckoClient, Settings


@pytest.fixture
def pro_env():
    with patch.dict(
        "os.environ",
        {"COINGECKO_API_KEY": "env_key", "COINGECKO_API_TYPE": "PRO", "COINGECKO_TIMEOUT": "12.5"},
    ):
        yield


def test_settings_defaults():
    with patch.dict("os.environ", {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.api_key is None
    assert settings.api_type is ApiType.DEMO
    assert settings.timeout == 30.0
    assert settings.log_level == "INFO"
    assert settings.log_json is False


def test_settings_from_environment(pro_env):
    settings = Settings(_env_file=None)

    assert settings.api_key == "env_key"
    assert settings.api_type is ApiType.PRO
    assert settings.timeout == 12.5


@pytest.mark.asyncio
async def test_client_from_settings(pro_env):
    client = CoinGeckoClient.from_settings(Settings(_env_file=None))

    assert client.api_key == "env_key"
    assert client.api_type is ApiType.PRO
    assert client.base_url == "https://pro-api.coingecko.com/api/v3"
    assert client.timeout == 12.5
    await client.aclose()


@pytest.mark.asyncio
async def test_from_settings_overrides():
    client = CoinGeckoClient.from_settings(Settings(_env_file=None, api_key="a"), api_key="b", api_type="DEMO")

    assert client.api_key == "b"
    assert client.api_type is ApiType.DEMO
    await client.aclose()
