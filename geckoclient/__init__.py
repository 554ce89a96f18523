"""
geckoclient - typed async client for the CoinGecko v3 market-data API
"""

from geckoclient.client import CoinGeckoClient
from geckoclient.config import ApiType, Settings
from geckoclient.errors import RequestFailure

__all__ = ["ApiType", "CoinGeckoClient", "RequestFailure", "Settings"]

__version__ = "0.1.0"
