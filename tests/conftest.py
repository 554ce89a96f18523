import logging

import httpx
import pytest

from geckoclient import CoinGeckoClient


class Recorder:
    """MockTransport handler: records every request and answers with a canned reply."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.reply(200, json={})

    def reply(self, status_code: int = 200, **kwargs):
        self._status_code = status_code
        self._kwargs = kwargs

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self._status_code, **self._kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def params(self) -> httpx.QueryParams:
        return self.last.url.params


@pytest.fixture(autouse=True)
def restore_package_logger():
    # configure_logging() replaces handlers on the package logger; undo it per test.
    logger = logging.getLogger("geckoclient")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_client(recorder):
    def _make(api_type="DEMO", api_key="test_key"):
        transport = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        return CoinGeckoClient(api_key=api_key, api_type=api_type, client=transport)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
