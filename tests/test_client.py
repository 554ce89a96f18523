import logging
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from geckoclient import ApiType, CoinGeckoClient, RequestFailure

RATE_LIMITED = {"status": {"error_code": 429, "error_message": "rate limited"}}


@pytest.mark.asyncio
async def test_demo_tier_host_and_key(client, recorder):
    recorder.reply(200, json={"gecko_says": "(V3) To the Moon!"})

    await client.get_api_status()

    request = recorder.last
    assert request.method == "GET"
    assert request.url.host == "api.coingecko.com"
    assert request.url.path == "/api/v3/ping"
    assert request.url.params["x-cg-demo-api-key"] == "test_key"
    assert "x-cg-pro-api-key" not in request.url.params
    # The key is a query parameter, never a header.
    assert "x-cg-demo-api-key" not in request.headers


@pytest.mark.asyncio
async def test_pro_tier_host_and_key(make_client, recorder):
    client = make_client(api_type=ApiType.PRO, api_key="pro_key")
    recorder.reply(200, json={"gecko_says": "(V3) To the Moon!"})

    await client.get_api_status()

    assert recorder.last.url.host == "pro-api.coingecko.com"
    assert recorder.params["x-cg-pro-api-key"] == "pro_key"
    assert "x-cg-demo-api-key" not in recorder.params


def test_tier_accepts_string_and_is_read_only():
    client = CoinGeckoClient(api_type="PRO", client=MagicMock())

    assert client.api_type is ApiType.PRO
    assert client.base_url == "https://pro-api.coingecko.com/api/v3"
    assert client.api_key_param == "x-cg-pro-api-key"
    with pytest.raises(AttributeError):
        client.api_type = ApiType.DEMO


def test_tier_must_be_chosen():
    with pytest.raises(TypeError):
        CoinGeckoClient(api_key="test_key", client=MagicMock())


@pytest.mark.asyncio
async def test_missing_api_key_is_not_sent(make_client, recorder):
    client = make_client(api_key=None)
    recorder.reply(200, json=["usd"])

    await client.get_supported_vs_currencies()

    assert "x-cg-demo-api-key" not in recorder.params
    assert "None" not in str(recorder.last.url)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("greeting", "expected"),
    [("(V3) To the Moon!", "active"), ("To the Moon!", "active"), ("hello", "inactive"), ("", "inactive")],
)
async def test_api_status_classification(client, recorder, greeting, expected):
    recorder.reply(200, json={"gecko_says": greeting})

    status = await client.get_api_status()

    assert status.status == expected


@pytest.mark.asyncio
async def test_none_values_are_omitted(client, recorder):
    recorder.reply(200, json=[])

    await client._create_request("coins/markets", {"vs_currency": "usd", "page": None}, list)

    assert recorder.params["vs_currency"] == "usd"
    assert "page" not in recorder.params


@pytest.mark.asyncio
async def test_get_data_success_with_mocked_transport():
    client = CoinGeckoClient(api_key="test_key", api_type=ApiType.DEMO, client=MagicMock())

    mock_response = MagicMock()
    mock_response.status_code = 200
    mock_response.json.return_value = ["usd", "eur"]
    mock_response.raise_for_status = MagicMock()
    client.client.get = AsyncMock(return_value=mock_response)

    currencies = await client.get_supported_vs_currencies()

    assert currencies == ["usd", "eur"]
    client.client.get.assert_called_once()
    call_args = client.client.get.call_args
    assert call_args.args[0] == "https://api.coingecko.com/api/v3/simple/supported_vs_currencies"
    assert call_args.kwargs["params"] == {"x-cg-demo-api-key": "test_key"}


@pytest.mark.asyncio
async def test_remote_status_message_is_preferred(client, recorder):
    recorder.reply(429, json=RATE_LIMITED)

    with pytest.raises(RequestFailure) as exc:
        await client.get_coin_list()

    assert exc.value.message == "rate limited"
    assert str(exc.value) == "rate limited"
    assert exc.value.status_code == 429
    assert exc.value.code == 429
    assert isinstance(exc.value.cause, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_remote_status_string_and_error_field(client, recorder):
    recorder.reply(401, json={"status": "unauthorized"})
    with pytest.raises(RequestFailure) as exc:
        await client.get_global()
    assert exc.value.message == "unauthorized"

    recorder.reply(404, json={"error": "coin not found"})
    with pytest.raises(RequestFailure) as exc:
        await client.get_coin_by_id(id="nope")
    assert exc.value.message == "coin not found"
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_http_error_without_remote_message(client, recorder):
    recorder.reply(502, text="<html>Bad Gateway</html>")

    with pytest.raises(RequestFailure) as exc:
        await client.get_trending()

    assert "502" in exc.value.message
    assert exc.value.status_code == 502
    assert exc.value.code is None


@pytest.mark.asyncio
async def test_transport_error_message():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = CoinGeckoClient(api_type="DEMO", client=httpx.AsyncClient(transport=httpx.MockTransport(refuse)))

    with pytest.raises(RequestFailure) as exc:
        await client.get_global()

    assert exc.value.message == "connection refused"
    assert exc.value.status_code is None
    assert isinstance(exc.value.cause, httpx.ConnectError)


@pytest.mark.asyncio
async def test_undecodable_body_is_a_failure(client, recorder):
    recorder.reply(200, text="not json")

    with pytest.raises(RequestFailure) as exc:
        await client.get_global()

    assert isinstance(exc.value.cause, ValueError)
    assert exc.value.status_code is None


@pytest.mark.asyncio
async def test_client_survives_a_failed_call(client, recorder):
    recorder.reply(429, json=RATE_LIMITED)
    with pytest.raises(RequestFailure):
        await client.get_supported_vs_currencies()

    recorder.reply(200, json=["usd"])
    assert await client.get_supported_vs_currencies() == ["usd"]
    assert len(recorder.requests) == 2


@pytest.mark.asyncio
async def test_failure_is_logged(client, recorder, caplog):
    recorder.reply(429, json=RATE_LIMITED)

    with caplog.at_level(logging.DEBUG, logger="geckoclient"), pytest.raises(RequestFailure):
        await client.get_exchanges_list()

    assert "GET exchanges/list" in caplog.text
    assert "HTTP error: 429" in caplog.text
    assert "test_key" not in caplog.text


@pytest.mark.asyncio
async def test_owned_transport_is_closed():
    client = CoinGeckoClient(api_type=ApiType.DEMO)
    assert client.client.timeout == httpx.Timeout(30.0)

    async with client as cg:
        assert cg is client

    assert client.client.is_closed


@pytest.mark.asyncio
async def test_injected_transport_is_left_open(client):
    async with client:
        pass

    assert not client.client.is_closed


@pytest.mark.asyncio
async def test_custom_timeout():
    client = CoinGeckoClient(api_type=ApiType.DEMO, timeout=5)
    assert client.client.timeout == httpx.Timeout(5)
    await client.aclose()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("raised", "message"),
    [
        (RuntimeError("raw failure"), "raw failure"),
        (httpx.InvalidURL("non-printable character in URL"), "non-printable character in URL"),
        (KeyError(), "KeyError()"),
    ],
)
async def test_any_transport_error_becomes_request_failure(raised, message):
    def explode(request):
        raise raised

    client = CoinGeckoClient(api_type=ApiType.DEMO, client=httpx.AsyncClient(transport=httpx.MockTransport(explode)))

    with pytest.raises(RequestFailure) as exc:
        await client.get_coin_by_id(id="bitcoin")

    assert exc.value.message == message
    assert exc.value.cause is raised
    assert exc.value.status_code is None


@pytest.mark.asyncio
async def test_failure_log_carries_status_props(client, recorder, caplog):
    recorder.reply(429, json=RATE_LIMITED)

    with caplog.at_level(logging.ERROR, logger="geckoclient"), pytest.raises(RequestFailure):
        await client.get_global()

    (record,) = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert record.props == {"event": "failure", "endpoint": "global", "status_code": 429, "code": 429}
