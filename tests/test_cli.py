import json
from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from geckoclient.cli import app
from geckoclient.client import CoinGeckoClient

runner = CliRunner()


@pytest.fixture
def patched_client(recorder):
    """Route the CLI's client through the recording mock transport."""

    def factory(**kwargs):
        return CoinGeckoClient(**kwargs, client=httpx.AsyncClient(transport=httpx.MockTransport(recorder)))

    with patch("geckoclient.cli.CoinGeckoClient", side_effect=factory) as mock_cls:
        yield mock_cls


def test_cli_prints_result(patched_client, recorder):
    recorder.reply(200, json={"gecko_says": "(V3) To the Moon!"})

    result = runner.invoke(app, ["get_api_status"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"status": "active"}


def test_cli_passes_params_and_tier(patched_client, recorder):
    recorder.reply(200, json={"bitcoin": {"usd": 60000}})

    result = runner.invoke(
        app,
        [
            "get_price_by_id",
            "--params",
            '{"ids": ["bitcoin", "ethereum"], "vs_currencies": ["usd"]}',
            "--type",
            "PRO",
            "--api-key",
            "cli_key",
        ],
    )

    assert result.exit_code == 0
    assert recorder.last.url.host == "pro-api.coingecko.com"
    assert recorder.params["ids"] == "bitcoin,ethereum"
    assert recorder.params["x-cg-pro-api-key"] == "cli_key"
    assert json.loads(result.stdout) == {"bitcoin": {"usd": 60000}}


def test_cli_writes_output_file(patched_client, recorder, tmp_path):
    recorder.reply(200, json=[{"id": "bitcoin", "symbol": "btc", "name": "Bitcoin"}])
    target = tmp_path / "coins.json"

    result = runner.invoke(app, ["get_coin_list", "-o", str(target)])

    assert result.exit_code == 0
    assert "Saved to" in result.stdout
    saved = json.loads(target.read_text(encoding="utf-8"))
    assert saved[0]["id"] == "bitcoin"


def test_cli_reports_request_failure(patched_client, recorder):
    recorder.reply(429, json={"status": {"error_code": 429, "error_message": "rate limited"}})

    result = runner.invoke(app, ["get_global"])

    assert result.exit_code == 1
    assert "rate limited" in result.output


def test_cli_rejects_unknown_operation(patched_client):
    result = runner.invoke(app, ["aclose"])

    assert result.exit_code == 1
    assert "unknown operation" in result.output
    patched_client.assert_not_called()


def test_cli_rejects_bad_params_json(patched_client):
    result = runner.invoke(app, ["get_coin_list", "--params", "{not json"])

    assert result.exit_code == 1
    assert "invalid --params JSON" in result.output
    patched_client.assert_not_called()
