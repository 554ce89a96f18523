"""CLI tool for calling CoinGecko endpoints."""

import asyncio
import json
from typing import Any

import typer
from pydantic import TypeAdapter

from geckoclient.client import OPERATIONS, CoinGeckoClient
from geckoclient.config import ApiType, settings
from geckoclient.errors import RequestFailure
from geckoclient.logs import configure_logging

app = typer.Typer(add_completion=False, help="Call one CoinGecko API endpoint and print the JSON result.")

_result_adapter = TypeAdapter(Any)


async def _call(client: CoinGeckoClient, operation: str, params: dict[str, Any]) -> Any:
    async with client:
        return await getattr(client, operation)(**params)


@app.command()
def main(
    operation: str = typer.Argument(..., help="Client method, e.g. get_price_by_id"),
    params: str = typer.Option("{}", "--params", help="Method parameters as JSON"),
    api_key: str = typer.Option(None, "--api-key", help="API key (default: COINGECKO_API_KEY)"),
    api_type: ApiType = typer.Option(None, "--type", help="Access tier (default: COINGECKO_API_TYPE)"),
    timeout: float = typer.Option(None, "--timeout", help="Request timeout in seconds"),
    output: str = typer.Option(None, "--output", "-o", help="Save to file"),
):
    """Fetch data from the CoinGecko API."""
    configure_logging()

    if operation not in OPERATIONS:
        typer.echo(f"Error: unknown operation '{operation}'. Choose from: {', '.join(OPERATIONS)}", err=True)
        raise typer.Exit(1)

    try:
        call_params = json.loads(params)
    except ValueError as e:
        typer.echo(f"Error: invalid --params JSON: {e}", err=True)
        raise typer.Exit(1) from e

    client = CoinGeckoClient(
        api_key=api_key or settings.api_key,
        api_type=api_type or settings.api_type,
        timeout=timeout or settings.timeout,
    )

    try:
        result = asyncio.run(_call(client, operation, call_params))
    except (RequestFailure, TypeError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    payload = _result_adapter.dump_python(result, mode="json")

    if output:
        with open(output, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        typer.echo(f"Saved to {output}")
    else:
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    app()
