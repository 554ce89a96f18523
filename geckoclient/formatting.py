"""Helpers for turning Python values into CoinGecko query strings."""

from collections.abc import Iterable
from datetime import UTC, date, datetime

API_DATE_FORMAT = "%d-%m-%Y"


def join_values(values: Iterable[str] | None) -> str | None:
    """Join identifiers with commas. An empty iterable gives an empty string."""
    if values is None:
        return None
    if isinstance(values, str):
        return values
    return ",".join(str(v) for v in values)


def to_api_date(value: datetime | date | int | float) -> str:
    """
    Format a snapshot date the way the history endpoint expects (dd-mm-yyyy).

    Args:
        value: Epoch seconds, a ``date`` or a ``datetime``. Naive datetimes
            are taken as UTC.

    Returns:
        Day-month-year string, zero padded.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        value = value.timestamp()
    elif isinstance(value, date):
        return value.strftime(API_DATE_FORMAT)

    return datetime.fromtimestamp(value, tz=UTC).strftime(API_DATE_FORMAT)
