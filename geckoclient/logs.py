import json
import logging
from datetime import UTC, datetime

from geckoclient.config import Settings, settings

logger = logging.getLogger("geckoclient")

# Keys the client attaches under ``extra={"props": ...}``:
#   event        "request" before a GET, "failure" when it raised
#   endpoint     path below the API root, e.g. "coins/bitcoin/history"
#   params       query sent, without the API key
#   status_code  HTTP status of a failed response
#   code         the service's own error_code, when it sent one
REQUEST_PROPS = ("event", "endpoint", "params", "status_code", "code")

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line: level, message and the request props the client attached."""

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        props = getattr(record, "props", None) or {}
        for key in REQUEST_PROPS:
            if props.get(key) is not None:
                entry[key] = props[key]
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(config: Settings | None = None) -> logging.Logger:
    """Point the ``geckoclient`` logger at stderr, as JSON lines when ``log_json`` is set."""
    config = config or settings
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if config.log_json else logging.Formatter(PLAIN_FORMAT))

    # Replace, so repeated CLI calls in one process do not stack handlers.
    logger.handlers = [handler]
    logger.setLevel(config.log_level.upper())
    return logger
