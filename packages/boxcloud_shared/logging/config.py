"""Root logging setup driven by ``LoggingSettings``.

The SDK only emits records. Applications install handlers through
``configure_logging`` (``VagrantCloudClient.from_settings`` does it for them)
and every record then carries the bound box fields plus, for registry calls,
the method, URL and status code of the request.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from packages.boxcloud_shared.config.models import LoggingSettings

from . import fields
from .context import bind_context, get_context

# Per-record fields passed through ``extra=`` by registry calls.
CALL_FIELDS = (fields.HTTP_METHOD, fields.HTTP_URL, fields.STATUS_CODE)


def structured_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the bound context of ``record`` merged with its call fields."""
    context = getattr(record, "context", None)
    values: dict[str, Any] = dict(context) if isinstance(context, dict) else {}
    for key in CALL_FIELDS:
        if hasattr(record, key):
            values[key] = getattr(record, key)
    return values


class ContextFilter(logging.Filter):
    """Attach the bound box context to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = get_context()
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line: core fields, then box and call fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        payload.update(structured_fields(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Terminal-friendly lines with sorted ``key=value`` pairs appended."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        values = structured_fields(record)
        if not values:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(values.items()))
        return f"{line} {pairs}"


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Install one stdout handler on the root logger.

    Handlers from earlier calls are replaced. ``service`` and ``environment``
    are bound into the context of the calling thread.
    """
    settings = LoggingSettings() if settings is None else settings
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(settings.level)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if settings.json_output else PlainFormatter())
    root.addHandler(handler)

    bind_context(
        **{
            fields.SERVICE: settings.service,
            fields.ENVIRONMENT: settings.environment,
        }
    )
