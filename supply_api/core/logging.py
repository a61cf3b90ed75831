"""Process-wide logging for the API and the seed script.

Every record is stamped with the service name and environment by
``ServiceContextFilter`` so plain and JSON output carry the same context.
SQL statement logging is opt-in through ``LOG_SQL``.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from supply_api.config import Settings, get_settings

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(service)s/%(environment)s] %(name)s - %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
SQL_LOGGER = "sqlalchemy.engine"


class ServiceContextFilter(logging.Filter):
    def __init__(self, service: str, environment: str):
        super().__init__()
        self.service = service
        self.environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self.service
        record.environment = self.environment
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line; service fields are included when the context filter ran."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in ("service", "environment"):
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def build_handler(settings: Settings) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.addFilter(ServiceContextFilter(settings.APP_NAME, settings.ENVIRONMENT))
    if settings.LOG_JSON:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT))
    return handler


def setup_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(resolve_level(settings.LOG_LEVEL))
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(build_handler(settings))

    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if settings.LOG_SQL else logging.WARNING)


__all__ = [
    "JsonFormatter",
    "ServiceContextFilter",
    "build_handler",
    "resolve_level",
    "setup_logging",
]
