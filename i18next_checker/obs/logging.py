import json
import logging
from datetime import datetime, timezone
from typing import Any

LOGGER_NAME = "i18next_checker"

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render logs as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        path = getattr(record, "path", None)
        if path is not None:
            data["path"] = str(path)
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def configure_logging(level: int | str = logging.WARNING, json_format: bool = False) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Diagnostics such as unreadable locale files go through this logger;
    the check report itself is written by :class:`~i18next_checker.obs.reporter.Reporter`.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_PLAIN_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
