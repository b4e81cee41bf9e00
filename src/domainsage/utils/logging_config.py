import json
import logging
import logging.config
import sys
from datetime import datetime, timezone

from domainsage.config.loader import LOG_FORMAT, LOG_LEVEL

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "console"
FORMATS = {"console", "json"}

# LogRecord attributes that are not worth repeating in JSON output
RESERVED_ATTRS = {
    "args", "created", "exc_info", "exc_text", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs", "msg", "name",
    "pathname", "process", "processName", "relativeCreated", "stack_info",
    "taskName", "thread", "threadName", "message",
}


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record):
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in RESERVED_ATTRS or key in payload:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False, default=str)


def resolve_level(level=None):
    level = str(level or LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LEVEL
    return level


def resolve_format(fmt=None):
    fmt = str(fmt or LOG_FORMAT).lower()
    return fmt if fmt in FORMATS else DEFAULT_FORMAT


def configure_logging(*, level=None, log_format=None, stream=None):
    """Install a single stream handler on the root logger.

    Values left as ``None`` come from the config file or the
    ``DOMAINSAGE_LOG_LEVEL`` / ``DOMAINSAGE_LOG_FORMAT`` environment variables.
    """
    resolved_level = resolve_level(level)

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": JsonFormatter},
            "console": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "stream": stream or sys.stderr,
                "level": resolved_level,
                "formatter": resolve_format(log_format),
            }
        },
        "root": {"level": resolved_level, "handlers": ["default"]},
    })


def get_logger(name):
    return logging.getLogger(name)
