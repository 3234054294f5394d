"""Logging helpers for lve_exporter.

Records go through the standard library logging module. configure_logging
installs a handler that renders every record as one NDJSON line on stderr,
carrying any `extra` fields as structured attributes.
"""

import json
import logging
import sys
import traceback

ROOT_LOGGER_NAME = "lve_exporter"

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

_HANDLER_NAME = "lve_exporter.ndjson"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the lve_exporter namespace.

    Args:
        name: Usually __name__ of the calling module.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_exception(
    message: str,
    logger: logging.Logger | None = None,
    **attributes: str | int | float | bool,
) -> None:
    """Log the exception currently being handled at ERROR level.

    Args:
        message: The log message
        logger: Logger to use (default: the lve_exporter root logger)
        **attributes: Additional structured fields
    """
    (logger or get_logger(ROOT_LOGGER_NAME)).exception(message, extra=attributes)


class NDJSONFormatter(logging.Formatter):
    """Formatter that renders each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        obj: dict[str, object] = {
            "timestamp": record.created,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        attributes: dict[str, str | int | float | bool] = {}
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                attributes[key] = value

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                attributes["exc_type"] = exc_type.__name__
            if exc_value is not None:
                attributes["exc_message"] = str(exc_value)
            if exc_tb is not None:
                attributes["exc_traceback"] = "".join(
                    traceback.format_exception(exc_type, exc_value, exc_tb)
                )

        obj["attributes"] = attributes
        return json.dumps(obj)


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Send lve_exporter records to stderr as NDJSON.

    Calling this more than once only updates the level.

    Args:
        level: Level name or number (default "INFO").

    Returns:
        The configured lve_exporter root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(NDJSONFormatter())
        logger.addHandler(handler)
    return logger
