"""Logging configuration for the equipment registry."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure the root logger with a single stdout handler.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        "standard" for pipe-separated lines, "json" for one JSON object
        per line.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("equipment_registry").setLevel(log_level)
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Structured fields passed as ``extra={"extra": {...}}`` are merged into
    the top level of the object.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        fields = getattr(record, "extra", None)
        if isinstance(fields, dict):
            log_data.update(fields)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (usually ``__name__``)."""
    return logging.getLogger(name)
