"""Logging configuration for ledgerkit."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from ledgerkit.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")

# Attributes passed through ``extra=`` by ledger and registry log calls
CONTEXT_FIELDS = ("account_id", "transfer_id", "record_id", "amount", "status")


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Route all ledgerkit logging to stdout.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        "standard" for pipe-separated text lines, "json" for one JSON
        object per line.
    """
    if format_type not in LOG_FORMATS:
        raise ConfigurationError(
            f"Unknown log format {format_type!r}, expected one of {', '.join(LOG_FORMATS)}"
        )
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("ledgerkit").setLevel(log_level)
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render a log record as a single JSON line.

    Ledger context (account id, transfer id, amount...) given through
    ``extra=`` becomes top-level keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)
