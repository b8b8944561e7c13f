"""Logging setup for the bank simulator.

Records go to stderr by default so they never interleave with the menu
printed on stdout.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Route bank_sim log records to a single console handler.

    Parameters
    ----------
    level : str
        Level name; unknown names fall back to WARNING.
    format_type : str
        "standard" for text lines, "json" for one object per record.
    stream : TextIO | None
        Handler stream (default ``sys.stderr``).
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(format_type))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("bank_sim").setLevel(log_level)
    # Faker logs locale loading at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)
