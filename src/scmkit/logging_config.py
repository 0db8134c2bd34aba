"""
Logging configuration for scmkit.

scmkit modules log through `logging.getLogger(__name__)` and never install
handlers on import. Applications (and run.py) call configure_logging:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL
- LOG_FORMAT: simple, detailed, json
"""

import os
import sys
import logging
import json
from datetime import datetime
from typing import Optional

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Extra attributes copied into JSON records when present
EXTRA_FIELDS = ("event", "repo", "method", "url", "status")


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    One JSON object per line, with any known `extra` attributes included.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def build_formatter(format_style: str) -> logging.Formatter:
    """Create the formatter for a format style"""
    if format_style == "json":
        return JSONFormatter()
    if format_style == "detailed":
        return logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    return logging.Formatter(fmt="%(levelname)s - %(name)s - %(message)s")


def configure_logging(
    level: Optional[str] = None,
    format_style: Optional[str] = None
) -> None:
    """
    Configure root logging for an application using scmkit.

    Args:
        level: Log level. Defaults to LOG_LEVEL env var or INFO.
        format_style: simple, detailed or json. Defaults to LOG_FORMAT env var or simple.
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = (format_style or os.getenv("LOG_FORMAT", "simple")).lower()

    if log_level not in VALID_LEVELS:
        sys.stderr.write(f"Warning: Invalid LOG_LEVEL '{log_level}', defaulting to INFO\n")
        log_level = "INFO"

    numeric_level = getattr(logging, log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Replace existing handlers so repeated calls don't duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(build_formatter(log_format))
    root_logger.addHandler(console_handler)

    # scmkit logs every request at DEBUG already
    for noisy in ("httpx", "httpcore", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    root_logger.debug(f"Logging configured: level={log_level}, format={log_format}")
