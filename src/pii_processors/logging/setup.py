"""Logging configuration for pii-processors.

Provides structured JSON logging with run_id correlation. Every record
carries the processor and column it concerns (``-`` when unrelated to a
dispatch). Cell values are never emitted: fields that would hold one are
dropped before formatting.
"""

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any, Optional

from pythonjsonlogger import jsonlogger


# Context variable for anonymization run correlation
run_id_var: ContextVar[str] = ContextVar("run_id", default="")

# Extra keys that would carry a raw or replacement cell value
RAW_VALUE_FIELDS = frozenset({"value", "values", "original", "candidate", "replacement"})


class RunContextFilter(logging.Filter):
    """Filter that adds run_id, processor and column to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = run_id_var.get() or "-"
        if not getattr(record, "processor", None):
            record.processor = "-"
        if not getattr(record, "column", None):
            record.column = "-"
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps run context and strips cell values."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        # Rename fields for better compatibility
        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")

        log_record["service"] = "pii-processors"

        if hasattr(record, "run_id"):
            log_record["run_id"] = record.run_id
        log_record["processor"] = getattr(record, "processor", None) or "-"
        log_record["column"] = getattr(record, "column", None) or "-"

        for key in RAW_VALUE_FIELDS.intersection(log_record):
            del log_record[key]


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var
               PII_PROCESSORS_LOG_LEVEL or INFO.
        json_format: Whether to use JSON format. Defaults to env var
                     PII_PROCESSORS_LOG_FORMAT == 'json' or True.
    """
    if level is None:
        level = os.getenv("PII_PROCESSORS_LOG_LEVEL", "INFO").upper()
    if json_format is None:
        log_format = os.getenv("PII_PROCESSORS_LOG_FORMAT", "json").lower()
        json_format = log_format == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(RunContextFilter())

    if json_format:
        formatter = CustomJsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(
            fmt=(
                "%(asctime)s - %(name)s - %(levelname)s - "
                "[%(run_id)s %(processor)s %(column)s] %(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Faker logs locale/provider lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)


def set_run_id(run_id: str) -> None:
    """Set the anonymization run ID for the current context."""
    run_id_var.set(run_id)


def get_run_id() -> str:
    """Get the current run ID, or an empty string."""
    return run_id_var.get()
