"""Logging configuration module for pii-processors."""

from pii_processors.logging.setup import get_logger, get_run_id, set_run_id, setup_logging

__all__ = ["get_logger", "get_run_id", "set_run_id", "setup_logging"]
