"""Prometheus metrics module for pii-processors."""

from pii_processors.metrics.collectors import (
    CONSISTENCY_TABLE_SIZE,
    PROCESSOR_ERRORS,
    SIMILARITY_ATTEMPTS,
    VALUES_PROCESSED,
)

__all__ = [
    "VALUES_PROCESSED",
    "PROCESSOR_ERRORS",
    "SIMILARITY_ATTEMPTS",
    "CONSISTENCY_TABLE_SIZE",
]
