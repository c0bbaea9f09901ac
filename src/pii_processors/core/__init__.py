"""Core modules for column value anonymization."""

from pii_processors.core.anonymizer import ColumnAnonymizer
from pii_processors.core.consistency import ConsistencyStore
from pii_processors.core.dates import days_in_month, is_leap_year, randomize_date
from pii_processors.core.metadata import ColumnMetadata, KeyedColumn, composite_key
from pii_processors.core.processors import Processor, ProcessorContext, scrub_string
from pii_processors.core.random_source import RandomSource
from pii_processors.core.registry import (
    DEFAULT_PROCESSOR,
    DEFAULT_PROCESSORS,
    ProcessorRegistry,
    build_default_registry,
)
from pii_processors.core.scrambler import scramble_string
from pii_processors.core.similarity import generate_similar, similarity
from pii_processors.core.synthetic import SyntheticValueSupplier

__all__ = [
    "ColumnAnonymizer",
    "ConsistencyStore",
    "ColumnMetadata",
    "KeyedColumn",
    "composite_key",
    "Processor",
    "ProcessorContext",
    "RandomSource",
    "SyntheticValueSupplier",
    # Registry
    "DEFAULT_PROCESSOR",
    "DEFAULT_PROCESSORS",
    "ProcessorRegistry",
    "build_default_registry",
    # Transformations
    "days_in_month",
    "is_leap_year",
    "randomize_date",
    "scramble_string",
    "scrub_string",
    "generate_similar",
    "similarity",
]
