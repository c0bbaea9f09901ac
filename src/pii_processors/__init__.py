"""
pii-processors: column-level de-identification

Named processors that replace one cell value at a time with a look-alike
synthetic value, a format-preserving scramble, a perturbed date, a mask or
the value itself, with consistent replacements across a run.
"""

__version__ = "0.1.0"

from pii_processors.config.settings import ProcessorSettings
from pii_processors.core.anonymizer import ColumnAnonymizer
from pii_processors.core.consistency import ConsistencyStore
from pii_processors.core.metadata import ColumnMetadata
from pii_processors.core.registry import ProcessorRegistry, build_default_registry
from pii_processors.errors import (
    DateFormatError,
    InvalidUUIDError,
    ProcessorError,
    SimilarityExhaustedError,
    UnknownProcessorError,
    UUIDGenerationError,
)

__all__ = [
    "ColumnAnonymizer",
    "ColumnMetadata",
    "ConsistencyStore",
    "ProcessorRegistry",
    "ProcessorSettings",
    "build_default_registry",
    # Errors
    "ProcessorError",
    "UnknownProcessorError",
    "DateFormatError",
    "SimilarityExhaustedError",
    "UUIDGenerationError",
    "InvalidUUIDError",
]
