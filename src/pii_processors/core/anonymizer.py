"""
Column anonymizer

Entry point for an external row/column driver. One ``ColumnAnonymizer`` is
one anonymization run: it owns the catalog, the consistency store and the
random source, and passes them explicitly to every processor call.
"""

import secrets
from typing import Iterable, Optional

from pii_processors.config.settings import ProcessorSettings
from pii_processors.core.consistency import ConsistencyStore
from pii_processors.core.metadata import KeyedColumn
from pii_processors.core.processors import ProcessorContext
from pii_processors.core.random_source import RandomSource
from pii_processors.core.registry import ProcessorRegistry, build_default_registry
from pii_processors.errors import ProcessorError, UnknownProcessorError
from pii_processors.logging import get_logger
from pii_processors.logging.setup import run_id_var
from pii_processors.metrics.collectors import (
    CONSISTENCY_TABLE_SIZE,
    PROCESSOR_ERRORS,
    VALUES_PROCESSED,
)


logger = get_logger(__name__)


class ColumnAnonymizer:
    """Dispatches column values to named processors for one run.

    Example:
        >>> anonymizer = ColumnAnonymizer(settings=ProcessorSettings(seed=1))
        >>> anonymizer.dispatch("ScrubString", None, "hunter2")
        '*******'
        >>> from pii_processors.core.metadata import ColumnMetadata
        >>> meta = ColumnMetadata("public", "users", "ssn")
        >>> a = anonymizer.dispatch("AlphaNumericScrambler", meta, "123-45-6789")
        >>> a == anonymizer.dispatch("AlphaNumericScrambler", meta, "123-45-6789")
        True
    """

    def __init__(
        self,
        *,
        registry: Optional[ProcessorRegistry] = None,
        store: Optional[ConsistencyStore] = None,
        rng: Optional[RandomSource] = None,
        settings: Optional[ProcessorSettings] = None,
        run_id: Optional[str] = None,
    ) -> None:
        """Initialize a run.

        Args:
            registry: Processor catalog. Defaults to the frozen built-in catalog.
            store: Consistency tables. Defaults to a fresh, empty store.
            rng: Random source. Defaults to one seeded from ``settings.seed``.
            settings: Run settings. Defaults to ``ProcessorSettings()``.
            run_id: Identifier for log correlation; generated when omitted.
        """
        self.run_id = run_id or secrets.token_hex(8)
        self.settings = settings or ProcessorSettings()
        self.registry = registry if registry is not None else build_default_registry()
        if store is None:
            store = ConsistencyStore(run_id=self.run_id)
        self.context = ProcessorContext.create(self.settings, store=store, rng=rng)

    @property
    def store(self) -> ConsistencyStore:
        return self.context.store

    def dispatch(self, name: str, metadata: Optional[KeyedColumn], value: str) -> str:
        """Anonymize one value with the named processor.

        Args:
            name: Processor name from the catalog.
            metadata: Column identity, or None for an unkeyed value.
            value: The raw cell value.

        Returns:
            The replacement value. Callers persist it only when no exception
            was raised.

        Raises:
            UnknownProcessorError: If name is not in the catalog.
            ProcessorError: Any processor-specific failure.
        """
        token = run_id_var.set(self.run_id)
        try:
            processor = self.registry.lookup(name)
            result = processor(self.context, metadata, value)
        except ProcessorError as e:
            e.processor = name
            # Label values are bounded by the catalog
            label = "<unknown>" if isinstance(e, UnknownProcessorError) else name
            PROCESSOR_ERRORS.labels(processor=label, error_type=type(e).__name__).inc()
            logger.warning(
                f"Processor {name} failed: {e}",
                extra={
                    "processor": name,
                    "error_type": type(e).__name__,
                    "column": _describe(metadata),
                },
            )
            raise
        finally:
            run_id_var.reset(token)

        VALUES_PROCESSED.labels(processor=name).inc()
        self._record_table_sizes()
        return result

    def dispatch_many(
        self,
        name: str,
        metadata: Optional[KeyedColumn],
        values: Iterable[str],
    ) -> list[str]:
        """Anonymize every value of one column, stopping at the first error."""
        results = [self.dispatch(name, metadata, value) for value in values]
        logger.debug(
            "Processed column",
            extra={"processor": name, "count": len(results), "column": _describe(metadata)},
        )
        return results

    def reset(self) -> None:
        """Forget all consistency mappings, starting a clean run."""
        self.store.clear()
        self._record_table_sizes()

    def _record_table_sizes(self) -> None:
        CONSISTENCY_TABLE_SIZE.labels(table="alphanumeric").set(self.store.alphanumeric_size())
        CONSISTENCY_TABLE_SIZE.labels(table="uuid").set(self.store.uuid_size())

    def __repr__(self) -> str:
        return f"ColumnAnonymizer(run_id={self.run_id}, registry={self.registry!r}, store={self.store!r})"


def _describe(metadata: Optional[KeyedColumn]) -> str:
    if metadata is None:
        return "-"
    describe = getattr(metadata, "describe", None)
    if callable(describe):
        return describe()
    return "-"
