"""Typed exceptions raised by column processors."""

from typing import Optional


class ProcessorError(Exception):
    """Base class for processor failures.

    Attributes:
        processor: Name of the processor that failed, filled in by dispatch.
    """

    processor: Optional[str] = None


class UnknownProcessorError(ProcessorError, KeyError):
    """Raised when a processor name is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name
        self.processor = name

    def __str__(self) -> str:
        return f"Unknown processor: {self.name!r}"


class RegistryFrozenError(ProcessorError, RuntimeError):
    """Raised when registering into a catalog that has been frozen."""


class DateFormatError(ProcessorError, ValueError):
    """Raised when a date value is not a three-part ``YYYY-MM-DD`` string."""

    def __init__(self, message: str, value: str) -> None:
        super().__init__(message)
        self.value = value


class SimilarityExhaustedError(ProcessorError):
    """Raised when no synthetic candidate reached the similarity threshold.

    The message carries the scores only; the original value and the last
    candidate are kept as attributes so callers decide what to log.
    """

    def __init__(
        self,
        *,
        threshold: float,
        last_score: float,
        attempts: int,
        original: str,
        candidate: str,
    ) -> None:
        self.threshold = threshold
        self.last_score = last_score
        self.attempts = attempts
        self.original = original
        self.candidate = candidate
        super().__init__(
            f"Jaro-Winkler: {last_score:.4f} < {threshold:.4f} after {attempts} attempts"
        )


class UUIDGenerationError(ProcessorError):
    """Raised when the entropy source fails to produce a random UUID."""


class InvalidUUIDError(ProcessorError, ValueError):
    """Raised for unparsable UUID input when strict UUID handling is on."""

    def __init__(self, message: str, value: str) -> None:
        super().__init__(message)
        self.value = value
