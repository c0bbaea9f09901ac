"""
Similarity-gated generator

Draws synthetic candidates until one is at least ``threshold`` similar to
the original by Jaro-Winkler, keeping replacements shape-plausible while
discarding the real value. See:
https://en.wikipedia.org/wiki/Jaro%E2%80%93Winkler_distance
"""

from typing import Callable

import jellyfish

from pii_processors.errors import SimilarityExhaustedError
from pii_processors.logging import get_logger
from pii_processors.metrics.collectors import SIMILARITY_ATTEMPTS


logger = get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 100

# Thresholds by field shape
NOMINAL_THRESHOLD = 0.4
STRUCTURED_THRESHOLD = 0.5


def similarity(original: str, candidate: str) -> float:
    """Jaro-Winkler similarity in [0, 1] with long-string tolerance."""
    return jellyfish.jaro_winkler_similarity(original, candidate, long_tolerance=True)


def generate_similar(
    original: str,
    threshold: float,
    supplier: Callable[[], str],
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """Return the first supplied candidate similar enough to ``original``.

    Args:
        original: The value being replaced.
        threshold: Minimum accepted similarity, in [0, 1].
        supplier: Zero-argument callable producing a random candidate.
        max_attempts: Number of candidates to draw before giving up.

    Returns:
        The accepted candidate.

    Raises:
        ValueError: If threshold or max_attempts is out of range.
        SimilarityExhaustedError: If ``max_attempts`` candidates all scored
            below ``threshold``.
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Threshold must be between 0.0 and 1.0, got {threshold}")
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    candidate = ""
    score = 0.0
    for attempt in range(1, max_attempts + 1):
        candidate = supplier()
        score = similarity(original, candidate)
        if score >= threshold:
            SIMILARITY_ATTEMPTS.observe(attempt)
            return candidate

    SIMILARITY_ATTEMPTS.observe(max_attempts)
    logger.debug(
        "Similarity budget exhausted",
        extra={"threshold": threshold, "last_score": score, "attempts": max_attempts},
    )
    raise SimilarityExhaustedError(
        threshold=threshold,
        last_score=score,
        attempts=max_attempts,
        original=original,
        candidate=candidate,
    )
