"""
Random source

Character-set samplers and UUID generation behind one injectable object,
so a run (or a test) can pin every random draw to a seed.
"""

import random
import string
import uuid
from typing import Optional

from pii_processors.errors import UUIDGenerationError


LOWERCASE_SET = string.ascii_lowercase
UPPERCASE_SET = string.ascii_uppercase
NUMERIC_SET = string.digits


class RandomSource:
    """Pluggable source of randomness for processors.

    Wraps a single ``random.Random`` instance. When a seed is given every
    draw (letters, digits, months, UUIDs) is reproducible; without one the
    generator is seeded from OS entropy and UUIDs come from ``uuid.uuid4``.

    Not cryptographically secure.

    Example:
        >>> rng = RandomSource(seed=7)
        >>> rng.lowercase() in LOWERCASE_SET
        True
    """

    def __init__(self, seed: Optional[int] = None, *, rng: Optional[random.Random] = None):
        """Initialize the random source.

        Args:
            seed: Seed for deterministic output.
            rng: A ready ``random.Random`` to draw from instead of creating one.
        """
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def deterministic(self) -> bool:
        """Whether draws are pinned by an explicit seed."""
        return self.seed is not None

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``."""
        return self._rng.randint(low, high)

    def choice(self, charset: str) -> str:
        return charset[self._rng.randrange(len(charset))]

    def lowercase(self) -> str:
        return self.choice(LOWERCASE_SET)

    def uppercase(self) -> str:
        return self.choice(UPPERCASE_SET)

    def digit(self) -> str:
        return self.choice(NUMERIC_SET)

    def uuid4(self) -> uuid.UUID:
        """Generate a random version-4 UUID.

        Raises:
            UUIDGenerationError: If the OS entropy source is unavailable.
        """
        if self.deterministic:
            return uuid.UUID(int=self._rng.getrandbits(128), version=4)
        try:
            return uuid.uuid4()
        except (OSError, NotImplementedError) as e:
            raise UUIDGenerationError(f"Unable to generate random UUID: {e}") from e

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"
