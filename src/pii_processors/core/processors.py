"""
Named processors

One thin adapter per field type. Every processor has the signature
``(ctx, metadata, value) -> str`` and raises an exception from
``pii_processors.errors`` on failure; there is no partial output.
"""

import re
import uuid
from dataclasses import dataclass, field
from typing import Callable, Optional

from pii_processors.config.settings import ProcessorSettings
from pii_processors.core.consistency import ConsistencyStore
from pii_processors.core.dates import randomize_date
from pii_processors.core.metadata import KeyedColumn, composite_key
from pii_processors.core.random_source import RandomSource
from pii_processors.core.scrambler import scramble_string
from pii_processors.core.similarity import (
    NOMINAL_THRESHOLD,
    STRUCTURED_THRESHOLD,
    generate_similar,
)
from pii_processors.core.synthetic import SyntheticValueSupplier
from pii_processors.errors import InvalidUUIDError
from pii_processors.logging import get_logger


logger = get_logger(__name__)


@dataclass
class ProcessorContext:
    """Run-scoped dependencies handed to every processor call."""

    rng: RandomSource
    supplier: SyntheticValueSupplier
    store: ConsistencyStore
    settings: ProcessorSettings = field(default_factory=ProcessorSettings)

    @classmethod
    def create(
        cls,
        settings: Optional[ProcessorSettings] = None,
        *,
        store: Optional[ConsistencyStore] = None,
        rng: Optional[RandomSource] = None,
    ) -> "ProcessorContext":
        """Build a context from settings, filling in fresh collaborators."""
        settings = settings or ProcessorSettings()
        return cls(
            rng=rng or RandomSource(settings.seed),
            supplier=SyntheticValueSupplier(seed=settings.seed, locale=settings.locale),
            store=store if store is not None else ConsistencyStore(),
            settings=settings,
        )


Processor = Callable[[ProcessorContext, Optional[KeyedColumn], str], str]


def scrub_string(value: str, mask_char: str = "*") -> str:
    """Mask every code point of ``value``."""
    return mask_char * len(value)


def process_alphanumeric_scrambler(
    ctx: ProcessorContext, metadata: Optional[KeyedColumn], value: str
) -> str:
    """Scramble letters and digits, consistently per logical source column.

    Columns with a full parent identity share one mapping, so PK/FK columns
    holding the same value get the same scramble. Unkeyed columns are
    scrambled fresh on every call.

    Example:
        "ABC-1a2bC" -> "PUI-7x9vY"
    """
    key = composite_key(metadata)
    if key is None:
        return scramble_string(value, ctx.rng)
    return ctx.store.get_or_create_alphanumeric(
        key, value, lambda: scramble_string(value, ctx.rng)
    )


def _similar(name: str, field_type: str, default_threshold: float) -> Processor:
    def processor(ctx: ProcessorContext, metadata: Optional[KeyedColumn], value: str) -> str:
        return generate_similar(
            value,
            ctx.settings.threshold_for(name, default_threshold),
            ctx.supplier.get(field_type),
            max_attempts=ctx.settings.similarity_attempts,
        )

    processor.__name__ = f"process_{field_type}"
    processor.__doc__ = (
        f"Return a fake {field_type.replace('_', ' ')} at least "
        f"{default_threshold} Jaro-Winkler similar to the input."
    )
    return processor


process_street_address = _similar("FakeStreetAddress", "street_address", STRUCTURED_THRESHOLD)
process_city = _similar("FakeCity", "city", STRUCTURED_THRESHOLD)
process_email_address = _similar("FakeEmailAddress", "email", STRUCTURED_THRESHOLD)
process_first_name = _similar("FakeFirstName", "first_name", NOMINAL_THRESHOLD)
process_full_name = _similar("FakeFullName", "full_name", STRUCTURED_THRESHOLD)
process_last_name = _similar("FakeLastName", "last_name", NOMINAL_THRESHOLD)
process_phone_number = _similar("FakePhoneNumber", "phone", STRUCTURED_THRESHOLD)
process_state = _similar("FakeState", "state", NOMINAL_THRESHOLD)
process_username = _similar("FakeUsername", "username", NOMINAL_THRESHOLD)
process_zip = _similar("FakeZip", "zip", STRUCTURED_THRESHOLD)


def process_identity(ctx: ProcessorContext, metadata: Optional[KeyedColumn], value: str) -> str:
    """Leave the value unmodified."""
    return value


def process_random_date(ctx: ProcessorContext, metadata: Optional[KeyedColumn], value: str) -> str:
    """Randomize month and day, keeping the year."""
    return randomize_date(value, ctx.rng)


_HEX = "[0-9a-fA-F]"
_HYPHENATED = f"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"

# Canonical, urn:uuid:, braced and 32-digit forms; ASCII hex only
_UUID_PATTERN = re.compile(
    rf"(?i:urn:uuid:)(?P<urn>{_HYPHENATED})"
    rf"|\{{(?P<braced>{_HYPHENATED})\}}"
    rf"|(?P<canonical>{_HYPHENATED})"
    rf"|(?P<compact>{_HEX}{{32}})"
)


def parse_uuid(value: str) -> uuid.UUID:
    """Parse one of the accepted UUID spellings.

    ``uuid.UUID`` alone tolerates misplaced hyphens, repeated braces and
    non-ASCII digits; those are rejected here.

    Raises:
        ValueError: If value is not a well-formed UUID.
    """
    match = _UUID_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError("badly formed UUID string")
    digits = next(group for group in match.groupdict().values() if group)
    return uuid.UUID(digits)


def process_random_uuid(ctx: ProcessorContext, metadata: Optional[KeyedColumn], value: str) -> str:
    """Replace a UUID with a random one, the same replacement every time.

    The mapping is global: an original UUID gets one replacement no matter
    which column it appears in. Unparsable input yields an empty string,
    or InvalidUUIDError when ``strict_uuid`` is set.
    """
    try:
        original = parse_uuid(value)
    except ValueError as e:
        if ctx.settings.strict_uuid:
            raise InvalidUUIDError(f"Unable to parse UUID: {e}", value) from e
        logger.warning(
            "Unparsable UUID replaced with empty string",
            extra={"processor": "RandomUUID", "column": getattr(metadata, "column_name", "") or "-"},
        )
        return ""
    return str(ctx.store.get_or_create_uuid(original, ctx.rng.uuid4))


def process_scrub_string(ctx: ProcessorContext, metadata: Optional[KeyedColumn], value: str) -> str:
    """Replace every character with the mask character. Useful for password fields."""
    return scrub_string(value, ctx.settings.mask_char)
