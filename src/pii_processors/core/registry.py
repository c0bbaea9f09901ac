"""
Processor registry

Maps processor names to processor functions. A catalog is built once,
frozen, and then only read.
"""

from types import MappingProxyType
from typing import Mapping

from pii_processors.core import processors
from pii_processors.core.processors import Processor
from pii_processors.errors import RegistryFrozenError, UnknownProcessorError


DEFAULT_PROCESSOR = "Identity"


class ProcessorRegistry:
    """Name to processor dispatch table.

    Example:
        >>> registry = build_default_registry()
        >>> registry.lookup("Identity") is processors.process_identity
        True
        >>> "Nope" in registry
        False
    """

    def __init__(self) -> None:
        self._processors: dict[str, Processor] = {}
        self._frozen = False

    def register(self, name: str, processor: Processor) -> None:
        """Register a processor. The last registration for a name wins.

        Raises:
            ValueError: If name is empty.
            RegistryFrozenError: If the registry has been frozen.
        """
        if not name:
            raise ValueError("Processor name cannot be empty")
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {name!r}: registry is frozen")
        self._processors[name] = processor

    def lookup(self, name: str) -> Processor:
        """Get a processor by name.

        Raises:
            UnknownProcessorError: If the name is not registered.
        """
        try:
            return self._processors[name]
        except KeyError:
            raise UnknownProcessorError(name) from None

    def freeze(self) -> "ProcessorRegistry":
        """Reject further registrations."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def catalog(self) -> Mapping[str, Processor]:
        """Read-only view of the name to processor mapping."""
        return MappingProxyType(self._processors)

    def names(self) -> list[str]:
        return sorted(self._processors)

    def __contains__(self, name: object) -> bool:
        return name in self._processors

    def __len__(self) -> int:
        return len(self._processors)

    def __repr__(self) -> str:
        return f"ProcessorRegistry(processors={len(self._processors)}, frozen={self._frozen})"


# Processor name -> implementation. A processor must be listed here to be
# reachable through the default catalog.
DEFAULT_PROCESSORS: dict[str, Processor] = {
    "AlphaNumericScrambler": processors.process_alphanumeric_scrambler,
    "FakeStreetAddress": processors.process_street_address,
    "FakeCity": processors.process_city,
    "FakeEmailAddress": processors.process_email_address,
    "FakeFirstName": processors.process_first_name,
    "FakeFullName": processors.process_full_name,
    "FakeLastName": processors.process_last_name,
    "FakePhoneNumber": processors.process_phone_number,
    "FakeState": processors.process_state,
    "FakeUsername": processors.process_username,
    "FakeZip": processors.process_zip,
    "Identity": processors.process_identity,
    "RandomDate": processors.process_random_date,
    "RandomUUID": processors.process_random_uuid,
    "ScrubString": processors.process_scrub_string,
}


def build_default_registry(*, freeze: bool = True) -> ProcessorRegistry:
    """Build a catalog with every built-in processor.

    Args:
        freeze: Freeze the registry before returning it. Pass False to add
            custom processors, then call ``freeze()``.
    """
    registry = ProcessorRegistry()
    for name, processor in DEFAULT_PROCESSORS.items():
        registry.register(name, processor)
    if freeze:
        registry.freeze()
    return registry
