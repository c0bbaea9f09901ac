"""
Consistency Store

Remembers replacements so repeated occurrences of the same sensitive token
map to the same output for the lifetime of a run. Two tables:

- alphanumeric: ``{composite_key: {original: scramble}}``, scoped per
  logical source column so PK/FK columns resolve to the same value.
- uuid: ``{original UUID: replacement UUID}``, global across all columns.

Neither table evicts entries; call ``clear()`` between runs.
"""

import json
import threading
import uuid
from typing import Callable, Optional

from pii_processors.logging import get_logger


logger = get_logger(__name__)


class ConsistencyStore:
    """Thread-safe consistency tables for one anonymization run.

    Get-or-create runs under a single lock, so concurrent callers sharing a
    store always see one replacement per original.

    Example:
        >>> store = ConsistencyStore()
        >>> store.get_or_create_alphanumeric("public.users.ssn", "123", lambda: "987")
        '987'
        >>> store.get_or_create_alphanumeric("public.users.ssn", "123", lambda: "555")
        '987'
    """

    def __init__(self, run_id: Optional[str] = None) -> None:
        """Initialize empty tables.

        Args:
            run_id: Optional run identifier, kept for serialization.
        """
        self.run_id = run_id
        self._lock = threading.RLock()

        # {composite_key: {original: scramble}}
        self._alphanumeric: dict[str, dict[str, str]] = {}

        # {original: replacement}
        self._uuids: dict[uuid.UUID, uuid.UUID] = {}

    def get_or_create_alphanumeric(
        self,
        key: str,
        original: str,
        factory: Callable[[], str],
    ) -> str:
        """Return the stored scramble for ``original`` under ``key``.

        Args:
            key: Composite ``schema.table.column`` key.
            original: The raw value.
            factory: Produces a new scramble when none is stored.

        Returns:
            The remembered (or newly stored) replacement.
        """
        with self._lock:
            column = self._alphanumeric.setdefault(key, {})
            scramble = column.get(original)
            if scramble is None:
                scramble = factory()
                column[original] = scramble
            return scramble

    def get_alphanumeric(self, key: str, original: str) -> Optional[str]:
        with self._lock:
            return self._alphanumeric.get(key, {}).get(original)

    def get_or_create_uuid(
        self,
        original: uuid.UUID,
        factory: Callable[[], uuid.UUID],
    ) -> uuid.UUID:
        """Return the stored replacement for ``original``, creating one if new.

        Exceptions raised by ``factory`` propagate and nothing is stored.
        """
        with self._lock:
            replacement = self._uuids.get(original)
            if replacement is None:
                replacement = factory()
                self._uuids[original] = replacement
            return replacement

    def get_uuid(self, original: uuid.UUID) -> Optional[uuid.UUID]:
        with self._lock:
            return self._uuids.get(original)

    def alphanumeric_size(self, key: Optional[str] = None) -> int:
        """Count remembered scrambles, for one key or all keys."""
        with self._lock:
            if key is not None:
                return len(self._alphanumeric.get(key, {}))
            return sum(len(values) for values in self._alphanumeric.values())

    def uuid_size(self) -> int:
        with self._lock:
            return len(self._uuids)

    def keys(self) -> list[str]:
        """Composite keys with at least one remembered value."""
        with self._lock:
            return list(self._alphanumeric.keys())

    def clear(self) -> None:
        """Forget every remembered replacement."""
        with self._lock:
            self._alphanumeric.clear()
            self._uuids.clear()
            logger.debug("Consistency store cleared", extra={"store_run_id": self.run_id})

    def to_dict(self) -> dict:
        """Serialize both tables to a dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization.
        """
        with self._lock:
            return {
                "run_id": self.run_id,
                "alphanumeric": {key: dict(values) for key, values in self._alphanumeric.items()},
                "uuid": {str(k): str(v) for k, v in self._uuids.items()},
            }

    @classmethod
    def from_dict(cls, data: dict) -> "ConsistencyStore":
        """Rebuild a store from ``to_dict()`` output.

        Raises:
            ValueError: If a UUID entry is malformed.
        """
        store = cls(run_id=data.get("run_id"))
        for key, values in data.get("alphanumeric", {}).items():
            for original, scramble in values.items():
                store.get_or_create_alphanumeric(key, original, lambda s=scramble: s)
        for original, replacement in data.get("uuid", {}).items():
            store.get_or_create_uuid(uuid.UUID(original), lambda r=replacement: uuid.UUID(r))
        return store

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> "ConsistencyStore":
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def __len__(self) -> int:
        """Return total number of remembered replacements."""
        with self._lock:
            return self.alphanumeric_size() + len(self._uuids)

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"ConsistencyStore(run_id={self.run_id}, "
                f"alphanumeric={self.alphanumeric_size()}, uuid={len(self._uuids)})"
            )
