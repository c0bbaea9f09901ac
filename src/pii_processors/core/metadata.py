"""
Column metadata

Identity of the logical source column a value was read from. Only the
parent schema, table and column feed the consistency composite key.
"""

from dataclasses import dataclass
from typing import Optional, Protocol


class KeyedColumn(Protocol):
    """Anything exposing the three parent identifiers."""

    parent_schema: str
    parent_table: str
    parent_column: str


@dataclass(frozen=True)
class ColumnMetadata:
    """Metadata for one column being anonymized.

    Attributes:
        parent_schema: Schema of the value's logical source (e.g. the PK side
            of a foreign key).
        parent_table: Table of the logical source.
        parent_column: Column of the logical source.
        table_schema: Schema the value is read from (log context only).
        table_name: Table the value is read from (log context only).
        column_name: Column the value is read from (log context only).
    """

    parent_schema: str = ""
    parent_table: str = ""
    parent_column: str = ""
    table_schema: str = ""
    table_name: str = ""
    column_name: str = ""

    @property
    def composite_key(self) -> Optional[str]:
        return composite_key(self)

    def describe(self) -> str:
        """Location string for log messages."""
        return ".".join(p for p in (self.table_schema, self.table_name, self.column_name) if p) or "-"


def composite_key(metadata: Optional[KeyedColumn]) -> Optional[str]:
    """Build the ``schema.table.column`` key for a column.

    Returns:
        The composite key, or None when any identifier is missing.
    """
    if metadata is None:
        return None
    schema = getattr(metadata, "parent_schema", "") or ""
    table = getattr(metadata, "parent_table", "") or ""
    column = getattr(metadata, "parent_column", "") or ""
    if not (schema and table and column):
        return None
    return f"{schema}.{table}.{column}"
