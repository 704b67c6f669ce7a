"""Column mapping protocol.

Mapping strategies built on top of a BindingTable (table-mapped or
no-table-mapped) expose accessors by column name through this interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from persist_bind.introspection.descriptor import MethodDescriptor


@runtime_checkable
class ColumnMapping(Protocol):
    """Base column mapping protocol."""

    def getter_for_column(self, column_name: str) -> MethodDescriptor | None:
        """Getter for a column, or None if not mapped."""
        ...

    def setter_for_column(self, column_name: str) -> MethodDescriptor | None:
        """Setter for a column, or None if not mapped."""
        ...
