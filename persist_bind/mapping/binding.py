"""Binding table.

The read-only result of resolving a type: field name -> FieldBinding.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from persist_bind.annotations import Column
from persist_bind.core.enums import SkipReason
from persist_bind.introspection.descriptor import MethodDescriptor


@dataclass(frozen=True)
class FieldBinding:
    """A persistable field backed by exactly one getter and one setter."""

    field_name: str
    getter: MethodDescriptor
    setter: MethodDescriptor
    value_type: Any
    column: Column | None = None

    @property
    def column_name(self) -> str:
        """Explicit column name if annotated, otherwise the field name."""
        if self.column is not None and self.column.name:
            return self.column.name
        return self.field_name

    def get(self, target: Any) -> Any:
        """Read the field from *target* through its getter."""
        return self.getter.invoke(target)

    def set(self, target: Any, value: Any) -> None:
        """Write *value* to *target* through its setter."""
        self.setter.invoke(target, value)


class BindingTable(Mapping[str, FieldBinding]):
    """Field bindings of one type.

    Built once per resolution and immutable afterwards. Iteration follows
    sorted field names. Two tables compare equal when they bind the same
    fields to the same accessors, types and annotations.

    Args:
        type_name: Name of the resolved type.
        bindings: Field bindings to expose.
        skipped: Fields left out, with the reason.
    """

    def __init__(
        self,
        type_name: str,
        bindings: Mapping[str, FieldBinding],
        skipped: Mapping[str, SkipReason] | None = None,
    ) -> None:
        self._type_name = type_name
        self._bindings = MappingProxyType(dict(sorted(bindings.items())))
        self._skipped = MappingProxyType(dict(sorted((skipped or {}).items())))

    @property
    def type_name(self) -> str:
        return self._type_name

    @property
    def field_names(self) -> list[str]:
        """All bound field names, sorted alphabetically."""
        return list(self._bindings)

    @property
    def skipped(self) -> Mapping[str, SkipReason]:
        """Candidate fields that were not bound, with the reason."""
        return self._skipped

    def getter_for_column(self, column_name: str) -> MethodDescriptor | None:
        """Getter bound under *column_name*, or None."""
        binding = self._bindings.get(column_name)
        return binding.getter if binding is not None else None

    def setter_for_column(self, column_name: str) -> MethodDescriptor | None:
        """Setter bound under *column_name*, or None."""
        binding = self._bindings.get(column_name)
        return binding.setter if binding is not None else None

    def types(self) -> dict[str, Any]:
        """Declared value type per field."""
        return {name: b.value_type for name, b in self._bindings.items()}

    def annotations(self) -> dict[str, Column | None]:
        """Reconciled Column annotation per field."""
        return {name: b.column for name, b in self._bindings.items()}

    def __getitem__(self, field_name: str) -> FieldBinding:
        return self._bindings[field_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"BindingTable({self._type_name!r}, fields={self.field_names})"
