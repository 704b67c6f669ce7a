"""Contract tests for provider and mapping protocol compliance."""

from __future__ import annotations

from persist_bind.introspection.classes import ClassIntrospector
from persist_bind.introspection.descriptor import TypeDescriptor
from persist_bind.introspection.protocol import TypeDescriptorProvider
from persist_bind.mapping.binding import BindingTable
from persist_bind.mapping.protocol import ColumnMapping
from persist_bind.mapping.resolver import FieldResolver


class Item:
    def getName(self) -> str:
        return ""

    def setName(self, value: str) -> None:
        pass


class TestClassIntrospectorProtocol:
    def test_implements_provider_protocol(self) -> None:
        assert isinstance(ClassIntrospector(), TypeDescriptorProvider)

    def test_describe_returns_descriptor(self) -> None:
        assert isinstance(ClassIntrospector().describe(Item), TypeDescriptor)


class TestBindingTableProtocol:
    def test_implements_column_mapping(self) -> None:
        table = FieldResolver().resolve(Item)
        assert isinstance(table, ColumnMapping)

    def test_lookups(self) -> None:
        table: ColumnMapping = FieldResolver().resolve(Item)
        assert table.getter_for_column("name") is not None
        assert table.setter_for_column("name") is not None
        assert table.getter_for_column("missing") is None

    def test_empty_table(self) -> None:
        table = BindingTable("Empty", {})
        assert isinstance(table, ColumnMapping)
        assert table.getter_for_column("anything") is None
