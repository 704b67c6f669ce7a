"""persist-bind - accessor resolution for getter/setter based persistence."""

from __future__ import annotations

from persist_bind.annotations import Column, NoColumn, column, no_column
from persist_bind.core.config import ResolverConfig
from persist_bind.core.enums import AccessorKind, SkipReason
from persist_bind.core.exceptions import (
    ConflictingAnnotationError,
    ConflictingDirectiveError,
    IncompatibleAccessorsError,
    IntrospectionError,
    MappingError,
    PersistBindError,
)
from persist_bind.core.types import NATIVE_TYPES, is_native_type
from persist_bind.introspection import (
    ClassIntrospector,
    MethodDescriptor,
    TypeDescriptor,
    TypeDescriptorProvider,
)
from persist_bind.mapping import (
    BindingTable,
    ColumnMapping,
    FieldBinding,
    FieldResolver,
    extract_field_name,
    resolve_field_bindings,
)

__all__ = [
    # Resolution
    "FieldResolver",
    "resolve_field_bindings",
    "BindingTable",
    "FieldBinding",
    "ColumnMapping",
    "extract_field_name",
    # Annotations
    "Column",
    "NoColumn",
    "column",
    "no_column",
    # Introspection
    "ClassIntrospector",
    "MethodDescriptor",
    "TypeDescriptor",
    "TypeDescriptorProvider",
    # Config and types
    "ResolverConfig",
    "NATIVE_TYPES",
    "is_native_type",
    # Enums
    "AccessorKind",
    "SkipReason",
    # Exceptions
    "PersistBindError",
    "IntrospectionError",
    "MappingError",
    "ConflictingDirectiveError",
    "ConflictingAnnotationError",
    "IncompatibleAccessorsError",
]
