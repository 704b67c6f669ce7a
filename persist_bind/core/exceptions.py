"""persist-bind exception hierarchy.

Only directives that actively contradict each other raise. Fields that are
simply not persistable (missing or ambiguous accessors, unsupported types)
are skipped without an error.
"""

from __future__ import annotations

from typing import Any


class PersistBindError(Exception):
    """Base exception for all persist-bind errors."""


# --- Introspection ---


class IntrospectionError(PersistBindError):
    """Raised when a type descriptor cannot be produced for a target."""

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        super().__init__(f"Cannot describe {type_name}: {detail}")


# --- Mapping ---


class MappingError(PersistBindError):
    """Base for field resolution errors.

    Every mapping error aborts resolution for the whole type.
    """

    def __init__(self, type_name: str, field_name: str, message: str) -> None:
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(message)


class ConflictingDirectiveError(MappingError):
    """Raised when an accessor pair carries both NoColumn and Column."""

    def __init__(self, type_name: str, field_name: str) -> None:
        super().__init__(
            type_name,
            field_name,
            f"Field '{field_name}' from class {type_name} has conflicting "
            "NoColumn and Column annotations",
        )


class ConflictingAnnotationError(MappingError):
    """Raised when getter and setter carry unequal Column annotations."""

    def __init__(
        self,
        type_name: str,
        field_name: str,
        getter: str,
        setter: str,
        getter_annotation: Any,
        setter_annotation: Any,
    ) -> None:
        self.getter = getter
        self.setter = setter
        self.getter_annotation = getter_annotation
        self.setter_annotation = setter_annotation
        super().__init__(
            type_name,
            field_name,
            f"Annotations for getter [{getter}] and setter [{setter}] of field "
            f"'{field_name}' in {type_name} differ: "
            f"[{getter_annotation.describe()}] [{setter_annotation.describe()}]",
        )


class IncompatibleAccessorsError(MappingError):
    """Raised when a getter/setter pair disagrees on the value type."""

    def __init__(self, type_name: str, field_name: str, detail: str) -> None:
        self.detail = detail
        super().__init__(
            type_name,
            field_name,
            f"Incompatible accessors for field '{field_name}' in {type_name}: {detail}",
        )
