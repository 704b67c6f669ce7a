"""Method and type descriptors.

Frozen value objects describing the methods of a type. They are produced by
a TypeDescriptorProvider or registered explicitly, and they are the only view
of a type the resolver ever sees.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from persist_bind.annotations import Column, NoColumn
from persist_bind.core.types import NoneType, type_name

UNKNOWN: Any = inspect.Parameter.empty


@dataclass(frozen=True)
class MethodDescriptor:
    """A single method of a described type.

    ``parameter_types`` excludes the receiver. Types that could not be
    determined are ``UNKNOWN``; a return type of ``NoneType`` means void.

    ``accessible`` can be False only for explicitly registered methods or
    underscore-prefixed ones. Introspected accessors never start with an
    underscore, so for class targets it is always True.
    """

    name: str
    parameter_types: tuple[Any, ...] = ()
    return_type: Any = UNKNOWN
    column: Column | None = None
    no_column: NoColumn | None = None
    accessible: bool = True
    function: Callable[..., Any] | None = field(default=None, compare=False, repr=False)

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_types)

    @property
    def is_void(self) -> bool:
        return self.return_type is NoneType

    @property
    def signature(self) -> str:
        params = ", ".join(type_name(tp) for tp in self.parameter_types)
        return f"{self.name}({params}) -> {type_name(self.return_type)}"

    def make_accessible(self) -> MethodDescriptor:
        """Return an accessible copy. Idempotent."""
        if self.accessible:
            return self
        return replace(self, accessible=True)

    def invoke(self, target: Any, *args: Any) -> Any:
        """Call the method on *target*."""
        if self.function is not None:
            return self.function(target, *args)
        return getattr(target, self.name)(*args)

    def __str__(self) -> str:
        return self.signature


@dataclass(frozen=True)
class TypeDescriptor:
    """The introspected view of a type: its name and ordered methods.

    Several methods may share a name (overloads) when registered explicitly.
    """

    name: str
    methods: tuple[MethodDescriptor, ...] = ()
    target: type | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_methods(
        cls,
        name: str,
        methods: Iterable[MethodDescriptor],
        target: type | None = None,
    ) -> TypeDescriptor:
        """Explicitly register a type schema."""
        return cls(name=name, methods=tuple(methods), target=target)
