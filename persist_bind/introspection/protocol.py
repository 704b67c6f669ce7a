"""Type descriptor provider protocol.

Anything that can turn a target into a TypeDescriptor can feed the
resolver: Python class introspection, a schema registry, generated code.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from persist_bind.introspection.descriptor import TypeDescriptor


@runtime_checkable
class TypeDescriptorProvider(Protocol):
    """Produces type descriptors for resolution."""

    def describe(self, target: Any) -> TypeDescriptor:
        """Enumerate the methods of *target*."""
        ...
