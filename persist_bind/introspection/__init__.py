"""Type introspection - describe classes as method descriptors."""

from __future__ import annotations

from persist_bind.introspection.classes import ClassIntrospector, describe_function
from persist_bind.introspection.descriptor import MethodDescriptor, TypeDescriptor
from persist_bind.introspection.protocol import TypeDescriptorProvider

__all__ = [
    "ClassIntrospector",
    "MethodDescriptor",
    "TypeDescriptor",
    "TypeDescriptorProvider",
    "describe_function",
]
