"""Python class introspection.

Describes plain instance methods of a class (own and inherited) using
``inspect`` signatures and evaluated type hints. Static methods, class
methods and properties are not accessors and are left out.
"""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Callable
from typing import Any

from persist_bind.annotations import column_of, no_column_of
from persist_bind.core.exceptions import IntrospectionError
from persist_bind.introspection.descriptor import UNKNOWN, MethodDescriptor, TypeDescriptor

logger = logging.getLogger(__name__)

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def _type_hints(func: Callable[..., Any]) -> dict[str, Any]:
    """Evaluate type hints, returning an empty dict if they don't resolve."""
    try:
        return typing.get_type_hints(func)
    except (AttributeError, NameError, SyntaxError, TypeError) as e:
        logger.debug("Unresolvable type hints on %s: %s", func.__qualname__, e)
        return {}


def describe_function(name: str, func: Callable[..., Any]) -> MethodDescriptor | None:
    """Describe an instance method. Returns None for non-method callables."""
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    params = list(sig.parameters.values())
    # The receiver must be positional
    if not params or params[0].kind not in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    ):
        return None

    hints = _type_hints(func)
    # Variadic parameters count as untyped, so they never match an accessor shape
    parameter_types = tuple(
        UNKNOWN if param.kind in _VARIADIC else hints.get(param.name, UNKNOWN)
        for param in params[1:]
    )

    return MethodDescriptor(
        name=name,
        parameter_types=parameter_types,
        return_type=hints.get("return", UNKNOWN),
        column=column_of(func),
        no_column=no_column_of(func),
        accessible=not name.startswith("_"),
        function=func,
    )


class ClassIntrospector:
    """Default TypeDescriptorProvider for Python classes."""

    def describe(self, target: Any) -> TypeDescriptor:
        if not inspect.isclass(target):
            raise IntrospectionError(repr(target), "expected a class")

        methods: list[MethodDescriptor] = []
        for name in dir(target):
            if name.startswith("__") and name.endswith("__"):
                continue
            try:
                raw = inspect.getattr_static(target, name)
            except AttributeError:
                continue
            if not inspect.isfunction(raw):
                continue
            method = describe_function(name, raw)
            if method is not None:
                methods.append(method)

        return TypeDescriptor.from_methods(target.__qualname__, methods, target=target)
