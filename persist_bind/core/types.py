"""Scalar type support policy.

The resolver only binds fields whose getter returns one of these types.
Callers may swap in their own predicate.
"""

from __future__ import annotations

import datetime
import functools
import inspect
import types
import uuid
from collections.abc import Callable, Collection
from decimal import Decimal
from typing import Any, Union, get_args, get_origin

from persist_bind.core.config import ResolverConfig

NoneType = type(None)

NATIVE_TYPES: frozenset[type] = frozenset(
    {
        bool,
        int,
        float,
        complex,
        str,
        bytes,
        bytearray,
        Decimal,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
    }
)


def _unwrap_optional(tp: Any) -> Any | None:
    """Return T for Optional[T] / T | None, otherwise None."""
    if get_origin(tp) not in (Union, types.UnionType):
        return None
    args = get_args(tp)
    non_null = [arg for arg in args if arg is not NoneType]
    if len(args) == 2 and len(non_null) == 1:
        return non_null[0]
    return None


def is_native_type(
    tp: Any,
    *,
    allow_optional: bool = True,
    extra: Collection[type] = (),
) -> bool:
    """Check if *tp* is a scalar type the persistence layer can store.

    Matching is exact: subclasses of a native type (enums, custom str
    subclasses) must be registered through *extra*.
    """
    if isinstance(tp, type):
        return tp in NATIVE_TYPES or tp in extra
    if allow_optional:
        inner = _unwrap_optional(tp)
        return inner is not None and is_native_type(inner, allow_optional=False, extra=extra)
    return False


def scalar_predicate(config: ResolverConfig) -> Callable[[Any], bool]:
    """Build the supported-type predicate described by *config*."""
    return functools.partial(
        is_native_type,
        allow_optional=config.allow_optional,
        extra=frozenset(config.extra_scalar_types),
    )


def type_name(tp: Any) -> str:
    """Readable name of a type hint, used in signatures and log records."""
    if tp is inspect.Parameter.empty:
        return "?"
    if tp is NoneType:
        return "None"
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp).replace("typing.", "")
