"""Column metadata decorators.

``@column`` and ``@no_column`` attach persistence directives to accessor
functions. Getter and setter are annotated independently; the resolver
reconciles the two.

Example::

    class User:
        @column(name="user_name")
        def get_name(self) -> str: ...

        def set_name(self, value: str) -> None: ...

        @no_column
        def get_display(self) -> str: ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

COLUMN_ATTR = "__persist_column__"
NO_COLUMN_ATTR = "__persist_no_column__"


@dataclass(frozen=True)
class Column:
    """Explicit column directive. Equality is structural."""

    name: str | None = None
    auto_generated: bool = False

    def describe(self) -> str:
        return f"name={self.name!r}, auto_generated={self.auto_generated}"


@dataclass(frozen=True)
class NoColumn:
    """Exclusion directive: the field is never persisted."""


def column(
    name: str | Callable[..., Any] | None = None,
    *,
    auto_generated: bool = False,
) -> Any:
    """Attach a Column directive. Usable bare (``@column``) or called."""
    if callable(name):
        return column()(name)

    annotation = Column(name=name, auto_generated=auto_generated)

    def decorator(func: F) -> F:
        setattr(func, COLUMN_ATTR, annotation)
        return func

    return decorator


def no_column(func: F) -> F:
    """Attach a NoColumn directive."""
    setattr(func, NO_COLUMN_ATTR, NoColumn())
    return func


def column_of(func: Any) -> Column | None:
    """Column directive attached to *func*, if any."""
    return getattr(func, COLUMN_ATTR, None)


def no_column_of(func: Any) -> NoColumn | None:
    """NoColumn directive attached to *func*, if any."""
    return getattr(func, NO_COLUMN_ATTR, None)
