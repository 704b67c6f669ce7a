"""Accessor name patterns.

    getTotalCount   -> ("totalCount", GET)
    isValid         -> ("valid", IS)
    set_total_count -> ("total_count", SET)
    toString        -> no match
"""

from __future__ import annotations

from dataclasses import dataclass

from persist_bind.core.enums import AccessorKind

# Checked in order; "is" first so that the length rule uses its own prefix
_PREFIXES: tuple[tuple[str, AccessorKind], ...] = (
    ("is", AccessorKind.IS),
    ("get", AccessorKind.GET),
    ("set", AccessorKind.SET),
)


@dataclass(frozen=True)
class AccessorMatch:
    """A method name recognized as an accessor."""

    field_name: str
    kind: AccessorKind


def match_accessor(name: str, *, snake_case: bool = True) -> AccessorMatch | None:
    """Match *name* against the accessor patterns.

    Args:
        name: A method name.
        snake_case: Strip the underscores separating prefix and field
                    (``get_name`` -> ``name``).

    Returns:
        The field name and pattern kind, or None if *name* is not an accessor.
    """
    for prefix, kind in _PREFIXES:
        if len(name) > len(prefix) and name.startswith(prefix):
            remainder = name[len(prefix) :]
            break
    else:
        return None

    if snake_case and remainder.startswith("_"):
        remainder = remainder.lstrip("_")
        if not remainder:
            return None

    return AccessorMatch(remainder[0].lower() + remainder[1:], kind)


def extract_field_name(name: str, *, snake_case: bool = True) -> str | None:
    """Field name for an accessor method name, or None."""
    match = match_accessor(name, snake_case=snake_case)
    return match.field_name if match is not None else None
