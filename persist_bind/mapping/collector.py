"""Accessor collection.

Groups the methods of a type into per-field getter and setter candidates.
Nothing is filtered here beyond the name patterns.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from persist_bind.introspection.descriptor import MethodDescriptor
from persist_bind.mapping.names import match_accessor


@dataclass(frozen=True)
class CandidateGroup:
    """Raw accessor candidates for one field name."""

    field_name: str
    getters: tuple[MethodDescriptor, ...] = ()
    setters: tuple[MethodDescriptor, ...] = ()


def collect_candidates(
    methods: Iterable[MethodDescriptor],
    *,
    snake_case: bool = True,
) -> dict[str, CandidateGroup]:
    """Group *methods* by field name.

    ``is`` and ``get`` matches are getter candidates, ``set`` matches are
    setter candidates. Methods that match no pattern are skipped.
    """
    getters: dict[str, list[MethodDescriptor]] = {}
    setters: dict[str, list[MethodDescriptor]] = {}

    for method in methods:
        match = match_accessor(method.name, snake_case=snake_case)
        if match is None:
            continue
        getters.setdefault(match.field_name, [])
        setters.setdefault(match.field_name, [])
        if match.kind.is_getter:
            getters[match.field_name].append(method)
        else:
            setters[match.field_name].append(method)

    return {
        name: CandidateGroup(
            field_name=name,
            getters=tuple(getters[name]),
            setters=tuple(setters[name]),
        )
        for name in getters
    }
