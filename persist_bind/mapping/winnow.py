"""Candidate winnowing.

Reduces each CandidateGroup to exactly one getter and one setter, or drops
the field. Each phase produces new tuples; candidate groups are never
modified. When more than one candidate survives a phase the field is
dropped rather than picking one, so the result does not depend on the
order methods were enumerated in.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from persist_bind.core.enums import SkipReason
from persist_bind.introspection.descriptor import MethodDescriptor
from persist_bind.mapping.collector import CandidateGroup


@dataclass(frozen=True)
class WinnowResult:
    """Outcome of winnowing one field."""

    field_name: str
    getter: MethodDescriptor | None = None
    setter: MethodDescriptor | None = None
    skip_reason: SkipReason | None = None
    getter_count: int = 0
    setter_count: int = 0

    @property
    def accepted(self) -> bool:
        return self.skip_reason is None


def filter_getters(
    candidates: tuple[MethodDescriptor, ...],
    is_supported: Callable[[Any], bool],
) -> tuple[MethodDescriptor, ...]:
    """Keep zero-argument, non-void getters returning a supported type."""
    return tuple(
        m
        for m in candidates
        if m.parameter_count == 0 and not m.is_void and is_supported(m.return_type)
    )


def filter_setters(
    candidates: tuple[MethodDescriptor, ...],
    value_type: Any,
) -> tuple[MethodDescriptor, ...]:
    """Keep single-argument setters taking exactly *value_type*."""
    return tuple(
        m for m in candidates if m.parameter_count == 1 and m.parameter_types[0] == value_type
    )


def winnow(group: CandidateGroup, is_supported: Callable[[Any], bool]) -> WinnowResult:
    """Winnow *group* to a single getter/setter pair."""
    getters = filter_getters(group.getters, is_supported)
    if len(getters) != 1:
        return WinnowResult(
            field_name=group.field_name,
            skip_reason=SkipReason.NO_GETTER if not getters else SkipReason.AMBIGUOUS_GETTER,
            getter_count=len(getters),
        )
    getter = getters[0]

    setters = filter_setters(group.setters, getter.return_type)
    if len(setters) != 1:
        return WinnowResult(
            field_name=group.field_name,
            getter=getter,
            skip_reason=SkipReason.NO_SETTER if not setters else SkipReason.AMBIGUOUS_SETTER,
            getter_count=1,
            setter_count=len(setters),
        )

    return WinnowResult(
        field_name=group.field_name,
        getter=getter,
        setter=setters[0],
        getter_count=1,
        setter_count=1,
    )
