"""Accessor and resolution enumerations."""

from __future__ import annotations

from enum import Enum


class AccessorKind(Enum):
    """Name pattern an accessor method was recognized by."""

    IS = "is"
    GET = "get"
    SET = "set"

    @property
    def is_getter(self) -> bool:
        return self is not AccessorKind.SET


class SkipReason(Enum):
    """Why a candidate field was left out of a binding table."""

    NO_GETTER = "no_getter"
    AMBIGUOUS_GETTER = "ambiguous_getter"
    NO_SETTER = "no_setter"
    AMBIGUOUS_SETTER = "ambiguous_setter"
    EXCLUDED = "excluded"
