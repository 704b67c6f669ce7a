"""Mapping layer - resolve accessor pairs into field bindings."""

from __future__ import annotations

from persist_bind.mapping.binding import BindingTable, FieldBinding
from persist_bind.mapping.collector import CandidateGroup, collect_candidates
from persist_bind.mapping.names import AccessorMatch, extract_field_name, match_accessor
from persist_bind.mapping.protocol import ColumnMapping
from persist_bind.mapping.reconcile import reconcile
from persist_bind.mapping.resolver import FieldResolver, resolve_field_bindings
from persist_bind.mapping.winnow import WinnowResult, winnow

__all__ = [
    "FieldResolver",
    "resolve_field_bindings",
    "BindingTable",
    "FieldBinding",
    "ColumnMapping",
    "CandidateGroup",
    "collect_candidates",
    "WinnowResult",
    "winnow",
    "reconcile",
    "AccessorMatch",
    "extract_field_name",
    "match_accessor",
]
