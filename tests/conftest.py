"""Shared test fixtures."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from persist_bind.annotations import Column, NoColumn
from persist_bind.introspection.descriptor import UNKNOWN, MethodDescriptor
from persist_bind.mapping.resolver import FieldResolver


@pytest.fixture
def resolver() -> FieldResolver:
    """Resolver with default configuration."""
    return FieldResolver()


@pytest.fixture
def make_method():
    """Helper to build method descriptors for explicitly registered types.

    Usage:
        make_method("getName", returns=str)
        make_method("setName", int, column=Column(name="n"))
    """

    def _make(
        name: str,
        *params: Any,
        returns: Any = None,
        column: Column | None = None,
        excluded: bool = False,
        accessible: bool = True,
    ) -> MethodDescriptor:
        if returns is None:
            returns = type(None) if name.startswith("set") else UNKNOWN
        return MethodDescriptor(
            name=name,
            parameter_types=tuple(params),
            return_type=returns,
            column=column,
            no_column=NoColumn() if excluded else None,
            accessible=accessible,
        )

    return _make


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture persist_bind debug records."""
    caplog.set_level(logging.DEBUG, logger="persist_bind")
    return caplog
