"""Resolver configuration.

ResolverConfig is a Pydantic model so that settings coming from application
config files are validated before they reach the resolver.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ResolverConfig(BaseModel):
    """Configuration for field resolution."""

    model_config = ConfigDict(frozen=True)

    # Accept get_x / is_x / set_x in addition to getX / isX / setX
    snake_case: bool = True
    # Treat Optional[T] as supported whenever T is
    allow_optional: bool = True
    extra_scalar_types: tuple[type, ...] = ()
