"""Field resolution entry point.

The FieldResolver runs the pipeline for one type:

    collect_candidates -> winnow -> reconcile -> BindingTable

Resolution is synchronous and pure apart from marking chosen accessors
accessible. Fatal mapping errors abort the whole type; no partial table is
ever returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from persist_bind.core.config import ResolverConfig
from persist_bind.core.enums import SkipReason
from persist_bind.core.exceptions import MappingError
from persist_bind.core.types import scalar_predicate, type_name
from persist_bind.introspection.classes import ClassIntrospector
from persist_bind.introspection.descriptor import TypeDescriptor
from persist_bind.introspection.protocol import TypeDescriptorProvider
from persist_bind.mapping.binding import BindingTable, FieldBinding
from persist_bind.mapping.collector import collect_candidates
from persist_bind.mapping.reconcile import reconcile
from persist_bind.mapping.winnow import winnow

logger = logging.getLogger(__name__)


class FieldResolver:
    """Resolves the field bindings of types.

    Args:
        config: Resolver settings. Defaults to ``ResolverConfig()``.
        is_supported: Scalar type predicate. Defaults to the native type
                      policy described by *config*.
        provider: Produces TypeDescriptors from non-descriptor targets.
                  Defaults to ClassIntrospector.
        log: Receives skip and conflict diagnostics. Defaults to the module
             logger.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        *,
        is_supported: Callable[[Any], bool] | None = None,
        provider: TypeDescriptorProvider | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        self._is_supported = is_supported or scalar_predicate(self._config)
        self._provider = provider or ClassIntrospector()
        self._logger = log or logger

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def describe(self, target: type | TypeDescriptor) -> TypeDescriptor:
        if isinstance(target, TypeDescriptor):
            return target
        return self._provider.describe(target)

    def resolve(self, target: type | TypeDescriptor) -> BindingTable:
        """Resolve the field bindings of *target*.

        Args:
            target: A class, or an explicitly registered TypeDescriptor.

        Returns:
            The binding table of all persistable fields.

        Raises:
            MappingError: On conflicting directives or annotations, or
                incompatible accessors.
            IntrospectionError: If *target* cannot be described.
        """
        descriptor = self.describe(target)
        groups = collect_candidates(descriptor.methods, snake_case=self._config.snake_case)

        bindings: dict[str, FieldBinding] = {}
        skipped: dict[str, SkipReason] = {}

        for field_name in sorted(groups):
            result = winnow(groups[field_name], self._is_supported)
            if result.skip_reason is not None:
                self._logger.debug(
                    "Skipping field '%s' of %s: %s (%d getter(s), %d setter(s) left)",
                    field_name,
                    descriptor.name,
                    result.skip_reason.value,
                    result.getter_count,
                    result.setter_count,
                )
                skipped[field_name] = result.skip_reason
                continue

            try:
                binding = reconcile(
                    descriptor.name,
                    field_name,
                    result.getter,  # type: ignore[arg-type]
                    result.setter,  # type: ignore[arg-type]
                )
            except MappingError:
                self._logger.warning(
                    "Conflicting accessors for field '%s' of %s: [%s] [%s]",
                    field_name,
                    descriptor.name,
                    result.getter,
                    result.setter,
                )
                raise

            if binding is None:
                self._logger.debug(
                    "Field '%s' of %s excluded by NoColumn", field_name, descriptor.name
                )
                skipped[field_name] = SkipReason.EXCLUDED
                continue

            self._logger.debug(
                "Bound field '%s' of %s: [%s] / [%s] as %s",
                field_name,
                descriptor.name,
                binding.getter,
                binding.setter,
                type_name(binding.value_type),
            )
            bindings[field_name] = binding

        self._logger.info(
            "Resolved %d field(s) of %s (%d skipped)",
            len(bindings),
            descriptor.name,
            len(skipped),
        )
        return BindingTable(descriptor.name, bindings, skipped)


def resolve_field_bindings(
    target: type | TypeDescriptor,
    config: ResolverConfig | None = None,
    *,
    is_supported: Callable[[Any], bool] | None = None,
    provider: TypeDescriptorProvider | None = None,
) -> BindingTable:
    """Resolve the field bindings of *target* with a one-off FieldResolver."""
    return FieldResolver(config, is_supported=is_supported, provider=provider).resolve(target)
