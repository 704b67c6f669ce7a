"""Annotation reconciliation.

Getter and setter are annotated independently. The pair must agree:

* NoColumn on either side excludes the field, unless a Column is also
  present anywhere on the pair, which is a conflict.
* Column on both sides must be equal.
* Column on one side is adopted as is.
"""

from __future__ import annotations

from persist_bind.annotations import Column
from persist_bind.core.exceptions import (
    ConflictingAnnotationError,
    ConflictingDirectiveError,
    IncompatibleAccessorsError,
)
from persist_bind.core.types import type_name
from persist_bind.introspection.descriptor import MethodDescriptor
from persist_bind.mapping.binding import FieldBinding


def _check_compatible(
    owner: str,
    field_name: str,
    getter: MethodDescriptor,
    setter: MethodDescriptor,
) -> None:
    if setter.parameter_count != 1:
        raise IncompatibleAccessorsError(
            owner,
            field_name,
            f"setter [{setter}] should have a single parameter "
            f"but has {setter.parameter_count}",
        )
    if getter.is_void:
        raise IncompatibleAccessorsError(owner, field_name, f"getter [{getter}] must return a value")
    if getter.return_type != setter.parameter_types[0]:
        raise IncompatibleAccessorsError(
            owner,
            field_name,
            f"getter [{getter}] returns {type_name(getter.return_type)} but setter "
            f"[{setter}] takes {type_name(setter.parameter_types[0])}",
        )


def reconcile(
    owner: str,
    field_name: str,
    getter: MethodDescriptor,
    setter: MethodDescriptor,
) -> FieldBinding | None:
    """Reconcile the directives of a winnowed accessor pair.

    Returns:
        The field binding, or None if the field is excluded by NoColumn.

    Raises:
        ConflictingDirectiveError: NoColumn and Column on the same pair.
        ConflictingAnnotationError: getter and setter Columns differ.
        IncompatibleAccessorsError: the pair disagrees on the value type.
    """
    if getter.no_column is not None or setter.no_column is not None:
        if getter.column is not None or setter.column is not None:
            raise ConflictingDirectiveError(owner, field_name)
        return None

    _check_compatible(owner, field_name, getter, setter)

    annotation: Column | None
    if getter.column is not None and setter.column is not None:
        if getter.column != setter.column:
            raise ConflictingAnnotationError(
                owner,
                field_name,
                getter.signature,
                setter.signature,
                getter.column,
                setter.column,
            )
        annotation = getter.column
    else:
        annotation = getter.column if getter.column is not None else setter.column

    return FieldBinding(
        field_name=field_name,
        getter=getter.make_accessible(),
        setter=setter.make_accessible(),
        value_type=getter.return_type,
        column=annotation,
    )
