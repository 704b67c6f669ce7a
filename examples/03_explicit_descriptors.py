"""Example: resolve an explicitly registered type schema.

Explicit descriptors can declare overloaded accessors, which Python
classes cannot. Overloads are winnowed by the getter's return type.
"""

from persist_bind import MethodDescriptor, ResolverConfig, TypeDescriptor, resolve_field_bindings

NoneType = type(None)

schema = TypeDescriptor.from_methods(
    "Measurement",
    [
        MethodDescriptor("getValue", (), float),
        MethodDescriptor("setValue", (float,), NoneType),
        MethodDescriptor("setValue", (str,), NoneType),  # discarded overload
        MethodDescriptor("getTags", (), list),
        MethodDescriptor("setTags", (list,), NoneType),
    ],
)


def main() -> None:
    table = resolve_field_bindings(schema)
    print(table, dict(table.skipped))

    # Allow list as a scalar type
    table = resolve_field_bindings(schema, ResolverConfig(extra_scalar_types=(list,)))
    print(table, table.types())


if __name__ == "__main__":
    main()
