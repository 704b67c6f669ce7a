"""Example: column directives and conflicts."""

from persist_bind import (
    ConflictingAnnotationError,
    ConflictingDirectiveError,
    column,
    no_column,
    resolve_field_bindings,
)


class User:
    @column(name="user_id", auto_generated=True)
    def getId(self) -> int:
        return 0

    def setId(self, value: int) -> None:
        pass

    @column(name="user_name")
    def getName(self) -> str:
        return ""

    @column(name="user_name")
    def setName(self, value: str) -> None:
        pass

    @no_column
    def getCachedScore(self) -> float:
        return 0.0

    def setCachedScore(self, value: float) -> None:
        pass


class Broken:
    @column(name="A")
    def getName(self) -> str:
        return ""

    @column(name="B")
    def setName(self, value: str) -> None:
        pass


class Contradictory:
    @no_column
    def getName(self) -> str:
        return ""

    @column
    def setName(self, value: str) -> None:
        pass


def main() -> None:
    table = resolve_field_bindings(User)
    for name, binding in table.items():
        print(f"{name} -> column {binding.column_name!r} ({binding.column})")
    print(f"excluded: {sorted(table.skipped)}")

    for cls in (Broken, Contradictory):
        try:
            resolve_field_bindings(cls)
        except (ConflictingAnnotationError, ConflictingDirectiveError) as e:
            print(f"{cls.__name__}: {e}")


if __name__ == "__main__":
    main()
