"""Example: resolve the persistable fields of a class.

Demonstrates get/set and is/set pairs, snake_case accessors and skipped
fields.
"""

import logging
from decimal import Decimal

from persist_bind import FieldResolver


class Order:
    def __init__(self) -> None:
        self._id = 0
        self._total = Decimal("0")
        self._paid = False

    def getId(self) -> int:
        return self._id

    def setId(self, value: int) -> None:
        self._id = value

    def get_total(self) -> Decimal:
        return self._total

    def set_total(self, value: Decimal) -> None:
        self._total = value

    def isPaid(self) -> bool:
        return self._paid

    def setPaid(self, value: bool) -> None:
        self._paid = value

    # Read-only: no setter, so not persisted
    def getSummary(self) -> str:
        return f"Order {self._id}: {self._total}"


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    table = FieldResolver().resolve(Order)

    print(f"Fields of {table.type_name}:")
    for name, binding in table.items():
        print(f"  {name}: {binding.value_type.__name__} via {binding.getter} / {binding.setter}")

    print("Skipped:")
    for name, reason in table.skipped.items():
        print(f"  {name}: {reason.value}")

    # Accessors can be invoked through the bindings
    order = Order()
    table["total"].set(order, Decimal("19.99"))
    print(f"total = {table['total'].get(order)}")


if __name__ == "__main__":
    main()
