from typing import Iterator

from .debug import dump_table
from .table import INITIAL_CAPACITY, LOAD_FACTOR, Table


class HashSet:
    def __init__(
        self, initial_capacity: int = INITIAL_CAPACITY, load_factor: float = LOAD_FACTOR
    ) -> None:
        self._table: Table[None] = Table(initial_capacity, load_factor)

    def __len__(self) -> int:
        return self._table.size()

    def __contains__(self, key: str) -> bool:
        return self._table.contains(key)

    def __iter__(self) -> Iterator[str]:
        for entry in self._table:
            yield entry.key

    def insert(self, key: str) -> bool:
        # existing keys are left untouched
        return self._table.insert(key)

    def contains(self, key: str) -> bool:
        return self._table.contains(key)

    def remove(self, key: str) -> bool:
        return self._table.remove(key)

    def size(self) -> int:
        return self._table.size()

    def capacity(self) -> int:
        return self._table.capacity()

    def clear(self):
        self._table.clear()

    def entries(self) -> list[str]:
        return list(self)

    def add_all(self, other: "HashSet"):
        for key in other:
            self._table.insert(key)

    def dump(self, name: str = "hashset"):
        dump_table(self._table, name, with_values=False)
