from typing import Generic, Iterator

from .debug import dump_table
from .table import INITIAL_CAPACITY, LOAD_FACTOR, Found, NotFound, Table, V


class HashMap(Generic[V]):
    def __init__(
        self, initial_capacity: int = INITIAL_CAPACITY, load_factor: float = LOAD_FACTOR
    ) -> None:
        self._table: Table[V] = Table(initial_capacity, load_factor)

    def __len__(self) -> int:
        return self._table.size()

    def __contains__(self, key: str) -> bool:
        return self._table.contains(key)

    def __iter__(self) -> Iterator[str]:
        for entry in self._table:
            yield entry.key

    def insert(self, key: str, value: V) -> bool:
        return self._table.insert(key, value)

    def get(self, key: str) -> V | None:
        """Value stored under key, or None when absent.

        A stored None looks the same as a missing key; use contains() or
        lookup() when the two must be told apart.
        """
        match self._table.lookup(key):
            case Found(value):
                return value
            case _:
                return None

    def lookup(self, key: str) -> Found[V] | NotFound:
        return self._table.lookup(key)

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

    def keys(self) -> list[str]:
        return [entry.key for entry in self._table]

    def values(self) -> list[V]:
        return [entry.value for entry in self._table]

    def entries(self) -> list[tuple[str, V]]:
        return [(entry.key, entry.value) for entry in self._table]

    def add_all(self, other: "HashMap[V]"):
        for key, value in other.entries():
            self._table.insert(key, value)

    def dump(self, name: str = "hashmap"):
        dump_table(self._table, name)
