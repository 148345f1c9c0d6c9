from dataclasses import dataclass, replace
from typing import Generic, Iterator, TypeVar

from .hashing import hash_string
from .shared import trace_growth


INITIAL_CAPACITY = 16
LOAD_FACTOR = 0.8

V = TypeVar("V")


@dataclass(frozen=True)
class Entry(Generic[V]):
    key: str
    hash: int
    value: V | None = None


@dataclass(frozen=True)
class Location:
    bucket: int
    slot: int | None

    @property
    def found(self) -> bool:
        return self.slot is not None


@dataclass(frozen=True)
class Found(Generic[V]):
    value: V


@dataclass(frozen=True)
class NotFound:
    pass


class Table(Generic[V]):
    """Separate-chaining hash table keyed by strings.

    Capacity is the number of buckets and starts at ``initial_capacity``.
    Before a new key is added, the table grows to the next power of two if
    ``size + 1`` would exceed ``capacity * load_factor``. Every entry is
    then rehashed into a fresh bucket list, which replaces the old one in a
    single assignment.
    """

    def __init__(
        self, initial_capacity: int = INITIAL_CAPACITY, load_factor: float = LOAD_FACTOR
    ) -> None:
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")
        if not load_factor > 0:
            raise ValueError(f"load_factor must be positive, got {load_factor}")

        self._initial_capacity = initial_capacity
        self._load_factor = load_factor
        self.clear()

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def capacity(self) -> int:
        return len(self._buckets)

    def size(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Entry[V]]:
        for bucket in self._buckets:
            yield from bucket

    def locate(self, key: str) -> Location:
        index = hash_string(key) % len(self._buckets)
        for slot, entry in enumerate(self._buckets[index]):
            if entry.key == key:
                return Location(index, slot)
        return Location(index, None)

    def contains(self, key: str) -> bool:
        return self.locate(key).found

    def lookup(self, key: str) -> Found[V] | NotFound:
        location = self.locate(key)
        if location.slot is None:
            return NotFound()
        return Found(self._buckets[location.bucket][location.slot].value)

    def insert(self, key: str, value: V | None = None) -> bool:
        location = self.locate(key)
        if location.slot is not None:
            chain = self._buckets[location.bucket]
            chain[location.slot] = replace(chain[location.slot], value=value)
            return False

        hash = hash_string(key)
        if self.ensure_capacity():
            index = hash % len(self._buckets)
        else:
            index = location.bucket

        self._buckets[index].append(Entry(key, hash, value))
        self._count += 1
        return True

    def remove(self, key: str) -> bool:
        location = self.locate(key)
        if location.slot is None:
            return False

        del self._buckets[location.bucket][location.slot]
        self._count -= 1
        return True

    def ensure_capacity(self) -> bool:
        old_capacity = len(self._buckets)
        if self._count + 1 <= old_capacity * self._load_factor:
            return False

        # 2 ** (floor(log2(C)) + 1)
        capacity = 1 << old_capacity.bit_length()
        buckets: list[list[Entry[V]]] = [[] for _ in range(capacity)]
        for bucket in self._buckets:
            for entry in bucket:
                buckets[entry.hash % capacity].append(entry)

        self._buckets = buckets
        trace_growth(
            "== grow {0:d} -> {1:d} ({2:d} entries) ==\n",
            old_capacity,
            capacity,
            self._count,
        )
        return True

    def entries(self) -> list[Entry[V]]:
        return list(self)

    def bucket(self, index: int) -> tuple[Entry[V], ...]:
        return tuple(self._buckets[index])

    def add_all(self, from_t: "Table[V]"):
        for entry in from_t:
            self.insert(entry.key, entry.value)

    def clear(self):
        self._count = 0
        self._buckets: list[list[Entry[V]]] = [
            [] for _ in range(self._initial_capacity)
        ]
