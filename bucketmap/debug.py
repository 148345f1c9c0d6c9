from .shared import printf
from .table import Entry, Table


def dump_table(table: Table, name: str, with_values: bool = True):
    printf("== {0:s} ==\n", name)
    printf("capacity {0:d}, size {1:d}\n", table.capacity(), table.size())

    for index in range(table.capacity()):
        dump_bucket(table, index, with_values)


def dump_bucket(table: Table, index: int, with_values: bool = True) -> int:
    chain = table.bucket(index)
    if not chain:
        return 0

    printf(
        "{0:04d} {1:s}\n",
        index,
        " -> ".join(format_entry(e, with_values) for e in chain),
    )
    return len(chain)


def format_entry(entry: Entry, with_values: bool = True) -> str:
    if not with_values:
        return repr(entry.key)
    return f"{entry.key!r}: {entry.value!r}"
