from .debug import dump_table
from .hashing import hash_string
from .hashmap import HashMap
from .hashset import HashSet
from .shared import set_debug_trace_growth
from .table import (
    INITIAL_CAPACITY,
    LOAD_FACTOR,
    Entry,
    Found,
    Location,
    NotFound,
    Table,
)

__all__ = [
    "INITIAL_CAPACITY",
    "LOAD_FACTOR",
    "Entry",
    "Found",
    "HashMap",
    "HashSet",
    "Location",
    "NotFound",
    "Table",
    "dump_table",
    "hash_string",
    "set_debug_trace_growth",
]
