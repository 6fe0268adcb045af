"""Generic higher-order functions over ordered sequences."""

from seqfn.core.types import NOT_FOUND, Entry
from seqfn.functional.sequences import (
    every,
    filter,
    find,
    find_entry,
    find_index,
    find_last,
    find_last_entry,
    find_last_index,
    map,
    reduce,
    some,
)

__all__ = [
    "filter",
    "some",
    "every",
    "find",
    "find_last",
    "find_index",
    "find_last_index",
    "find_entry",
    "find_last_entry",
    "map",
    "reduce",
    "Entry",
    "NOT_FOUND",
]
