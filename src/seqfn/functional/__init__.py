"""Functional primitives for seqfn.

This module provides higher-order operations over ordered sequences:
selection, quantifiers, search, transformation and aggregation. Utilities are
stateless and side-effect-free so they can be composed into pipelines.
"""

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
]
