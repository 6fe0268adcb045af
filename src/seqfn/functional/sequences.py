"""Higher-order operations over ordered, finite sequences.

Every function in this module takes a sequence and a caller-supplied callback
and derives a result from it without touching the input. Callbacks receive
the element and its zero-based position (the accumulator of :func:`reduce`
additionally receives the running result first).

Operations:
    - **Selection**: :func:`filter`
    - **Quantifiers**: :func:`some`, :func:`every`
    - **Search**: :func:`find`, :func:`find_last`, :func:`find_index`,
      :func:`find_last_index`, :func:`find_entry`, :func:`find_last_entry`
    - **Transformation**: :func:`map`
    - **Aggregation**: :func:`reduce`

Supported inputs are any ``collections.abc.Sequence``, one-dimensional NumPy
arrays and pandas Series. For a Series the position passed to callbacks is the
integer position, never the index label. :func:`filter` and :func:`map` return
a newly allocated container of the same kind for tuples, arrays and Series,
and a new list for everything else.

Note:
    Nothing is raised by the operations themselves. A miss is reported as
    ``None`` by the value searches and as ``NOT_FOUND`` (-1) by the index
    searches. Exceptions raised by a callback propagate unchanged and stop
    the traversal at that element.

    The search functions hand back the element object itself, so mutating a
    mutable result is visible through the input sequence.

Examples:
    >>> from seqfn.functional import sequences as sq
    >>> sq.filter([1, 2, 3, 4, 5], lambda x, i: x % 2 == 0)
    [2, 4]
    >>> sq.find_last_index([1, 2, 3, 4, 5], lambda x, i: x % 2 == 0)
    3
    >>> sq.reduce([1, 2, 3, 4, 5], lambda acc, x, i: acc + x, 0)
    15
"""

import typing as tp

import numpy as np
import pandas as pd

from seqfn.core.types import (
    NOT_FOUND,
    Accumulator,
    Entry,
    Mapper,
    Position,
    Predicate,
    R,
    T,
    U,
)
from seqfn.logger.logger import get_logger

logger = get_logger(__name__)

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

# =============================================================================
# Positional Access
# =============================================================================
# pandas Series index by label, so callbacks always see a positional view.


def _positional(seq: tp.Sequence[T]) -> tp.Sequence[T]:
    if isinstance(seq, pd.Series):
        return seq.array
    return seq


def _rebuild_filtered(seq: tp.Sequence[T], keep: tp.List[bool], items: tp.List[T]):
    if isinstance(seq, pd.Series):
        return seq[np.asarray(keep, dtype=bool)].copy()
    if isinstance(seq, np.ndarray):
        return seq[np.asarray(keep, dtype=bool)]
    if isinstance(seq, tuple):
        return tuple(items)
    return items


def _as_array(items: tp.List[U]) -> np.ndarray:
    """Pack transform results into a 1-D array, one slot per result.

    A typed dtype is used only when NumPy packs the scalars without changing
    any of them; otherwise the results are kept as-is in an object array.
    """
    packed = np.empty(len(items), dtype=object)
    for position, item in enumerate(items):
        packed[position] = item
    if not all(np.isscalar(item) for item in items):
        return packed
    typed = np.asarray(items)
    if typed.ndim != 1 or len(typed) != len(items):
        return packed
    for value, item in zip(typed, items):
        # NaN never equals itself
        if not (value == item or (value != value and item != item)):
            return packed
    return typed


def _rebuild_mapped(seq: tp.Sequence[T], items: tp.List[U]):
    if isinstance(seq, pd.Series):
        return pd.Series(items, index=seq.index.copy(), name=seq.name)
    if isinstance(seq, np.ndarray):
        return _as_array(items)
    if isinstance(seq, tuple):
        return tuple(items)
    return items


# =============================================================================
# Selection And Quantifiers
# =============================================================================


def filter(seq: tp.Sequence[T], predicate: Predicate[T]) -> tp.Sequence[T]:
    """Select the elements for which ``predicate(element, index)`` is truthy.

    Relative order is preserved. The result is always a new container, even
    when every element (or none) is kept.

    Args:
        seq: Input sequence. Not modified.
        predicate: Called once per element, in forward order.

    Returns:
        A new sequence holding the selected elements. Tuples, NumPy arrays and
        pandas Series keep their type (arrays keep their dtype, Series keep
        the labels of the selected rows); other inputs produce a list.

    Example:
        >>> filter((1, 2, 3, 4), lambda x, i: i > 1)
        (3, 4)
    """
    view = _positional(seq)
    keep: tp.List[bool] = []
    items: tp.List[T] = []
    for index, element in enumerate(view):
        selected = bool(predicate(element, index))
        keep.append(selected)
        if selected:
            items.append(element)
    return _rebuild_filtered(seq, keep, items)


def some(seq: tp.Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if at least one element satisfies ``predicate``.

    Stops at the first match. An empty sequence gives False.
    """
    for index, element in enumerate(_positional(seq)):
        if predicate(element, index):
            logger.debug(f"some: matched at index {index}")
            return True
    return False


def every(seq: tp.Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if every element satisfies ``predicate``.

    Stops at the first failure. An empty sequence gives True.
    """
    for index, element in enumerate(_positional(seq)):
        if not predicate(element, index):
            logger.debug(f"every: failed at index {index}")
            return False
    return True


# =============================================================================
# Search
# =============================================================================
# The value and index searches are thin projections of the entry searches,
# so find(S, P) is always S[find_index(S, P)] when there is a match.


def find_entry(seq: tp.Sequence[T], predicate: Predicate[T]) -> tp.Optional[Entry]:
    """Locate the first element satisfying ``predicate``, scanning forward.

    Args:
        seq: Input sequence. Not modified.
        predicate: Called on each element in forward order until it returns
            a truthy value.

    Returns:
        ``Entry(index, value)`` for the first match, or None if nothing
        matches. ``value`` is the element itself, so a match on a ``None``
        element is still distinguishable from a miss.
    """
    for index, element in enumerate(_positional(seq)):
        if predicate(element, index):
            return Entry(index=index, value=element)
    logger.debug("find_entry: no element matched")
    return None


def find_last_entry(seq: tp.Sequence[T], predicate: Predicate[T]) -> tp.Optional[Entry]:
    """Locate the last element satisfying ``predicate``, scanning backward.

    The predicate is called from the final element towards the first and
    receives each element's forward position.

    Returns:
        ``Entry(index, value)`` for the match closest to the end, or None.
    """
    view = _positional(seq)
    for index in range(len(view) - 1, -1, -1):
        element = view[index]
        if predicate(element, index):
            return Entry(index=index, value=element)
    logger.debug("find_last_entry: no element matched")
    return None


def find(seq: tp.Sequence[T], predicate: Predicate[T]) -> tp.Optional[T]:
    """Return the first element satisfying ``predicate``, or None."""
    entry = find_entry(seq, predicate)
    return None if entry is None else entry.value


def find_last(seq: tp.Sequence[T], predicate: Predicate[T]) -> tp.Optional[T]:
    """Return the last element satisfying ``predicate``, or None."""
    entry = find_last_entry(seq, predicate)
    return None if entry is None else entry.value


def find_index(seq: tp.Sequence[T], predicate: Predicate[T]) -> Position:
    """Return the index of the first match, or ``NOT_FOUND`` (-1)."""
    entry = find_entry(seq, predicate)
    return NOT_FOUND if entry is None else entry.index


def find_last_index(seq: tp.Sequence[T], predicate: Predicate[T]) -> Position:
    """Return the index of the last match, or ``NOT_FOUND`` (-1)."""
    entry = find_last_entry(seq, predicate)
    return NOT_FOUND if entry is None else entry.index


# =============================================================================
# Transformation And Aggregation
# =============================================================================


def map(seq: tp.Sequence[T], transform: Mapper[T, U]) -> tp.Sequence[U]:
    """Apply ``transform(element, index)`` to every element.

    Args:
        seq: Input sequence. Not modified.
        transform: Called once per element, in forward order. Its results may
            be of a different type than the input elements.

    Returns:
        A new sequence of the same length where element ``i`` is
        ``transform(seq[i], i)``. Tuples stay tuples and pandas Series become
        a new Series on the same index and name. NumPy arrays become a new
        1-D array: typed when the results are scalars NumPy can hold
        unchanged, an object array otherwise (sequences, ``None``, mixed
        strings and numbers). Other inputs produce a list.

    Example:
        >>> map([1, 2, 3], lambda x, i: x * x)
        [1, 4, 9]
    """
    items = [transform(element, index) for index, element in enumerate(_positional(seq))]
    return _rebuild_mapped(seq, items)


def reduce(seq: tp.Sequence[T], accumulator: Accumulator[R, T], initial: R) -> R:
    """Fold the sequence from left to right.

    Computes ``result = accumulator(result, element, index)`` for each element
    in forward order, starting from ``initial``.

    Args:
        seq: Input sequence. Not modified.
        accumulator: Called with the running result, the element and its
            index.
        initial: Starting value. Returned as-is (the same object) when the
            sequence is empty.

    Returns:
        The final running result.

    Example:
        >>> reduce(["a", "b"], lambda acc, x, i: acc + [(i, x)], [])
        [(0, 'a'), (1, 'b')]
    """
    result = initial
    for index, element in enumerate(_positional(seq)):
        result = accumulator(result, element, index)
    return result

