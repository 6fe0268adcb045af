"""Reusable type definitions for the sequence operations.

Type Aliases:
    Predicate: Callable taking ``(element, index)`` and returning a truth value.
    Mapper: Callable taking ``(element, index)`` and returning a new value.
    Accumulator: Callable taking ``(result, element, index)`` and returning the
        updated result.
    Position: A zero-based index, or ``NOT_FOUND``.

Entry is the explicit optional result of the find family: a match is an
``Entry``, a miss is ``None``. Unlike a bare ``None`` return, an ``Entry``
whose value is ``None`` is still a match.
"""

from typing import Annotated, Any, Callable, TypeVar

import annotated_types as at
from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "T",
    "U",
    "R",
    "Predicate",
    "Mapper",
    "Accumulator",
    "Position",
    "NOT_FOUND",
    "Entry",
]

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

Predicate = Callable[[T, int], Any]
Mapper = Callable[[T, int], U]
Accumulator = Callable[[R, T, int], R]

# Index returned by the index-search functions when nothing matches
NOT_FOUND: int = -1

Position = Annotated[int, at.Ge(NOT_FOUND)]


class Entry(BaseModel):
    """A matched element together with its zero-based position.

    ``value`` is the element object itself, not a copy.
    """

    index: Annotated[int, at.Ge(0)] = Field(..., description="Zero-based position.")
    value: Any = Field(..., description="The matched element.")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
