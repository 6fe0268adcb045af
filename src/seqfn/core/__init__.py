"""Core types and settings shared by the sequence operations."""

from seqfn.core.types import NOT_FOUND, Entry
from seqfn.core.config import Settings, settings

__all__ = [
    "NOT_FOUND",
    "Entry",
    "Settings",
    "settings",
]
