"""Database model exports."""

from .entry import DeletedEntry, Entry, EntryCreate, EntryStatus, EntryUpdate

__all__ = [
    "DeletedEntry",
    "Entry",
    "EntryCreate",
    "EntryStatus",
    "EntryUpdate",
]
