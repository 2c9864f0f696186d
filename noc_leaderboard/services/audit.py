"""In-memory log of entries removed from the leaderboard."""

from __future__ import annotations

from typing import List

from ..models import DeletedEntry


class AuditLog:
    """Append-only, insertion-ordered record of deleted entries.

    Lives for the lifetime of the process only: it starts empty at start-up
    and is discarded at shutdown. Appends are synchronous, so a snapshot is
    visible to readers as soon as ``append`` returns.
    """

    def __init__(self) -> None:
        self._entries: List[DeletedEntry] = []

    def append(self, snapshot: DeletedEntry) -> None:
        self._entries.append(snapshot)

    def list_all(self) -> List[DeletedEntry]:
        """Return every snapshot, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["AuditLog"]
