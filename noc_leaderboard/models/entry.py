"""Database model and request schemas for leaderboard entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class EntryStatus(str, Enum):
    """Progress of a support entry on the board."""

    active = "active"
    pending = "pending"


class Entry(SQLModel, table=True):
    """One client-support row on the leaderboard."""

    __tablename__ = "entries"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str
    text: str
    status: EntryStatus = ORMField(default=EntryStatus.pending)
    created_at: datetime = ORMField(default_factory=utcnow)


class EntryCreate(SQLModel):
    """Body of ``POST /leaderboard``. Ids are always store-assigned."""

    name: str
    text: str
    status: Optional[EntryStatus] = None


class EntryUpdate(SQLModel):
    """Body of ``PUT /leaderboard/{id}``; omitting status keeps the stored one."""

    name: str
    text: str
    status: Optional[EntryStatus] = None


@dataclass(frozen=True)
class DeletedEntry:
    """Snapshot of an entry taken when it was removed from the board."""

    id: int
    name: str
    text: str
    status: EntryStatus
    created_at: datetime
    date_deleted: datetime

    @classmethod
    def from_entry(cls, entry: Entry, deleted_at: datetime) -> "DeletedEntry":
        return cls(
            id=entry.id,
            name=entry.name,
            text=entry.text,
            status=EntryStatus(entry.status),
            created_at=entry.created_at,
            date_deleted=deleted_at,
        )


__all__ = ["DeletedEntry", "Entry", "EntryCreate", "EntryStatus", "EntryUpdate"]
