"""Helpers that turn entry objects into API-friendly dicts."""

from __future__ import annotations

from typing import Any, Dict

from ..core.time import isoformat
from ..models import DeletedEntry, Entry, EntryStatus


def _status_value(status: Any) -> str:
    return EntryStatus(status).value


def entry_to_dict(entry: Entry) -> Dict[str, Any]:
    """Serialise a stored entry."""

    return {
        "id": entry.id,
        "name": entry.name,
        "text": entry.text,
        "status": _status_value(entry.status),
        "created_at": isoformat(entry.created_at),
    }


def deleted_entry_to_dict(snapshot: DeletedEntry) -> Dict[str, Any]:
    """Serialise an audit-log snapshot: the entry fields plus ``date_deleted``."""

    return {
        "id": snapshot.id,
        "name": snapshot.name,
        "text": snapshot.text,
        "status": _status_value(snapshot.status),
        "created_at": isoformat(snapshot.created_at),
        "date_deleted": isoformat(snapshot.date_deleted),
    }


__all__ = ["deleted_entry_to_dict", "entry_to_dict"]
