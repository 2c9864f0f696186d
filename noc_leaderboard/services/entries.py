"""Create, read, update and delete operations over leaderboard entries."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, TypeVar

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from starlette.concurrency import run_in_threadpool

from ..core.logging import get_logger
from ..core.time import utcnow
from ..models import DeletedEntry, Entry, EntryStatus
from .audit import AuditLog
from .errors import NotFoundError, StoreError, ValidationError

logger = get_logger(__name__)

T = TypeVar("T")

_STORE_MESSAGES = {
    "list": "Error fetching leaderboard data",
    "get": "Error fetching entry",
    "create": "Error adding new entry",
    "update": "Error updating entry",
    "delete": "Error deleting entry",
}


def _require_text(field: str, value: Optional[str]) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} is required")
    return cleaned


def _coerce_status(value: Any) -> Optional[EntryStatus]:
    if value is None:
        return None
    try:
        return EntryStatus(value)
    except ValueError:
        allowed = ", ".join(status.value for status in EntryStatus)
        raise ValidationError(f"status must be one of: {allowed}") from None


class EntryService:
    """Mutation service over the entries table.

    Store access runs in the threadpool so callers only suspend while the
    database is working. Deleting an entry also appends its snapshot to the
    audit log before the call returns. Serialising concurrent mutations is
    the caller's job (see ``LeaderboardContext.mutation_lock``).
    """

    def __init__(self, engine: Engine, audit_log: AuditLog) -> None:
        self._engine = engine
        self._audit_log = audit_log

    def _session(self) -> Session:
        return Session(self._engine, expire_on_commit=False)

    async def _call(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        try:
            return await run_in_threadpool(func, *args)
        except SQLAlchemyError as exc:
            logger.error("store_error", operation=operation, error=str(exc))
            raise StoreError(_STORE_MESSAGES[operation]) from exc

    # Reads -----------------------------------------------------------------

    def _select_all(self) -> List[Entry]:
        with self._session() as session:
            return list(session.exec(select(Entry).order_by(Entry.id.desc())).all())

    def _select_one(self, entry_id: int) -> Entry:
        with self._session() as session:
            entry = session.get(Entry, entry_id)
            if not entry:
                raise NotFoundError("Entry not found")
            return entry

    async def list_entries(self) -> List[Entry]:
        """All entries, most recent (highest id) first."""

        return await self._call("list", self._select_all)

    async def get(self, entry_id: int) -> Entry:
        return await self._call("get", self._select_one, entry_id)

    def deleted_entries(self) -> List[DeletedEntry]:
        """Snapshots of deleted entries in the order they were deleted."""

        return self._audit_log.list_all()

    # Mutations -------------------------------------------------------------

    def _insert(self, name: str, text: str, status: EntryStatus) -> Entry:
        with self._session() as session:
            entry = Entry(name=name, text=text, status=status)
            session.add(entry)
            session.commit()
            session.refresh(entry)
            return entry

    def _apply_update(
        self, entry_id: int, name: str, text: str, status: Optional[EntryStatus]
    ) -> Entry:
        with self._session() as session:
            entry = session.get(Entry, entry_id)
            if not entry:
                raise NotFoundError("Entry not found")
            entry.name = name
            entry.text = text
            if status is not None:
                entry.status = status
            session.add(entry)
            session.commit()
            session.refresh(entry)
            return entry

    def _remove(self, entry_id: int) -> Entry:
        with self._session() as session:
            entry = session.get(Entry, entry_id)
            if not entry:
                raise NotFoundError("Entry not found")
            session.delete(entry)
            session.commit()
            return entry

    async def create(
        self, name: Optional[str], text: Optional[str], status: Any = None
    ) -> Entry:
        """Insert a new entry; status defaults to pending."""

        clean_name = _require_text("name", name)
        clean_text = _require_text("text", text)
        clean_status = _coerce_status(status) or EntryStatus.pending

        entry = await self._call("create", self._insert, clean_name, clean_text, clean_status)
        logger.info("entry_created", entry_id=entry.id, status=clean_status.value)
        return entry

    async def update(
        self,
        entry_id: int,
        name: Optional[str],
        text: Optional[str],
        status: Any = None,
    ) -> Entry:
        """Replace name/text (and status when given); id and created_at never change."""

        clean_name = _require_text("name", name)
        clean_text = _require_text("text", text)
        clean_status = _coerce_status(status)

        entry = await self._call(
            "update", self._apply_update, entry_id, clean_name, clean_text, clean_status
        )
        logger.info("entry_updated", entry_id=entry_id, status=EntryStatus(entry.status).value)
        return entry

    async def delete(self, entry_id: int) -> DeletedEntry:
        """Remove an entry and record its snapshot in the audit log."""

        entry = await self._call("delete", self._remove, entry_id)
        snapshot = DeletedEntry.from_entry(entry, deleted_at=utcnow())
        self._audit_log.append(snapshot)
        logger.info("entry_deleted", entry_id=entry_id, audit_size=len(self._audit_log))
        return snapshot


__all__ = ["EntryService"]
