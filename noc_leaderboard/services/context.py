"""Process-scoped state shared by every request handler."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from sqlalchemy.engine import Engine

from ..core.database import create_db_engine, init_schema
from ..core.logging import get_logger
from .audit import AuditLog
from .broadcast import WebSocketHub
from .entries import EntryService

logger = get_logger(__name__)


@dataclass
class LeaderboardContext:
    """Everything a running server owns.

    Opened once at start-up and closed at shutdown. Closing disposes the
    connection pool; the audit log is simply dropped with the context.
    """

    engine: Engine
    audit_log: AuditLog
    channel: WebSocketHub
    service: EntryService
    mutation_lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    @classmethod
    def open(cls, database_url: str, *, reset: bool = False) -> "LeaderboardContext":
        engine = create_db_engine(database_url)
        init_schema(engine, reset=reset)
        audit_log = AuditLog()
        logger.info("context_opened", backend=engine.dialect.name, reset=reset)
        return cls(
            engine=engine,
            audit_log=audit_log,
            channel=WebSocketHub(),
            service=EntryService(engine, audit_log),
        )

    def close(self) -> None:
        self.engine.dispose()
        logger.info("context_closed", deleted_entries_dropped=len(self.audit_log))


__all__ = ["LeaderboardContext"]
