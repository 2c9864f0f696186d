"""Database engine construction and schema helpers."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from .config import DB_POOL_SIZE


def create_db_engine(url: str, *, pool_size: int = DB_POOL_SIZE) -> Engine:
    """Build an engine whose pool is shared by every request handler."""

    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, pool_size=pool_size, pool_pre_ping=True)

    if not parsed.database or parsed.database == ":memory:":
        # One shared connection so every session sees the same in-memory db.
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args={"check_same_thread": False})


def init_schema(engine: Engine, *, reset: bool = False) -> None:
    """Create tables, optionally dropping existing ones first."""

    if reset:
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)


__all__ = ["create_db_engine", "init_schema"]
