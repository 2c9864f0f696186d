"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_POOL_SIZE,
    DB_RESET,
    HOST,
    LOG_FORMAT,
    LOG_LEVEL,
    PORT,
)
from .database import create_db_engine, init_schema
from .logging import RequestContextMiddleware, get_logger, setup_logging
from .time import isoformat, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_POOL_SIZE",
    "DB_RESET",
    "HOST",
    "LOG_FORMAT",
    "LOG_LEVEL",
    "PORT",
    "RequestContextMiddleware",
    "create_db_engine",
    "get_logger",
    "init_schema",
    "isoformat",
    "setup_logging",
    "utcnow",
]
