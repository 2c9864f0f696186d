"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    HOST,
    LOG_FORMAT,
    LOG_LEVEL,
    PORT,
    RequestContextMiddleware,
    setup_logging,
)
from .services import LeaderboardContext


def create_app(database_url: Optional[str] = None, *, reset: Optional[bool] = None) -> FastAPI:
    """Build the application.

    ``database_url`` and ``reset`` override ``DATABASE_URL`` / ``DB_RESET``;
    tests use them to run against an in-memory database.
    """

    setup_logging(level=LOG_LEVEL, format=LOG_FORMAT)
    url = database_url or DATABASE_URL
    drop_tables = DB_RESET if reset is None else reset

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        context = LeaderboardContext.open(url, reset=drop_tables)
        app.state.context = context
        try:
            yield
        finally:
            context.close()

    app = FastAPI(title="NOC Leaderboard API", version="0.3.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )
    app.add_middleware(RequestContextMiddleware)

    register_routes(app)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("noc_leaderboard.app:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
