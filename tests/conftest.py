"""Shared fixtures: every test gets its own in-memory database."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from noc_leaderboard.app import create_app
from noc_leaderboard.core import create_db_engine, init_schema
from noc_leaderboard.services import AuditLog, EntryService, LeaderboardContext


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_db_engine("sqlite://")
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def audit_log() -> AuditLog:
    return AuditLog()


@pytest.fixture
def service(engine: Engine, audit_log: AuditLog) -> EntryService:
    return EntryService(engine, audit_log)


@pytest.fixture
def app() -> FastAPI:
    return create_app("sqlite://", reset=True)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    # Entering the client runs the lifespan, which opens the context.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def context(client: TestClient) -> LeaderboardContext:
    return client.app.state.context
