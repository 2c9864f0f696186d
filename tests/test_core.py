"""Tests for configuration, database and logging helpers."""

from datetime import datetime

import pytest
from sqlalchemy import inspect

from noc_leaderboard.core import config
from noc_leaderboard.core.database import create_db_engine, init_schema
from noc_leaderboard.core.logging import SecretRedactor
from noc_leaderboard.core.time import isoformat


class TestConfigHelpers:
    def test_split_csv_drops_blanks(self) -> None:
        assert config._split_csv(" a.com, ,b.com ") == ["a.com", "b.com"]
        assert config._split_csv(None) == []

    def test_unique_keeps_first_occurrence(self) -> None:
        assert config._unique(["a", "b", "a", "c"]) == ["a", "b", "c"]

    def test_env_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAG", "Yes")
        assert config._env_bool("FLAG") is True
        monkeypatch.setenv("FLAG", "0")
        assert config._env_bool("FLAG") is False
        monkeypatch.delenv("FLAG")
        assert config._env_bool("FLAG", default=True) is True

    def test_env_int_rejects_garbage(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POOL", "ten")
        with pytest.raises(RuntimeError, match="POOL must be an integer"):
            config._env_int("POOL", 10)

    def test_dev_origins_allowed(self) -> None:
        assert "http://localhost:3000" in config.ALLOWED_CORS_ORIGINS
        assert "http://localhost:3001" in config.ALLOWED_CORS_ORIGINS


class TestDatabase:
    def test_file_database_creates_parent_dir(self, tmp_path) -> None:
        db_path = tmp_path / "nested" / "app.db"
        engine = create_db_engine(f"sqlite:///{db_path}")
        init_schema(engine)

        assert db_path.parent.is_dir()
        assert "entries" in inspect(engine).get_table_names()
        engine.dispose()

    def test_reset_recreates_tables(self, tmp_path) -> None:
        engine = create_db_engine(f"sqlite:///{tmp_path / 'app.db'}")
        init_schema(engine)
        init_schema(engine, reset=True)
        assert "entries" in inspect(engine).get_table_names()
        engine.dispose()


def test_secret_redactor_masks_nested_keys() -> None:
    redacted = SecretRedactor()(
        None, "info", {"event": "login", "password": "x", "extra": {"token": "y", "ok": 1}}
    )
    assert redacted == {
        "event": "login",
        "password": "[REDACTED]",
        "extra": {"token": "[REDACTED]", "ok": 1},
    }


def test_isoformat_treats_naive_as_utc() -> None:
    assert isoformat(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05+00:00"
    assert isoformat(None) is None
