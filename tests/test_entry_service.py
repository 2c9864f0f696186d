"""Tests for the entry mutation service."""

import asyncio
from datetime import datetime, timezone

import pytest
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from noc_leaderboard.models import EntryStatus
from noc_leaderboard.services import (
    AuditLog,
    EntryService,
    NotFoundError,
    StoreError,
    ValidationError,
)


def run(coro):
    return asyncio.run(coro)


class TestCreate:
    def test_assigns_id_and_defaults_status(self, service: EntryService) -> None:
        entry = run(service.create("Alice", "printer jam"))

        assert entry.id == 1
        assert entry.status == EntryStatus.pending
        assert entry.created_at is not None

    def test_explicit_status_is_kept(self, service: EntryService) -> None:
        entry = run(service.create("Bob", "vpn down", "active"))
        assert entry.status == EntryStatus.active

    def test_strips_whitespace(self, service: EntryService) -> None:
        entry = run(service.create("  Alice ", " printer jam\n"))
        assert entry.name == "Alice"
        assert entry.text == "printer jam"

    @pytest.mark.parametrize(
        "name,text", [("", "printer jam"), ("Alice", "   "), (None, "x")]
    )
    def test_blank_fields_rejected(self, service: EntryService, name, text) -> None:
        with pytest.raises(ValidationError):
            run(service.create(name, text))

    def test_unknown_status_rejected(self, service: EntryService) -> None:
        with pytest.raises(ValidationError, match="status must be one of"):
            run(service.create("Alice", "printer jam", "closed"))

    def test_new_entry_is_listed_first(self, service: EntryService) -> None:
        run(service.create("Alice", "printer jam"))
        newest = run(service.create("Bob", "vpn down"))

        listed = run(service.list_entries())

        assert [entry.id for entry in listed] == [newest.id, 1]


class TestUpdate:
    def test_changes_fields_but_not_id_or_created_at(self, service: EntryService) -> None:
        created = run(service.create("Alice", "printer jam"))

        updated = run(service.update(created.id, "Alice", "printer fixed", "active"))

        assert updated.id == created.id
        assert updated.text == "printer fixed"
        assert updated.status == EntryStatus.active
        assert updated.created_at == created.created_at

    def test_missing_status_keeps_stored_value(self, service: EntryService) -> None:
        created = run(service.create("Alice", "printer jam", "active"))

        updated = run(service.update(created.id, "Alice", "toner low"))

        assert updated.status == EntryStatus.active

    def test_unknown_id_raises_not_found(self, service: EntryService) -> None:
        with pytest.raises(NotFoundError):
            run(service.update(42, "Alice", "printer jam", "active"))

    def test_get_unknown_id_raises_not_found(self, service: EntryService) -> None:
        with pytest.raises(NotFoundError):
            run(service.get(42))


class TestDelete:
    def test_moves_snapshot_into_audit_log(
        self, service: EntryService, audit_log: AuditLog
    ) -> None:
        created = run(service.create("Alice", "printer jam"))
        before = datetime.now(timezone.utc)

        snapshot = run(service.delete(created.id))

        assert run(service.list_entries()) == []
        assert audit_log.list_all() == [snapshot]
        assert snapshot.id == created.id
        assert snapshot.name == "Alice"
        assert snapshot.text == "printer jam"
        assert snapshot.status == EntryStatus.pending
        assert snapshot.date_deleted >= before

    def test_second_delete_is_not_found_and_logs_once(
        self, service: EntryService, audit_log: AuditLog
    ) -> None:
        created = run(service.create("Alice", "printer jam"))
        run(service.delete(created.id))

        with pytest.raises(NotFoundError):
            run(service.delete(created.id))

        assert len(audit_log) == 1

    def test_deleted_entries_in_deletion_order(self, service: EntryService) -> None:
        first = run(service.create("Alice", "printer jam"))
        second = run(service.create("Bob", "vpn down"))

        run(service.delete(second.id))
        run(service.delete(first.id))

        assert [snapshot.id for snapshot in service.deleted_entries()] == [
            second.id,
            first.id,
        ]


class TestStoreFailures:
    def test_store_errors_are_wrapped(self, service: EntryService, engine: Engine) -> None:
        SQLModel.metadata.drop_all(engine)

        with pytest.raises(StoreError) as excinfo:
            run(service.list_entries())

        assert excinfo.value.message == "Error fetching leaderboard data"
        assert "no such table" not in excinfo.value.message

    def test_failed_delete_leaves_audit_log_untouched(
        self, service: EntryService, engine: Engine, audit_log: AuditLog
    ) -> None:
        SQLModel.metadata.drop_all(engine)

        with pytest.raises(StoreError):
            run(service.delete(1))

        assert len(audit_log) == 0
