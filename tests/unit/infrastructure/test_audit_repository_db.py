"""DB audit repository tests: ordering by timestamp desc, ties by insertion order, limit."""

from datetime import datetime, timedelta, timezone

import pytest

from member_registry.application.member_repository import NewAuditEntry
from member_registry.domain.models.member import AuditAction
from member_registry.infrastructure.database.audit_repository_db import DbAuditRepository

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def _entry(action: AuditAction, dni: str, at: datetime) -> NewAuditEntry:
    return NewAuditEntry(
        action=action,
        national_id=dni,
        full_name="Ana Diaz",
        membership_number="1001",
        timestamp=at,
    )


@pytest.fixture
def repository(db_session):
    return DbAuditRepository(db_session)


async def test_save_assigns_id_and_keeps_utc(repository):
    saved = await repository.save(_entry(AuditAction.ADD, "30111222", T0))
    assert saved.id is not None
    assert saved.action is AuditAction.ADD
    assert saved.timestamp == T0
    assert saved.timestamp.tzinfo is not None


async def test_recent_orders_by_timestamp_desc(repository):
    await repository.save(_entry(AuditAction.ADD, "1", T0))
    await repository.save(_entry(AuditAction.EDIT, "2", T0 + timedelta(minutes=5)))
    await repository.save(_entry(AuditAction.DELETE, "3", T0 + timedelta(minutes=1)))

    entries = await repository.recent(10)

    assert [e.national_id for e in entries] == ["2", "3", "1"]


async def test_recent_ties_broken_by_later_insert_first(repository):
    first = await repository.save(_entry(AuditAction.ADD, "1", T0))
    second = await repository.save(_entry(AuditAction.EDIT, "1", T0))

    entries = await repository.recent(10)

    assert [e.id for e in entries] == [second.id, first.id]


async def test_recent_respects_limit(repository):
    for i in range(5):
        await repository.save(_entry(AuditAction.ADD, str(i), T0 + timedelta(seconds=i)))

    entries = await repository.recent(3)

    assert len(entries) == 3
    assert [e.national_id for e in entries] == ["4", "3", "2"]
