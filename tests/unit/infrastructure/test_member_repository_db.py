"""DB member repository tests on in-memory SQLite: unique constraints are the backstop."""

import pytest

from member_registry.domain.exceptions import ConflictError
from member_registry.domain.validators.member_validator import MemberFields
from member_registry.infrastructure.database.member_repository_db import DbMemberRepository


@pytest.fixture
def repository(db_session):
    return DbMemberRepository(db_session)


async def test_add_and_get(repository):
    created = await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    assert created.id is not None

    fetched = await repository.get_by_national_id("30111222")
    assert fetched == created
    assert await repository.get_by_national_id("99999999") is None


async def test_exists_checks(repository):
    await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    assert await repository.exists_by_national_id("30111222") is True
    assert await repository.exists_by_national_id("30111223") is False
    assert await repository.exists_by_membership_number("1001") is True
    assert await repository.exists_by_membership_number("1002") is False


async def test_unique_dni_enforced_by_schema(repository):
    await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    with pytest.raises(ConflictError) as exc:
        await repository.add(MemberFields("1002", "Luis Gomez", "30111222"))
    assert exc.value.field == "dni"
    assert await repository.count() == 1


async def test_unique_membership_number_enforced_by_schema(repository):
    await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    with pytest.raises(ConflictError) as exc:
        await repository.add(MemberFields("1001", "Luis Gomez", "40111222"))
    assert exc.value.field == "nro_afiliado"


async def test_session_usable_after_conflict(repository):
    await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    with pytest.raises(ConflictError):
        await repository.add(MemberFields("1001", "Luis Gomez", "40111222"))
    created = await repository.add(MemberFields("1002", "Luis Gomez", "40111222"))
    assert created.membership_number == "1002"


async def test_update_overwrites_name_and_number(repository):
    created = await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    updated = await repository.update("30111222", "2002", "Ana M. Diaz")
    assert updated.id == created.id
    assert updated.membership_number == "2002"
    assert updated.full_name == "Ana M. Diaz"
    assert (await repository.get_by_national_id("30111222")).membership_number == "2002"


async def test_update_missing_returns_none(repository):
    assert await repository.update("30111222", "2002", "Ana") is None


async def test_update_to_taken_membership_number_is_conflict(repository):
    await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    await repository.add(MemberFields("1002", "Luis Gomez", "40111222"))
    with pytest.raises(ConflictError):
        await repository.update("40111222", "1001", "Luis Gomez")
    assert (await repository.get_by_national_id("40111222")).membership_number == "1002"


async def test_delete(repository):
    await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    assert await repository.delete("30111222") is True
    assert await repository.delete("30111222") is False
    assert await repository.count() == 0


async def test_ids_not_reused_after_delete(repository):
    first = await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    await repository.delete("30111222")
    second = await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    assert second.id > first.id


async def test_add_many_ignoring_conflicts(repository):
    await repository.add(MemberFields("1001", "Ana Diaz", "30111222"))
    inserted = await repository.add_many_ignoring_conflicts(
        [
            MemberFields("1001", "Dup Number", "50000000"),
            MemberFields("1002", "Luis Gomez", "40111222"),
            MemberFields("1003", "Dup Dni", "40111222"),
        ]
    )
    assert inserted == 1
    assert await repository.count() == 2


async def test_add_many_empty(repository):
    assert await repository.add_many_ignoring_conflicts([]) == 0
