"""DB-backed member repository. Persists members to the afiliados table."""

from typing import Iterable, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from member_registry.application.exceptions import StorageError
from member_registry.domain.exceptions import ConflictError
from member_registry.domain.models.member import Member
from member_registry.domain.validators.member_validator import MemberFields
from member_registry.infrastructure.database.models import MemberRecord

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _to_member(orm: MemberRecord) -> Member:
    return Member(
        id=orm.id,
        membership_number=orm.nro_afiliado,
        full_name=orm.nombre_completo,
        national_id=orm.dni,
    )


def _conflict_from(error: IntegrityError) -> ConflictError:
    """Map a unique violation to the field that collided."""
    detail = str(error.orig)
    if "dni" in detail:
        return ConflictError("El DNI ya existe", field="dni")
    if "nro_afiliado" in detail:
        return ConflictError("El N° Afiliado ya existe", field="nro_afiliado")
    return ConflictError("El afiliado ya existe")


class DbMemberRepository:
    """Implements MemberRepository over an AsyncSession. Each write commits on its own."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_national_id(self, national_id: str) -> Optional[Member]:
        stmt = select(MemberRecord).where(MemberRecord.dni == national_id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Member lookup failed: {e}") from e
        orm = result.scalar_one_or_none()
        if orm is None:
            return None
        return _to_member(orm)

    async def exists_by_national_id(self, national_id: str) -> bool:
        return await self._exists(MemberRecord.dni == national_id)

    async def exists_by_membership_number(self, membership_number: str) -> bool:
        return await self._exists(MemberRecord.nro_afiliado == membership_number)

    async def _exists(self, clause) -> bool:
        stmt = select(MemberRecord.id).where(clause).limit(1)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Member lookup failed: {e}") from e
        return result.scalar_one_or_none() is not None

    async def add(self, fields: MemberFields) -> Member:
        orm = MemberRecord(
            nro_afiliado=fields.membership_number,
            nombre_completo=fields.full_name,
            dni=fields.national_id,
        )
        self._session.add(orm)
        try:
            await self._session.flush()
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise _conflict_from(e) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise StorageError(f"Member insert failed: {e}") from e
        await self._session.refresh(orm)
        return _to_member(orm)

    async def update(
        self, national_id: str, membership_number: str, full_name: str
    ) -> Optional[Member]:
        stmt = (
            update(MemberRecord)
            .where(MemberRecord.dni == national_id)
            .values(nro_afiliado=membership_number, nombre_completo=full_name)
            .returning(
                MemberRecord.id,
                MemberRecord.nro_afiliado,
                MemberRecord.nombre_completo,
                MemberRecord.dni,
            )
        )
        try:
            result = await self._session.execute(stmt)
            row = result.one_or_none()
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise _conflict_from(e) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise StorageError(f"Member update failed: {e}") from e
        if row is None:
            return None
        return Member(
            id=row.id,
            membership_number=row.nro_afiliado,
            full_name=row.nombre_completo,
            national_id=row.dni,
        )

    async def delete(self, national_id: str) -> bool:
        stmt = delete(MemberRecord).where(MemberRecord.dni == national_id)
        try:
            result = await self._session.execute(stmt)
            deleted = result.rowcount
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise StorageError(f"Member delete failed: {e}") from e
        return deleted > 0

    async def count(self) -> int:
        stmt = select(func.count()).select_from(MemberRecord)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Member count failed: {e}") from e
        return result.scalar_one()

    async def add_many_ignoring_conflicts(self, rows: Iterable[MemberFields]) -> int:
        """
        Insert-if-absent: rows colliding on dni or nro_afiliado, with existing rows
        or with earlier rows of the same batch, are skipped.
        """
        payload = [
            {
                "nro_afiliado": r.membership_number,
                "nombre_completo": r.full_name,
                "dni": r.national_id,
            }
            for r in rows
        ]
        if not payload:
            return 0

        before = await self.count()
        dialect = self._session.get_bind().dialect.name
        try:
            dialect_insert = _DIALECT_INSERTS.get(dialect)
            if dialect_insert is not None:
                stmt = dialect_insert(MemberRecord).on_conflict_do_nothing()
                await self._session.execute(stmt, payload)
            else:
                for values in payload:
                    try:
                        async with self._session.begin_nested():
                            self._session.add(MemberRecord(**values))
                    except IntegrityError:
                        continue
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise StorageError(f"Member bulk insert failed: {e}") from e
        return await self.count() - before
