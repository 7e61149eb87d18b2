"""DB-backed audit repository. Append-only writes to the logs table."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from member_registry.application.exceptions import StorageError
from member_registry.application.member_repository import NewAuditEntry
from member_registry.domain.models.member import AuditAction, AuditEntry
from member_registry.infrastructure.database.models import AuditLogRecord


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; everything is written in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_entry(orm: AuditLogRecord) -> AuditEntry:
    return AuditEntry(
        id=orm.id,
        action=AuditAction(orm.accion),
        national_id=orm.dni,
        full_name=orm.nombre_completo,
        membership_number=orm.nro_afiliado,
        timestamp=_as_utc(orm.fecha),
    )


class DbAuditRepository:
    """Implements AuditRepository. Rows are inserted and read, never updated or deleted."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, entry: NewAuditEntry) -> AuditEntry:
        orm = AuditLogRecord(
            accion=entry.action.value,
            dni=entry.national_id,
            nombre_completo=entry.full_name,
            nro_afiliado=entry.membership_number,
            fecha=entry.timestamp,
        )
        self._session.add(orm)
        try:
            await self._session.flush()
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise StorageError(f"Audit write failed: {e}") from e
        await self._session.refresh(orm)
        return _to_entry(orm)

    async def recent(self, limit: int) -> list[AuditEntry]:
        stmt = (
            select(AuditLogRecord)
            .order_by(AuditLogRecord.fecha.desc(), AuditLogRecord.id.desc())
            .limit(limit)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Audit read failed: {e}") from e
        return [_to_entry(orm) for orm in result.scalars().all()]
