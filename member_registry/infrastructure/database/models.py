# member_registry/infrastructure/database/models.py

from sqlalchemy import Column, DateTime, Index, Integer, String, UniqueConstraint

from member_registry.infrastructure.database.session import Base


class MemberRecord(Base):
    """ORM model for registered members. Both natural keys carry real unique constraints."""

    __tablename__ = "afiliados"
    __table_args__ = (
        UniqueConstraint("nro_afiliado", name="uq_afiliados_nro_afiliado"),
        UniqueConstraint("dni", name="uq_afiliados_dni"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    nro_afiliado = Column(String, nullable=False)
    nombre_completo = Column(String, nullable=False)
    dni = Column(String, nullable=False)


class AuditLogRecord(Base):
    """ORM model for the append-only audit log. dni is a correlation key, not a foreign key."""

    __tablename__ = "logs"
    __table_args__ = (
        Index("ix_logs_fecha_id", "fecha", "id"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    accion = Column(String, nullable=False)
    dni = Column(String, nullable=False)
    nombre_completo = Column(String, nullable=False)
    nro_afiliado = Column(String, nullable=False)
    fecha = Column(DateTime(timezone=True), nullable=False)
