"""Pydantic schemas for the membership API. Field names follow the public wire contract."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer

from member_registry.domain.models.member import AuditAction, AuditEntry, Member


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class DniRequest(BaseModel):
    """Body carrying only a national ID (verify, credential, delete)."""

    model_config = ConfigDict(extra="ignore")

    dni: Optional[str] = None


class MemberRequest(BaseModel):
    """Body for admin insert and edit. Presence and format are checked by domain validators."""

    model_config = ConfigDict(extra="ignore")

    nro_afiliado: Optional[str] = None
    nombre_completo: Optional[str] = None
    dni: Optional[str] = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class MemberData(BaseModel):
    """Public view of a member under the `datos` key."""

    nro_afiliado: str
    nombre_completo: str
    dni: str

    @classmethod
    def from_member(cls, member: Member) -> "MemberData":
        return cls(**member.to_public_dict())


class VerifyResponse(BaseModel):
    """{afiliado: true, datos} when found, {afiliado: false} otherwise."""

    afiliado: bool
    datos: Optional[MemberData] = None


class SuccessResponse(BaseModel):
    """Acknowledgement returned by admin mutations."""

    success: bool = True
    message: str


class AuditEntryResponse(BaseModel):
    """One audit log entry; fecha is serialized as ISO 8601."""

    id: int
    accion: AuditAction
    dni: str
    nombre_completo: str
    nro_afiliado: str
    fecha: datetime

    @field_serializer("fecha")
    def _serialize_fecha(self, value: datetime) -> str:
        return value.isoformat()

    @classmethod
    def from_entry(cls, entry: AuditEntry) -> "AuditEntryResponse":
        return cls(
            id=entry.id,
            accion=entry.action,
            dni=entry.national_id,
            nombre_completo=entry.full_name,
            nro_afiliado=entry.membership_number,
            fecha=entry.timestamp,
        )
