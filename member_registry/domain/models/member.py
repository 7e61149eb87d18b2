"""Domain model for members and audit entries. Pure business semantics, no ORM or infrastructure."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AuditAction(str, Enum):
    """Administrative mutation recorded in the audit log. Values are the stored wire values."""

    ADD = "Agregar"
    EDIT = "Editar"
    DELETE = "Eliminar"


@dataclass(frozen=True)
class Member:
    """
    A registered member. membership_number and national_id are each unique
    across live members and always stored trimmed.
    """

    id: int
    membership_number: str
    full_name: str
    national_id: str

    def to_public_dict(self) -> dict[str, str]:
        """Fields exposed by the verification endpoint (no surrogate id)."""
        return {
            "nro_afiliado": self.membership_number,
            "nombre_completo": self.full_name,
            "dni": self.national_id,
        }


@dataclass(frozen=True)
class AuditEntry:
    """Immutable record of one successful member mutation."""

    id: int
    action: AuditAction
    national_id: str
    full_name: str
    membership_number: str
    timestamp: datetime


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a public membership check."""

    found: bool
    member: Member | None = None
