"""Domain models. Pure business entities."""

from member_registry.domain.models.member import (
    AuditAction,
    AuditEntry,
    Member,
    VerificationResult,
)

__all__ = [
    "AuditAction",
    "AuditEntry",
    "Member",
    "VerificationResult",
]
