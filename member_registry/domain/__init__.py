"""Domain layer: models, schemas, validators, exceptions. Pure business logic only."""

from member_registry.domain.exceptions import (
    ConflictError,
    DomainError,
    InvalidInputError,
    MemberNotFoundError,
)
from member_registry.domain.models import AuditAction, AuditEntry, Member, VerificationResult
from member_registry.domain.schemas import (
    AuditEntryResponse,
    DniRequest,
    MemberRequest,
    VerifyResponse,
)
from member_registry.domain.validators import (
    is_numeric_string,
    validate_national_id,
    validate_new_member,
)

__all__ = [
    "AuditAction",
    "AuditEntry",
    "AuditEntryResponse",
    "ConflictError",
    "DniRequest",
    "DomainError",
    "InvalidInputError",
    "Member",
    "MemberNotFoundError",
    "MemberRequest",
    "VerificationResult",
    "VerifyResponse",
    "is_numeric_string",
    "validate_national_id",
    "validate_new_member",
]
