"""Domain schemas. Request/response and validation."""

from member_registry.domain.schemas.member import (
    AuditEntryResponse,
    DniRequest,
    MemberData,
    MemberRequest,
    SuccessResponse,
    VerifyResponse,
)

__all__ = [
    "AuditEntryResponse",
    "DniRequest",
    "MemberData",
    "MemberRequest",
    "SuccessResponse",
    "VerifyResponse",
]
