# Application layer: services that orchestrate domain and infrastructure.

from member_registry.application.audit_log import AuditLog
from member_registry.application.exceptions import (
    ApplicationError,
    RenderError,
    StorageError,
)
from member_registry.application.member_repository import (
    AuditRepository,
    MemberRepository,
    NewAuditEntry,
)
from member_registry.application.member_service import MemberService
from member_registry.application.seed_importer import SeedImporter, SeedReport

__all__ = [
    "ApplicationError",
    "AuditLog",
    "AuditRepository",
    "MemberRepository",
    "MemberService",
    "NewAuditEntry",
    "RenderError",
    "SeedImporter",
    "SeedReport",
    "StorageError",
]
