"""Append-only audit log for administrative member mutations. No FastAPI."""

import logging
from datetime import datetime, timezone

from member_registry.application.member_repository import AuditRepository, NewAuditEntry
from member_registry.domain.models.member import AuditAction, AuditEntry

DEFAULT_RECENT_LIMIT = 100


class AuditLog:
    """
    Writes immutable audit entries via repository.
    append() never raises: a failed write is reported on the operator log and
    the caller's mutation stands. recent() is read-only and propagates errors.
    """

    def __init__(self, repository: AuditRepository, logger: logging.Logger) -> None:
        self._repository = repository
        self._logger = logger

    async def append(
        self,
        action: AuditAction,
        national_id: str,
        full_name: str,
        membership_number: str,
    ) -> None:
        """Write one audit entry timestamped now (UTC)."""
        entry = NewAuditEntry(
            action=action,
            national_id=national_id,
            full_name=full_name,
            membership_number=membership_number,
            timestamp=datetime.now(timezone.utc),
        )
        try:
            await self._repository.save(entry)
        except Exception as e:
            self._logger.error(
                "audit_append_failed",
                extra={
                    "action": action.value,
                    "dni": national_id,
                    "error": str(e),
                },
            )

    async def recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[AuditEntry]:
        """Up to limit entries, most recent first."""
        if limit < 1:
            return []
        return await self._repository.recent(limit)
