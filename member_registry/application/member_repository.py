"""Repository protocols. Application layer depends on these; infrastructure implements them."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Protocol

from member_registry.domain.models.member import AuditAction, AuditEntry, Member
from member_registry.domain.validators.member_validator import MemberFields


@dataclass(frozen=True)
class NewAuditEntry:
    """Audit entry before the store assigns its surrogate id."""

    action: AuditAction
    national_id: str
    full_name: str
    membership_number: str
    timestamp: datetime


class MemberRepository(Protocol):
    """Protocol for the member table. Unique violations surface as ConflictError."""

    async def get_by_national_id(self, national_id: str) -> Optional[Member]:
        ...

    async def exists_by_national_id(self, national_id: str) -> bool:
        ...

    async def exists_by_membership_number(self, membership_number: str) -> bool:
        ...

    async def add(self, fields: MemberFields) -> Member:
        """Insert and commit. Raises ConflictError on a unique violation."""
        ...

    async def update(
        self, national_id: str, membership_number: str, full_name: str
    ) -> Optional[Member]:
        """Overwrite name and number. Returns None if no row matched."""
        ...

    async def delete(self, national_id: str) -> bool:
        """Delete and commit. Returns False if no row matched."""
        ...

    async def count(self) -> int:
        ...

    async def add_many_ignoring_conflicts(self, rows: Iterable[MemberFields]) -> int:
        """Insert-if-absent for each row; returns the number actually inserted."""
        ...


class AuditRepository(Protocol):
    """Protocol for the append-only audit table."""

    async def save(self, entry: NewAuditEntry) -> AuditEntry:
        """Persist an audit entry. Entries are never updated or deleted."""
        ...

    async def recent(self, limit: int) -> list[AuditEntry]:
        """Most recent first; ties broken by insertion order."""
        ...
