"""Member application service. Orchestrates validation, persistence and audit."""

import logging

from member_registry.application.audit_log import AuditLog
from member_registry.application.member_repository import MemberRepository
from member_registry.domain.exceptions import (
    ConflictError,
    InvalidInputError,
    MemberNotFoundError,
)
from member_registry.domain.models.member import AuditAction, Member, VerificationResult
from member_registry.domain.validators.member_validator import (
    normalize,
    require_fields,
    validate_national_id,
    validate_new_member,
)


class MemberService:
    """
    Application-layer orchestration only. No HTTP, no FastAPI, no direct infrastructure.
    Ordering per mutation: validate, pre-check, write (committed), then audit append.
    Audit failure never fails the mutation.
    """

    def __init__(
        self,
        repository: MemberRepository,
        audit_log: AuditLog,
        logger: logging.Logger,
    ) -> None:
        self._repository = repository
        self._audit_log = audit_log
        self._logger = logger

    async def find_by_national_id(self, national_id: str) -> Member | None:
        return await self._repository.get_by_national_id(normalize(national_id))

    async def verify(self, national_id: str) -> VerificationResult:
        """Public membership check. Raises InvalidInputError unless the id is digits only."""
        dni = validate_national_id(national_id)
        member = await self._repository.get_by_national_id(dni)
        if member is None:
            return VerificationResult(found=False)
        return VerificationResult(found=True, member=member)

    async def get_for_credential(self, national_id: str) -> Member:
        """Member to render a credential for. Raises MemberNotFoundError if absent."""
        dni = validate_national_id(national_id)
        member = await self._repository.get_by_national_id(dni)
        if member is None:
            raise MemberNotFoundError("Afiliado no encontrado")
        return member

    async def insert(
        self,
        membership_number: str,
        full_name: str,
        national_id: str,
    ) -> Member:
        """
        Create a member. National ID uniqueness is checked before membership number
        so the caller can tell which field collided; the table's unique constraints
        remain the final word if a concurrent insert slips between check and write.
        """
        fields = validate_new_member(membership_number, full_name, national_id)

        if await self._repository.exists_by_national_id(fields.national_id):
            raise ConflictError("El DNI ya existe", field="dni")
        if await self._repository.exists_by_membership_number(fields.membership_number):
            raise ConflictError("El N° Afiliado ya existe", field="nro_afiliado")

        member = await self._repository.add(fields)
        self._logger.info(
            "member_created",
            extra={"member_id": member.id, "dni": member.national_id},
        )

        await self._audit_log.append(
            AuditAction.ADD,
            member.national_id,
            member.full_name,
            member.membership_number,
        )
        return member

    async def update(
        self,
        national_id: str,
        new_membership_number: str,
        new_full_name: str,
    ) -> Member:
        """
        Overwrite name and membership number of the member with national_id.
        The new membership number is not digit-validated nor pre-checked for uniqueness.
        """
        fields = require_fields(new_membership_number, new_full_name, national_id)

        member = await self._repository.update(
            fields.national_id,
            fields.membership_number,
            fields.full_name,
        )
        if member is None:
            raise MemberNotFoundError("Afiliado no encontrado")
        self._logger.info(
            "member_updated",
            extra={"member_id": member.id, "dni": member.national_id},
        )

        await self._audit_log.append(
            AuditAction.EDIT,
            member.national_id,
            member.full_name,
            member.membership_number,
        )
        return member

    async def delete(self, national_id: str) -> Member:
        """Remove the member and return its pre-deletion values."""
        dni = normalize(national_id)
        if not dni:
            raise InvalidInputError("Falta el DNI")

        existing = await self._repository.get_by_national_id(dni)
        if existing is None:
            raise MemberNotFoundError("Afiliado no encontrado")

        if not await self._repository.delete(dni):
            raise MemberNotFoundError("Afiliado no encontrado")
        self._logger.info(
            "member_deleted",
            extra={"member_id": existing.id, "dni": existing.national_id},
        )

        await self._audit_log.append(
            AuditAction.DELETE,
            existing.national_id,
            existing.full_name,
            existing.membership_number,
        )
        return existing
