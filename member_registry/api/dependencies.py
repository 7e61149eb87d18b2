"""FastAPI dependency injection: DB session, MemberService, AuditLog, PIN guard, renderer."""

import logging
from functools import lru_cache
from typing import Annotated, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from member_registry.application.audit_log import AuditLog
from member_registry.application.member_service import MemberService
from member_registry.config.settings import get_settings
from member_registry.domain.schemas.member import DniRequest, MemberRequest
from member_registry.infrastructure.database.audit_repository_db import DbAuditRepository
from member_registry.infrastructure.database.member_repository_db import DbMemberRepository
from member_registry.infrastructure.database.session import get_db
from member_registry.rendering.credential import CredentialRenderer
from member_registry.security.pin_guard import AdminPinGuard, extract_pin

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})

ModelT = TypeVar("ModelT", bound=BaseModel)


@lru_cache
def get_pin_guard() -> AdminPinGuard:
    """Return singleton PIN guard bound to the configured secret."""
    return AdminPinGuard(get_settings().admin_pin)


@lru_cache
def get_credential_renderer() -> CredentialRenderer:
    """Return singleton credential renderer."""
    settings = get_settings()
    return CredentialRenderer(
        title=settings.credential_title,
        timezone_name=settings.credential_timezone,
        logo_path=settings.credential_logo_path,
    )


def get_audit_log(
    session: Annotated[AsyncSession, Depends(get_db)],
) -> AuditLog:
    return AuditLog(
        repository=DbAuditRepository(session),
        logger=logging.getLogger("member_registry.audit"),
    )


def get_member_service(
    session: Annotated[AsyncSession, Depends(get_db)],
    audit_log: Annotated[AuditLog, Depends(get_audit_log)],
) -> MemberService:
    """Build MemberService with the request's session, audit log and logger."""
    return MemberService(
        repository=DbMemberRepository(session),
        audit_log=audit_log,
        logger=logging.getLogger("member_registry.members"),
    )


async def _json_body(request: Request) -> dict | None:
    if request.method not in _BODY_METHODS:
        return None
    try:
        body = await request.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


async def require_admin_pin(
    request: Request,
    guard: Annotated[AdminPinGuard, Depends(get_pin_guard)],
) -> None:
    """Reject the request with ForbiddenError unless a valid admin PIN is presented."""
    body = await _json_body(request)
    guard.check(extract_pin(request.headers, body, request.query_params))


async def _parse_body(request: Request, model: type[ModelT]) -> ModelT:
    # Admin bodies are parsed here, after require_admin_pin; a request without
    # a valid PIN is rejected before its body is validated.
    try:
        payload = await request.json()
    except ValueError as e:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error"}]
        ) from e
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e


async def get_member_request(request: Request) -> MemberRequest:
    return await _parse_body(request, MemberRequest)


async def get_dni_request(request: Request) -> DniRequest:
    return await _parse_body(request, DniRequest)
