"""Admin API router. Every route requires the admin PIN (header, body field or query)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from member_registry.api.dependencies import (
    get_audit_log,
    get_dni_request,
    get_member_request,
    get_member_service,
    require_admin_pin,
)
from member_registry.application.audit_log import AuditLog
from member_registry.application.member_service import MemberService
from member_registry.config.settings import get_settings
from member_registry.domain.schemas.member import (
    AuditEntryResponse,
    DniRequest,
    MemberRequest,
    SuccessResponse,
)

router = APIRouter(dependencies=[Depends(require_admin_pin)])


@router.post("/cargar-afiliados", response_model=SuccessResponse)
async def add_member(
    body: Annotated[MemberRequest, Depends(get_member_request)],
    member_service: Annotated[MemberService, Depends(get_member_service)],
):
    await member_service.insert(body.nro_afiliado, body.nombre_completo, body.dni)
    return SuccessResponse(message="Afiliado agregado")


@router.put("/editar-afiliado", response_model=SuccessResponse)
async def edit_member(
    body: Annotated[MemberRequest, Depends(get_member_request)],
    member_service: Annotated[MemberService, Depends(get_member_service)],
):
    """Overwrite name and membership number of the member identified by dni."""
    await member_service.update(body.dni, body.nro_afiliado, body.nombre_completo)
    return SuccessResponse(message="Afiliado modificado")


@router.post("/eliminar-afiliado", response_model=SuccessResponse)
async def delete_member(
    body: Annotated[DniRequest, Depends(get_dni_request)],
    member_service: Annotated[MemberService, Depends(get_member_service)],
):
    await member_service.delete(body.dni)
    return SuccessResponse(message="Afiliado eliminado")


@router.get("/listar-logs", response_model=list[AuditEntryResponse])
async def list_audit_log(
    audit_log: Annotated[AuditLog, Depends(get_audit_log)],
):
    """Most recent audit entries first, bounded by the configured limit."""
    entries = await audit_log.recent(get_settings().audit_recent_limit)
    return [AuditEntryResponse.from_entry(e) for e in entries]
