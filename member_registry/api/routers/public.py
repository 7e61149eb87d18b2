"""Public API router: POST /verificar, POST /credencial. No authentication."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from starlette.concurrency import run_in_threadpool

from member_registry.api.dependencies import get_credential_renderer, get_member_service
from member_registry.application.member_service import MemberService
from member_registry.domain.schemas.member import DniRequest, MemberData, VerifyResponse
from member_registry.rendering.credential import CredentialRenderer

router = APIRouter()


@router.post(
    "/verificar",
    response_model=VerifyResponse,
    response_model_exclude_none=True,
)
async def verify_member(
    body: DniRequest,
    member_service: Annotated[MemberService, Depends(get_member_service)],
):
    """Check whether dni belongs to a registered member."""
    result = await member_service.verify(body.dni)
    if not result.found:
        return VerifyResponse(afiliado=False)
    return VerifyResponse(afiliado=True, datos=MemberData.from_member(result.member))


@router.post("/credencial", response_class=Response)
async def issue_credential(
    body: DniRequest,
    member_service: Annotated[MemberService, Depends(get_member_service)],
    renderer: Annotated[CredentialRenderer, Depends(get_credential_renderer)],
):
    """Render the member's credential as a PDF attachment."""
    member = await member_service.get_for_credential(body.dni)
    pdf = await run_in_threadpool(renderer.render, member)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=credencial.pdf"},
    )
