from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.notification_service import NotificationService
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthResponse
from src.app.use_cases.users import (
    AcceptInvitationCommand,
    AcceptInvitationUseCase,
    CancelInvitationUseCase,
    GetInvitationUseCase,
    InvitationPreviewResponse,
    InvitationResponse,
    ResendInvitationUseCase,
    SendInvitationCommand,
    SendInvitationUseCase,
)
from src.depends import get_notification_service, get_request_context, get_unit_of_work

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class SendInvitationRequest(BaseModel):
    """
    Invitation HTTP request payload

    factory_id is required when role is factory_operator.
    """

    email: EmailStr
    role: str = Field(..., description="sustainability_officer or factory_operator")
    factory_id: Optional[UUID] = None


class AcceptInvitationRequest(BaseModel):
    token: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    password: str = Field(..., min_length=8)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InvitationResponse)
async def send_invitation(
    request: SendInvitationRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifications: NotificationService = Depends(get_notification_service),
):
    """
    Send Invitation

    Raises:
        - 400 Bad Request: INVALID_ROLE, FACTORY_REQUIRED
        - 402 Payment Required: USER_LIMIT_REACHED
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 409 Conflict: EMAIL_ALREADY_EXISTS, INVITATION_ALREADY_EXISTS
    """
    command = SendInvitationCommand(**request.model_dump())
    result = await SendInvitationUseCase(uow, notifications).execute(context, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{invitation_id}/resend", response_model=InvitationResponse)
async def resend_invitation(
    invitation_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifications: NotificationService = Depends(get_notification_service),
):
    result = await ResendInvitationUseCase(uow, notifications).execute(context, invitation_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{invitation_id}/cancel", response_model=InvitationResponse)
async def cancel_invitation(
    invitation_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CancelInvitationUseCase(uow).execute(context, invitation_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/accept", response_model=InvitationPreviewResponse)
async def get_invitation(
    token: str = Query(..., min_length=1), uow: UnitOfWork = Depends(get_unit_of_work)
):
    """Public preview of a pending invitation"""
    result = await GetInvitationUseCase(uow).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/accept", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def accept_invitation(
    request: AcceptInvitationRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Accept Invitation

    Creates the invited user and signs them in.

    Raises:
        - 402 Payment Required: USER_LIMIT_REACHED
        - 404 Not Found: INVITATION_NOT_FOUND (unknown, expired or no longer pending)
        - 409 Conflict: EMAIL_ALREADY_EXISTS, INVITATION_ALREADY_EXISTS
    """
    command = AcceptInvitationCommand(**request.model_dump())
    result = await AcceptInvitationUseCase(uow).execute(command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
