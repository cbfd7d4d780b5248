"""
User & Invitation Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Invitation, User


# ============================================================================
# Command DTOs
# ============================================================================


class SendInvitationCommand(BaseModel):
    email: str
    role: str
    factory_id: Optional[UUID] = None


class AcceptInvitationCommand(BaseModel):
    token: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    password: str


class UpdateUserCommand(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    status: str
    role: str
    factory_id: Optional[UUID] = None


class UpdateProfileCommand(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    password: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: Optional[str] = None
    role: str
    status: str
    factory_id: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User, factory_id: Optional[UUID] = None) -> "UserResponse":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            email=user.email,
            phone=user.phone,
            role=user.role.value,
            status=user.status.value,
            factory_id=str(factory_id) if factory_id else None,
        )


class InvitationResponse(BaseModel):
    id: str
    email: str
    role: str
    factory_id: Optional[str] = None
    status: str
    sent_at: datetime
    expires_at: datetime

    @classmethod
    def from_entity(cls, invitation: Invitation) -> "InvitationResponse":
        return cls(
            id=str(invitation.id),
            email=invitation.email,
            role=invitation.role.value,
            factory_id=str(invitation.factory_id) if invitation.factory_id else None,
            status=invitation.status.value,
            sent_at=invitation.sent_at,
            expires_at=invitation.expires_at,
        )


class UserListResponse(BaseModel):
    users: List[UserResponse]
    pending_invitations: List[InvitationResponse]
    can_create_user: bool


class InvitationPreviewResponse(BaseModel):
    """What an invitee sees before completing registration"""

    email: str
    organization_name: str
    role: str
    expires_at: datetime
