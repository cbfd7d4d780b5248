"""
Invitation Entity

Invitations to join an organization, and the permanent record of a
factory operator's factory binding.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import InvitationStatus, UserRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity.

    Business Rules:
    - Expires after INVITATION_EXPIRY_DAYS (7 by default)
    - Token is single-use, cryptographically random
    - factory_id binds a factory operator to exactly one factory
    - Rows are kept after acceptance; user_id then points to the created user
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    role: UserRole = Field(nullable=False)
    factory_id: Optional[UUID] = Field(default=None, foreign_key="factories.id")
    user_id: Optional[UUID] = Field(default=None, foreign_key="users.id", index=True)

    email: str = Field(max_length=255, nullable=False, index=True)
    token: str = Field(unique=True, index=True, max_length=64)
    status: InvitationStatus = Field(default=InvitationStatus.pending)

    sent_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_org_email", "organization_id", "email"),
        Index("idx_invitation_status", "status"),
    )
