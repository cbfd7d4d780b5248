from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation, InvitationStatus


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        stmt = select(Invitation).where(Invitation.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_pending_by_organization_and_email(
        self, organization_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by organization and email"""
        stmt = select(Invitation).where(
            Invitation.organization_id == organization_id,
            Invitation.email == email,
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_pending_by_organization(self, organization_id: UUID) -> List[Invitation]:
        """List pending invitations of an organization, most recently sent first"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.organization_id == organization_id,
                Invitation.status == InvitationStatus.pending,
            )
            .order_by(Invitation.sent_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_factory_assignment(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[Invitation]:
        """Get the user's invitation carrying a factory binding, if any"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.user_id == user_id,
                Invitation.organization_id == organization_id,
                Invitation.factory_id.is_not(None),
            )
            .order_by(Invitation.sent_at.desc())
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_by_user(self, user_id: UUID, organization_id: UUID) -> List[Invitation]:
        """List every invitation linked to a user"""
        stmt = select(Invitation).where(
            Invitation.user_id == user_id,
            Invitation.organization_id == organization_id,
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def delete(self, invitation: Invitation) -> None:
        """Delete an invitation"""
        await self.session.delete(invitation)
        await self.session.flush()
