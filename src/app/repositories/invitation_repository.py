from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_organization_and_email(
        self, organization_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by organization and email"""
        pass

    @abstractmethod
    async def list_pending_by_organization(self, organization_id: UUID) -> List[Invitation]:
        """List pending invitations of an organization, most recently sent first"""
        pass

    @abstractmethod
    async def get_factory_assignment(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[Invitation]:
        """Get the user's invitation carrying a factory binding, if any"""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UUID, organization_id: UUID) -> List[Invitation]:
        """List every invitation linked to a user"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def delete(self, invitation: Invitation) -> None:
        """Delete an invitation"""
        pass
