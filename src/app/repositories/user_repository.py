from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User, UserRole


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_email_in_organization(
        self, email: str, organization_id: UUID
    ) -> Optional[User]:
        """Get user by email within one organization"""
        pass

    @abstractmethod
    async def list_by_organization(
        self, organization_id: UUID, exclude_role: Optional[UserRole] = None
    ) -> List[User]:
        """List users of an organization, optionally excluding one role"""
        pass

    @abstractmethod
    async def count_by_organization(self, organization_id: UUID) -> int:
        """Count every user belonging to an organization, whatever their status"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete a user"""
        pass
