from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User, UserRole


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email_in_organization(
        self, email: str, organization_id: UUID
    ) -> Optional[User]:
        """Get user by email within one organization"""
        stmt = select(User).where(
            User.email == email, User.organization_id == organization_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_organization(
        self, organization_id: UUID, exclude_role: Optional[UserRole] = None
    ) -> List[User]:
        """List users of an organization, optionally excluding one role"""
        stmt = select(User).where(User.organization_id == organization_id)
        if exclude_role is not None:
            stmt = stmt.where(User.role != exclude_role)
        stmt = stmt.order_by(User.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_organization(self, organization_id: UUID) -> int:
        """Count every user belonging to an organization, whatever their status"""
        stmt = select(func.count()).select_from(User).where(
            User.organization_id == organization_id
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        """Delete a user"""
        await self.session.delete(user)
        await self.session.flush()
