from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.goal_repository import IGoalRepository
from src.domain.entities import Goal


class GoalRepository(IGoalRepository):
    """Goal repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, goal_id: UUID) -> Optional[Goal]:
        """Get goal by ID"""
        stmt = select(Goal).where(Goal.id == goal_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_organization(
        self, organization_id: UUID, user_id: Optional[UUID] = None
    ) -> List[Goal]:
        """List goals of an organization (optionally one author), latest start first"""
        stmt = select(Goal).where(Goal.organization_id == organization_id)
        if user_id is not None:
            stmt = stmt.where(Goal.user_id == user_id)
        stmt = stmt.order_by(Goal.start_date.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def exists_for_user(self, user_id: UUID) -> bool:
        """Whether the user authored any goal"""
        stmt = select(Goal.id).where(Goal.user_id == user_id).limit(1)
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def create(self, goal: Goal) -> Goal:
        """Create a new goal"""
        self.session.add(goal)
        await self.session.flush()
        await self.session.refresh(goal)
        return goal

    async def update(self, goal: Goal) -> Goal:
        """Update existing goal"""
        self.session.add(goal)
        await self.session.flush()
        await self.session.refresh(goal)
        return goal

    async def delete(self, goal: Goal) -> None:
        """Delete a goal"""
        await self.session.delete(goal)
        await self.session.flush()
