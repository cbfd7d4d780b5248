from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Goal


class IGoalRepository(ABC):
    """Goal repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, goal_id: UUID) -> Optional[Goal]:
        """Get goal by ID"""
        pass

    @abstractmethod
    async def list_by_organization(
        self, organization_id: UUID, user_id: Optional[UUID] = None
    ) -> List[Goal]:
        """List goals of an organization (optionally one author), latest start first"""
        pass

    @abstractmethod
    async def exists_for_user(self, user_id: UUID) -> bool:
        """Whether the user authored any goal"""
        pass

    @abstractmethod
    async def create(self, goal: Goal) -> Goal:
        """Create a new goal"""
        pass

    @abstractmethod
    async def update(self, goal: Goal) -> Goal:
        """Update existing goal"""
        pass

    @abstractmethod
    async def delete(self, goal: Goal) -> None:
        """Delete a goal"""
        pass
