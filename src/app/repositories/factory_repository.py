from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.app.repositories.read_models import RecordScope
from src.domain.entities import Factory


class IFactoryRepository(ABC):
    """Factory repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, factory_id: UUID) -> Optional[Factory]:
        """Get factory by ID"""
        pass

    @abstractmethod
    async def get_by_code(
        self, code: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Factory]:
        """Get factory by its globally unique code"""
        pass

    @abstractmethod
    async def list_in_scope(self, scope: RecordScope) -> List[Factory]:
        """List the factories visible within a record scope, ordered by name"""
        pass

    @abstractmethod
    async def count_by_organization(self, organization_id: UUID) -> int:
        """Count factories of an organization"""
        pass

    @abstractmethod
    async def create(self, factory: Factory) -> Factory:
        """Create a new factory; raises DuplicateEntryError on a taken code"""
        pass

    @abstractmethod
    async def update(self, factory: Factory) -> Factory:
        """Update existing factory; raises DuplicateEntryError on a taken code"""
        pass

    @abstractmethod
    async def delete(self, factory: Factory) -> None:
        """Delete a factory"""
        pass
