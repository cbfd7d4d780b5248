from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import EmissionSource


class IEmissionSourceRepository(ABC):
    """Emission source repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, source_id: UUID) -> Optional[EmissionSource]:
        """Get emission source by ID"""
        pass

    @abstractmethod
    async def list_visible(
        self, organization_id: UUID, active_only: bool = False
    ) -> List[EmissionSource]:
        """List global sources plus the organization's own, active first then by name"""
        pass

    @abstractmethod
    async def list_pending_requests(self) -> List[EmissionSource]:
        """List custom source requests awaiting review, oldest first"""
        pass

    @abstractmethod
    async def create(self, source: EmissionSource) -> EmissionSource:
        """Create a new emission source"""
        pass

    @abstractmethod
    async def update(self, source: EmissionSource) -> EmissionSource:
        """Update existing emission source"""
        pass

    @abstractmethod
    async def delete(self, source: EmissionSource) -> None:
        """Delete an emission source"""
        pass
