from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.app.repositories.read_models import (
    RecordFilters,
    RecordScope,
    RecordWithFactorAndScope,
)
from src.domain.entities import EmissionRecord


class IEmissionRecordRepository(ABC):
    """Emission record repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, record_id: UUID) -> Optional[EmissionRecord]:
        """Get emission record by ID"""
        pass

    @abstractmethod
    async def find_by_period(
        self,
        organization_id: UUID,
        factory_id: UUID,
        emission_source_id: UUID,
        year: int,
        month: int,
        exclude_id: Optional[UUID] = None,
    ) -> Optional[EmissionRecord]:
        """Find the record occupying a uniqueness tuple, optionally ignoring one ID"""
        pass

    @abstractmethod
    async def get_with_factor(self, record_id: UUID) -> Optional[RecordWithFactorAndScope]:
        """Get one record joined with its source and factory"""
        pass

    @abstractmethod
    async def list_with_factor(
        self, scope: RecordScope, filters: Optional[RecordFilters] = None
    ) -> List[RecordWithFactorAndScope]:
        """List records in scope joined with source factor/scope, newest period first"""
        pass

    @abstractmethod
    async def list_similar(
        self, scope: RecordScope, emission_source_id: UUID, exclude_id: UUID, limit: int
    ) -> List[RecordWithFactorAndScope]:
        """List other in-scope records of the same source, newest period first"""
        pass

    @abstractmethod
    async def exists_for_factory(self, factory_id: UUID) -> bool:
        """Whether any record references the factory"""
        pass

    @abstractmethod
    async def exists_for_source(self, emission_source_id: UUID) -> bool:
        """Whether any record references the emission source"""
        pass

    @abstractmethod
    async def exists_for_user(self, user_id: UUID) -> bool:
        """Whether the user authored any record"""
        pass

    @abstractmethod
    async def count_by_organization(self, organization_id: UUID) -> int:
        """Count records of an organization"""
        pass

    @abstractmethod
    async def list_factory_ids_with_records(self, organization_id: UUID) -> List[UUID]:
        """Distinct factory IDs of an organization that have at least one record"""
        pass

    @abstractmethod
    async def create(self, record: EmissionRecord) -> EmissionRecord:
        """Create a new record; raises DuplicateEntryError on a taken period"""
        pass

    @abstractmethod
    async def update(self, record: EmissionRecord) -> EmissionRecord:
        """Update existing record; raises DuplicateEntryError on a taken period"""
        pass

    @abstractmethod
    async def delete(self, record: EmissionRecord) -> None:
        """Delete a record"""
        pass
