from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import violates_unique
from src.app.repositories.emission_record_repository import IEmissionRecordRepository
from src.app.repositories.exceptions import DuplicateEntryError
from src.app.repositories.read_models import (
    RecordFilters,
    RecordScope,
    RecordWithFactorAndScope,
)
from src.domain.entities import EmissionRecord, EmissionSource, Factory

PERIOD_CONSTRAINT = "uq_emission_record_period"
PERIOD_UNIQUE_COLUMNS = "emission_records.organization_id, emission_records.factory_id"


def _to_read_model(
    record: EmissionRecord, source: EmissionSource, factory_name: str
) -> RecordWithFactorAndScope:
    return RecordWithFactorAndScope(
        record_id=record.id,
        organization_id=record.organization_id,
        factory_id=record.factory_id,
        factory_name=factory_name,
        emission_source_id=record.emission_source_id,
        source_name=source.name,
        scope=source.scope,
        unit=source.unit,
        emission_factor=source.emission_factor,
        quantity=record.quantity,
        year=record.year,
        month=record.month,
        user_id=record.user_id,
        created_at=record.created_at,
    )


class EmissionRecordRepository(IEmissionRecordRepository):
    """Emission record repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _joined(self):
        return (
            select(EmissionRecord, EmissionSource, Factory.name)
            .join(EmissionSource, EmissionRecord.emission_source_id == EmissionSource.id)
            .join(Factory, EmissionRecord.factory_id == Factory.id)
        )

    async def get_by_id(self, record_id: UUID) -> Optional[EmissionRecord]:
        """Get emission record by ID"""
        stmt = select(EmissionRecord).where(EmissionRecord.id == record_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

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
        stmt = select(EmissionRecord).where(
            EmissionRecord.organization_id == organization_id,
            EmissionRecord.factory_id == factory_id,
            EmissionRecord.emission_source_id == emission_source_id,
            EmissionRecord.year == year,
            EmissionRecord.month == month,
        )
        if exclude_id is not None:
            stmt = stmt.where(EmissionRecord.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_with_factor(self, record_id: UUID) -> Optional[RecordWithFactorAndScope]:
        """Get one record joined with its source and factory"""
        stmt = self._joined().where(EmissionRecord.id == record_id)
        result = await self.session.exec(stmt)
        row = result.first()
        if row is None:
            return None
        record, source, factory_name = row
        return _to_read_model(record, source, factory_name)

    async def list_with_factor(
        self, scope: RecordScope, filters: Optional[RecordFilters] = None
    ) -> List[RecordWithFactorAndScope]:
        """List records in scope joined with source factor/scope, newest period first"""
        if scope.is_empty:
            return []

        stmt = self._joined().where(EmissionRecord.organization_id == scope.organization_id)
        if scope.factory_id is not None:
            stmt = stmt.where(EmissionRecord.factory_id == scope.factory_id)

        if filters is not None:
            if filters.factory_id is not None:
                stmt = stmt.where(EmissionRecord.factory_id == filters.factory_id)
            if filters.emission_source_id is not None:
                stmt = stmt.where(
                    EmissionRecord.emission_source_id == filters.emission_source_id
                )
            if filters.year is not None:
                stmt = stmt.where(EmissionRecord.year == filters.year)
            if filters.month is not None:
                stmt = stmt.where(EmissionRecord.month == filters.month)
            if filters.scope:
                stmt = stmt.where(EmissionSource.scope == filters.scope)

        stmt = stmt.order_by(EmissionRecord.year.desc(), EmissionRecord.month.desc())
        result = await self.session.exec(stmt)
        return [
            _to_read_model(record, source, factory_name)
            for record, source, factory_name in result.all()
        ]

    async def list_similar(
        self, scope: RecordScope, emission_source_id: UUID, exclude_id: UUID, limit: int
    ) -> List[RecordWithFactorAndScope]:
        """List other in-scope records of the same source, newest period first"""
        if scope.is_empty:
            return []

        stmt = self._joined().where(
            EmissionRecord.organization_id == scope.organization_id,
            EmissionRecord.emission_source_id == emission_source_id,
            EmissionRecord.id != exclude_id,
        )
        if scope.factory_id is not None:
            stmt = stmt.where(EmissionRecord.factory_id == scope.factory_id)

        stmt = stmt.order_by(EmissionRecord.year.desc(), EmissionRecord.month.desc()).limit(limit)
        result = await self.session.exec(stmt)
        return [
            _to_read_model(record, source, factory_name)
            for record, source, factory_name in result.all()
        ]

    async def _exists(self, *criteria) -> bool:
        stmt = select(EmissionRecord.id).where(*criteria).limit(1)
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def exists_for_factory(self, factory_id: UUID) -> bool:
        """Whether any record references the factory"""
        return await self._exists(EmissionRecord.factory_id == factory_id)

    async def exists_for_source(self, emission_source_id: UUID) -> bool:
        """Whether any record references the emission source"""
        return await self._exists(EmissionRecord.emission_source_id == emission_source_id)

    async def exists_for_user(self, user_id: UUID) -> bool:
        """Whether the user authored any record"""
        return await self._exists(EmissionRecord.user_id == user_id)

    async def count_by_organization(self, organization_id: UUID) -> int:
        """Count records of an organization"""
        stmt = select(func.count()).select_from(EmissionRecord).where(
            EmissionRecord.organization_id == organization_id
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def list_factory_ids_with_records(self, organization_id: UUID) -> List[UUID]:
        """Distinct factory IDs of an organization that have at least one record"""
        stmt = (
            select(EmissionRecord.factory_id)
            .where(EmissionRecord.organization_id == organization_id)
            .distinct()
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def _write(self, record: EmissionRecord) -> EmissionRecord:
        self.session.add(record)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if violates_unique(exc, PERIOD_CONSTRAINT, PERIOD_UNIQUE_COLUMNS):
                raise DuplicateEntryError(PERIOD_CONSTRAINT) from exc
            raise
        await self.session.refresh(record)
        return record

    async def create(self, record: EmissionRecord) -> EmissionRecord:
        """Create a new record; raises DuplicateEntryError on a taken period"""
        return await self._write(record)

    async def update(self, record: EmissionRecord) -> EmissionRecord:
        """Update existing record; raises DuplicateEntryError on a taken period"""
        return await self._write(record)

    async def delete(self, record: EmissionRecord) -> None:
        """Delete a record"""
        await self.session.delete(record)
        await self.session.flush()
