from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import violates_unique
from src.app.repositories.exceptions import DuplicateEntryError
from src.app.repositories.factory_repository import IFactoryRepository
from src.app.repositories.read_models import RecordScope
from src.domain.entities import Factory

CODE_CONSTRAINT = "ix_factories_code"
CODE_UNIQUE_COLUMN = "factories.code"


class FactoryRepository(IFactoryRepository):
    """Factory repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, factory_id: UUID) -> Optional[Factory]:
        """Get factory by ID"""
        stmt = select(Factory).where(Factory.id == factory_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_code(
        self, code: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Factory]:
        """Get factory by its globally unique code"""
        stmt = select(Factory).where(Factory.code == code)
        if exclude_id is not None:
            stmt = stmt.where(Factory.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_in_scope(self, scope: RecordScope) -> List[Factory]:
        """List the factories visible within a record scope, ordered by name"""
        if scope.is_empty:
            return []

        stmt = select(Factory).where(Factory.organization_id == scope.organization_id)
        if scope.factory_id is not None:
            stmt = stmt.where(Factory.id == scope.factory_id)
        stmt = stmt.order_by(Factory.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_organization(self, organization_id: UUID) -> int:
        """Count factories of an organization"""
        stmt = select(func.count()).select_from(Factory).where(
            Factory.organization_id == organization_id
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def _write(self, factory: Factory) -> Factory:
        self.session.add(factory)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if violates_unique(exc, CODE_CONSTRAINT, CODE_UNIQUE_COLUMN):
                raise DuplicateEntryError(CODE_CONSTRAINT) from exc
            raise
        await self.session.refresh(factory)
        return factory

    async def create(self, factory: Factory) -> Factory:
        """Create a new factory; raises DuplicateEntryError on a taken code"""
        return await self._write(factory)

    async def update(self, factory: Factory) -> Factory:
        """Update existing factory; raises DuplicateEntryError on a taken code"""
        return await self._write(factory)

    async def delete(self, factory: Factory) -> None:
        """Delete a factory"""
        await self.session.delete(factory)
        await self.session.flush()
