from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.emission_source_repository import IEmissionSourceRepository
from src.domain.entities import EmissionSource, SourceRequestStatus


class EmissionSourceRepository(IEmissionSourceRepository):
    """Emission source repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, source_id: UUID) -> Optional[EmissionSource]:
        """Get emission source by ID"""
        stmt = select(EmissionSource).where(EmissionSource.id == source_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_visible(
        self, organization_id: UUID, active_only: bool = False
    ) -> List[EmissionSource]:
        """List global sources plus the organization's own, active first then by name"""
        stmt = select(EmissionSource).where(
            or_(
                EmissionSource.organization_id.is_(None),
                EmissionSource.organization_id == organization_id,
            )
        )
        if active_only:
            stmt = stmt.where(EmissionSource.is_active.is_(True))
        stmt = stmt.order_by(EmissionSource.is_active.desc(), EmissionSource.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_pending_requests(self) -> List[EmissionSource]:
        """List custom source requests awaiting review, oldest first"""
        stmt = (
            select(EmissionSource)
            .where(
                EmissionSource.is_requested.is_(True),
                EmissionSource.request_status == SourceRequestStatus.pending,
            )
            .order_by(EmissionSource.requested_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, source: EmissionSource) -> EmissionSource:
        """Create a new emission source"""
        self.session.add(source)
        await self.session.flush()
        await self.session.refresh(source)
        return source

    async def update(self, source: EmissionSource) -> EmissionSource:
        """Update existing emission source"""
        self.session.add(source)
        await self.session.flush()
        await self.session.refresh(source)
        return source

    async def delete(self, source: EmissionSource) -> None:
        """Delete an emission source"""
        await self.session.delete(source)
        await self.session.flush()
