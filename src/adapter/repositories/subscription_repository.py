from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.subscription_repository import (
    ISubscriptionPlanRepository,
    ISubscriptionRepository,
)
from src.domain.entities import (
    PlanType,
    Subscription,
    SubscriptionPlan,
    SubscriptionStatus,
)


class SubscriptionPlanRepository(ISubscriptionPlanRepository):
    """Subscription plan repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, plan_id: UUID) -> Optional[SubscriptionPlan]:
        """Get plan by ID"""
        stmt = select(SubscriptionPlan).where(SubscriptionPlan.id == plan_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_type(self, plan_type: PlanType) -> List[SubscriptionPlan]:
        """List plans of one type"""
        stmt = (
            select(SubscriptionPlan)
            .where(SubscriptionPlan.type == plan_type)
            .order_by(SubscriptionPlan.price)
        )
        result = await self.session.exec(stmt)
        return list(result.all())


class SubscriptionRepository(ISubscriptionRepository):
    """Subscription repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, subscription_id: UUID) -> Optional[Subscription]:
        """Get subscription by ID"""
        stmt = select(Subscription).where(Subscription.id == subscription_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_active_by_organization(
        self, organization_id: UUID
    ) -> Optional[Subscription]:
        """Get the active subscription that started most recently"""
        stmt = (
            select(Subscription)
            .where(
                Subscription.organization_id == organization_id,
                Subscription.status == SubscriptionStatus.active,
            )
            .order_by(Subscription.start_date.desc(), Subscription.created_at.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_active_by_organization(self, organization_id: UUID) -> List[Subscription]:
        """List every active subscription of an organization"""
        stmt = select(Subscription).where(
            Subscription.organization_id == organization_id,
            Subscription.status == SubscriptionStatus.active,
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, subscription: Subscription) -> Subscription:
        """Create a new subscription"""
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription

    async def update(self, subscription: Subscription) -> Subscription:
        """Update existing subscription"""
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription
