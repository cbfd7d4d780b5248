from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import PlanType, Subscription, SubscriptionPlan


class ISubscriptionPlanRepository(ABC):
    """Subscription plan repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, plan_id: UUID) -> Optional[SubscriptionPlan]:
        """Get plan by ID"""
        pass

    @abstractmethod
    async def list_by_type(self, plan_type: PlanType) -> List[SubscriptionPlan]:
        """List plans of one type"""
        pass


class ISubscriptionRepository(ABC):
    """Subscription repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, subscription_id: UUID) -> Optional[Subscription]:
        """Get subscription by ID"""
        pass

    @abstractmethod
    async def get_active_by_organization(
        self, organization_id: UUID
    ) -> Optional[Subscription]:
        """Get the active subscription that started most recently"""
        pass

    @abstractmethod
    async def list_active_by_organization(self, organization_id: UUID) -> List[Subscription]:
        """List every active subscription of an organization"""
        pass

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        """Create a new subscription"""
        pass

    @abstractmethod
    async def update(self, subscription: Subscription) -> Subscription:
        """Update existing subscription"""
        pass
