"""
Entitlement Service

Plan-based quota checks gating user and factory creation.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Subscription, SubscriptionPlan


class SubscriptionLimits(BaseModel):
    """Current usage against the caps of the active plan"""

    has_subscription: bool = False
    plan_name: Optional[str] = None
    current_users: int = 0
    max_users: int = 0
    current_factories: int = 0
    max_factories: int = 0

    @property
    def user_limit_reached(self) -> bool:
        return self.current_users >= self.max_users

    @property
    def factory_limit_reached(self) -> bool:
        return self.current_factories >= self.max_factories


class EntitlementService:
    """
    Quota checks against the organization's active subscription.

    Business Rules:
    - No active subscription denies everything
    - A missing cap on the plan counts as 0, never unlimited
    - Users are counted by membership, inactive users included
    - Creation is allowed iff current < max

    Must be called inside an entered unit of work. The check is not atomic
    with the insert that follows it; two concurrent creates may both pass.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _active_plan(
        self, organization_id: UUID
    ) -> tuple[Optional[Subscription], Optional[SubscriptionPlan]]:
        subscription = await self.uow.subscriptions.get_active_by_organization(organization_id)
        if subscription is None:
            return None, None
        plan = await self.uow.subscription_plans.get_by_id(subscription.plan_id)
        return subscription, plan

    async def can_create_user(self, organization_id: UUID) -> bool:
        _, plan = await self._active_plan(organization_id)
        if plan is None:
            return False
        max_users = plan.max_users or 0
        current_users = await self.uow.users.count_by_organization(organization_id)
        return current_users < max_users

    async def can_create_factory(self, organization_id: UUID) -> bool:
        _, plan = await self._active_plan(organization_id)
        if plan is None:
            return False
        max_factories = plan.max_factories or 0
        current_factories = await self.uow.factories.count_by_organization(organization_id)
        return current_factories < max_factories

    async def get_limits(self, organization_id: UUID) -> SubscriptionLimits:
        _, plan = await self._active_plan(organization_id)
        if plan is None:
            return SubscriptionLimits()

        return SubscriptionLimits(
            has_subscription=True,
            plan_name=plan.name,
            current_users=await self.uow.users.count_by_organization(organization_id),
            max_users=plan.max_users or 0,
            current_factories=await self.uow.factories.count_by_organization(organization_id),
            max_factories=plan.max_factories or 0,
        )
