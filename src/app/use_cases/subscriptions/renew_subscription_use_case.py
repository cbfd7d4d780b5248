"""
Renew Subscription Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role
from src.app.services.billing import start_subscription
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SubscriptionStatus, UserRole

from .dtos import RenewSubscriptionCommand, RenewSubscriptionResponse, SubscriptionResponse

logger = logging.getLogger(__name__)


class RenewSubscriptionUseCase:
    """
    Use case for renewing (or changing) the organization's subscription.

    Business Rules:
    - Only administrators can renew
    - The subscription being renewed must belong to the caller's organization
    - Every active subscription of the organization is expired, so exactly
      one stays active afterwards
    - The new period starts today (free: one month, paid: one year)
    - Renewal is always invoiced and paid
    - Expiry, new subscription, invoice and payment commit together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, command: RenewSubscriptionCommand
    ) -> Result[RenewSubscriptionResponse]:
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            plan = await self.uow.subscription_plans.get_by_id(command.plan_id)
            if plan is None:
                return Return.err(Error("PLAN_NOT_FOUND", "Subscription plan not found"))

            current = await self.uow.subscriptions.get_by_id(command.subscription_id)
            if current is None or current.organization_id != context.organization_id:
                return Return.err(
                    Error("SUBSCRIPTION_NOT_FOUND", "Current subscription not found")
                )

            expired_ids = []
            for active in await self.uow.subscriptions.list_active_by_organization(
                context.organization_id
            ):
                active.status = SubscriptionStatus.expired
                await self.uow.subscriptions.update(active)
                expired_ids.append(str(active.id))

            subscription, invoice = await start_subscription(
                self.uow, context.organization_id, plan, charge=True
            )

            await self.uow.commit()

            logger.info(
                f"Organization {context.organization_id} renewed onto plan {plan.name}"
            )

            return Return.ok(
                RenewSubscriptionResponse(
                    subscription=SubscriptionResponse.from_entity(subscription, plan),
                    invoice_id=str(invoice.id),
                    expired_subscription_ids=expired_ids,
                )
            )
