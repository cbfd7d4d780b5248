"""
Get Billing Use Case
"""

from libs.result import Error, Result, Return
from src.app.services.entitlement_service import EntitlementService
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PlanType

from .dtos import (
    BillingResponse,
    InvoiceResponse,
    LimitsResponse,
    PlanResponse,
    SubscriptionResponse,
    UsageResponse,
)


class GetBillingUseCase:
    """
    Billing overview of the caller's organization.

    Includes the active subscription with its plan, every invoice (newest
    first) with its payments, the paid plans available for renewal, usage
    counts and plan limits.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext) -> Result[BillingResponse]:
        organization_id = context.organization_id

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            subscription_response = None
            subscription = await self.uow.subscriptions.get_active_by_organization(
                organization_id
            )
            if subscription is not None:
                plan = await self.uow.subscription_plans.get_by_id(subscription.plan_id)
                subscription_response = SubscriptionResponse.from_entity(subscription, plan)

            invoices = await self.uow.invoices.list_by_organization(organization_id)
            payments = await self.uow.payments.list_by_invoice_ids([i.id for i in invoices])
            payments_by_invoice = {}
            for payment in payments:
                payments_by_invoice.setdefault(payment.invoice_id, []).append(payment)

            paid_plans = await self.uow.subscription_plans.list_by_type(PlanType.paid)

            usage = UsageResponse(
                users=await self.uow.users.count_by_organization(organization_id),
                factories=await self.uow.factories.count_by_organization(organization_id),
                emission_records=await self.uow.emission_records.count_by_organization(
                    organization_id
                ),
            )
            limits = await EntitlementService(self.uow).get_limits(organization_id)

            return Return.ok(
                BillingResponse(
                    subscription=subscription_response,
                    invoices=[
                        InvoiceResponse.from_entity(i, payments_by_invoice.get(i.id, []))
                        for i in invoices
                    ],
                    available_plans=[PlanResponse.from_entity(p) for p in paid_plans],
                    usage=usage,
                    limits=LimitsResponse.from_limits(limits),
                )
            )
