"""
Subscription billing helpers shared by registration, checkout and renewal.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import add_months, utcnow
from src.domain.entities import (
    Invoice,
    Payment,
    PlanType,
    Subscription,
    SubscriptionPlan,
    SubscriptionStatus,
)

logger = logging.getLogger(__name__)

FREE_PLAN_MONTHS = 1
PAID_PLAN_MONTHS = 12


def subscription_period(plan: SubscriptionPlan, start: date) -> Tuple[date, date]:
    """Free plans run for one month, paid plans for one year"""
    months = FREE_PLAN_MONTHS if plan.type == PlanType.free else PAID_PLAN_MONTHS
    return start, add_months(start, months)


async def start_subscription(
    uow: UnitOfWork,
    organization_id: UUID,
    plan: SubscriptionPlan,
    charge: bool,
    start: Optional[date] = None,
) -> Tuple[Subscription, Optional[Invoice]]:
    """
    Create an active subscription and, when charged, its paid invoice and
    completed payment. Does not commit.
    """
    start_date, end_date = subscription_period(plan, start or utcnow().date())
    subscription = Subscription(
        organization_id=organization_id,
        plan_id=plan.id,
        start_date=start_date,
        end_date=end_date,
        status=SubscriptionStatus.active,
    )
    await uow.subscriptions.create(subscription)

    if not charge:
        return subscription, None

    invoice = Invoice(subscription_id=subscription.id, total_amount=plan.price)
    await uow.invoices.create(invoice)
    payment = Payment(invoice_id=invoice.id, amount=plan.price)
    await uow.payments.create(payment)

    logger.info(
        f"Charged {plan.price} for plan {plan.name} to organization {organization_id}"
    )
    return subscription, invoice


def should_charge(plan: SubscriptionPlan) -> bool:
    return plan.type == PlanType.paid and plan.price > Decimal("0")
