from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from src.app.use_cases.subscriptions import RenewSubscriptionCommand, RenewSubscriptionUseCase
from src.domain.entities import PlanType, Subscription, SubscriptionPlan, SubscriptionStatus


@pytest.fixture
def plan():
    return SubscriptionPlan(
        id=uuid4(), name="Pro", type=PlanType.paid, price=Decimal("499.00"), max_users=10, max_factories=5
    )


def make_subscription(organization_id, plan_id):
    return Subscription(
        id=uuid4(),
        organization_id=organization_id,
        plan_id=plan_id,
        start_date=date(2024, 1, 1),
        end_date=date(2025, 1, 1),
        status=SubscriptionStatus.active,
    )


@pytest.mark.asyncio
async def test_renew_expires_every_active_subscription(mock_uow, admin_context, plan):
    current = make_subscription(admin_context.organization_id, plan.id)
    stray = make_subscription(admin_context.organization_id, plan.id)
    mock_uow.subscription_plans.get_by_id.return_value = plan
    mock_uow.subscriptions.get_by_id.return_value = current
    mock_uow.subscriptions.list_active_by_organization.return_value = [current, stray]

    result = await RenewSubscriptionUseCase(mock_uow).execute(
        admin_context, RenewSubscriptionCommand(subscription_id=current.id, plan_id=plan.id)
    )

    assert result.is_ok()
    assert current.status == SubscriptionStatus.expired
    assert stray.status == SubscriptionStatus.expired
    assert set(result.value.expired_subscription_ids) == {str(current.id), str(stray.id)}

    renewed = mock_uow.subscriptions.create.call_args.args[0]
    assert renewed.status == SubscriptionStatus.active
    assert renewed.end_date.year == renewed.start_date.year + 1
    mock_uow.invoices.create.assert_called_once()
    mock_uow.payments.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_renew_foreign_subscription_is_not_found(mock_uow, admin_context, plan):
    mock_uow.subscription_plans.get_by_id.return_value = plan
    mock_uow.subscriptions.get_by_id.return_value = make_subscription(uuid4(), plan.id)

    result = await RenewSubscriptionUseCase(mock_uow).execute(
        admin_context, RenewSubscriptionCommand(subscription_id=uuid4(), plan_id=plan.id)
    )

    assert result.error.code == "SUBSCRIPTION_NOT_FOUND"
    mock_uow.subscriptions.create.assert_not_called()


@pytest.mark.asyncio
async def test_only_administrators_renew(mock_uow, officer_context):
    result = await RenewSubscriptionUseCase(mock_uow).execute(
        officer_context, RenewSubscriptionCommand(subscription_id=uuid4(), plan_id=uuid4())
    )

    assert result.error.code == "INSUFFICIENT_ROLE"
