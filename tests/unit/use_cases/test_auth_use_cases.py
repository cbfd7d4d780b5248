from decimal import Decimal
from uuid import uuid4

import bcrypt
import pytest

from src.api.utils.jwt import verify_jwt
from src.app.use_cases.auth import (
    LoginUseCase,
    RegisterOrganizationCommand,
    RegisterOrganizationUseCase,
)
from src.app.use_cases.subscriptions import PurchaseSubscriptionUseCase
from src.domain.entities import PlanType, SubscriptionPlan, User, UserRole, UserStatus


def make_plan(plan_type=PlanType.free, price="0"):
    return SubscriptionPlan(
        id=uuid4(),
        name="Free" if plan_type == PlanType.free else "Pro",
        type=plan_type,
        price=Decimal(price),
        max_users=3,
        max_factories=1,
    )


def register_command(plan_id):
    return RegisterOrganizationCommand(
        first_name="Ada",
        last_name="Admin",
        email="founder@acme.com",
        password="SecurePass123!",
        organization_name="Acme Corp",
        plan_id=plan_id,
    )


@pytest.mark.asyncio
async def test_register_on_free_plan_is_not_charged(mock_uow):
    plan = make_plan()
    mock_uow.users.get_by_email.return_value = None
    mock_uow.subscription_plans.get_by_id.return_value = plan

    result = await RegisterOrganizationUseCase(mock_uow).execute(register_command(plan.id))

    assert result.is_ok()
    assert result.value.role == "administrator"
    assert result.value.dashboard_path == "/dashboards/admin"
    assert result.value.invoice_id is None
    mock_uow.invoices.create.assert_not_called()
    mock_uow.commit.assert_called_once()

    subscription = mock_uow.subscriptions.create.call_args.args[0]
    assert (subscription.end_date.year * 12 + subscription.end_date.month) - (
        subscription.start_date.year * 12 + subscription.start_date.month
    ) == 1

    payload = verify_jwt(result.value.access_token)
    assert payload["role"] == "administrator"
    assert payload["organization_id"] == result.value.organization_id


@pytest.mark.asyncio
async def test_register_on_paid_plan_writes_invoice_and_payment(mock_uow):
    plan = make_plan(PlanType.paid, "499.00")
    mock_uow.users.get_by_email.return_value = None
    mock_uow.subscription_plans.get_by_id.return_value = plan

    result = await RegisterOrganizationUseCase(mock_uow).execute(register_command(plan.id))

    assert result.is_ok()
    assert result.value.invoice_id is not None
    invoice = mock_uow.invoices.create.call_args.args[0]
    payment = mock_uow.payments.create.call_args.args[0]
    assert invoice.total_amount == Decimal("499.00")
    assert payment.amount == Decimal("499.00")
    assert payment.invoice_id == invoice.id


@pytest.mark.asyncio
async def test_register_with_taken_email(mock_uow):
    mock_uow.users.get_by_email.return_value = User(
        organization_id=uuid4(),
        role=UserRole.administrator,
        first_name="A",
        last_name="B",
        email="founder@acme.com",
        password_hash="x",
    )

    result = await RegisterOrganizationUseCase(mock_uow).execute(register_command(uuid4()))

    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.organizations.create.assert_not_called()


@pytest.mark.asyncio
async def test_register_with_unknown_plan(mock_uow):
    mock_uow.users.get_by_email.return_value = None
    mock_uow.subscription_plans.get_by_id.return_value = None

    result = await RegisterOrganizationUseCase(mock_uow).execute(register_command(uuid4()))

    assert result.error.code == "PLAN_NOT_FOUND"


@pytest.mark.asyncio
async def test_checkout_rejects_free_plan(mock_uow):
    plan = make_plan()
    mock_uow.users.get_by_email.return_value = None
    mock_uow.subscription_plans.get_by_id.return_value = plan

    result = await PurchaseSubscriptionUseCase(mock_uow).execute(register_command(plan.id))

    assert result.error.code == "INVALID_PLAN"
    mock_uow.organizations.create.assert_not_called()


@pytest.fixture
def registered_user():
    password_hash = bcrypt.hashpw(b"SecurePass123!", bcrypt.gensalt(12))
    return User(
        id=uuid4(),
        organization_id=uuid4(),
        role=UserRole.sustainability_officer,
        status=UserStatus.active,
        first_name="Sam",
        last_name="Lee",
        email="officer@acme.com",
        password_hash=password_hash.decode(),
    )


@pytest.mark.asyncio
async def test_successful_login(mock_uow, registered_user):
    mock_uow.users.get_by_email.return_value = registered_user

    result = await LoginUseCase(mock_uow).execute("officer@acme.com", "SecurePass123!")

    assert result.is_ok()
    assert result.value.token_type == "bearer"
    assert result.value.dashboard_path == "/dashboards/officer"
    payload = verify_jwt(result.value.access_token)
    assert payload["user_id"] == str(registered_user.id)
    assert payload["organization_id"] == str(registered_user.organization_id)
    assert payload["role"] == "sustainability_officer"


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, registered_user):
    mock_uow.users.get_by_email.return_value = registered_user

    result = await LoginUseCase(mock_uow).execute("officer@acme.com", "WrongPass!")

    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unknown_email_gives_same_error(mock_uow):
    mock_uow.users.get_by_email.return_value = None

    result = await LoginUseCase(mock_uow).execute("nobody@acme.com", "whatever123")

    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_inactive_user_cannot_login(mock_uow, registered_user):
    registered_user.status = UserStatus.inactive
    mock_uow.users.get_by_email.return_value = registered_user

    result = await LoginUseCase(mock_uow).execute("officer@acme.com", "SecurePass123!")

    assert result.error.code == "USER_INACTIVE"
