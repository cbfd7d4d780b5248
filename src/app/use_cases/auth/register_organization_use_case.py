"""
Register Organization Use Case

Creates a tenant: organization, first administrator and subscription.
"""

import logging

import bcrypt

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from src.app.services.billing import should_charge, start_subscription
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Organization, PlanType, User, UserRole, UserStatus

from .dtos import RegisterOrganizationCommand, RegisterOrganizationResponse, dashboard_path

logger = logging.getLogger(__name__)


class RegisterOrganizationUseCase:
    """
    Use case for registering a new organization.

    Business Rules:
    - Email must be unique across all users
    - Registering user becomes the organization's administrator
    - Password is hashed with bcrypt (cost factor 12)
    - Free plans start a one-month subscription, paid plans a one-year one
    - Paid plans with a price above zero are invoiced and paid immediately
    - Organization, user, subscription, invoice and payment commit together
    """

    # Overridden by checkout, which always invoices paid plans
    always_charge_paid = False

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _validate_plan(self, plan) -> Result[None]:
        """Hook for plan restrictions; registration accepts any plan"""
        return Return.ok(None)

    async def execute(
        self, command: RegisterOrganizationCommand
    ) -> Result[RegisterOrganizationResponse]:
        """
        Execute registration.

        Returns:
            Result with RegisterOrganizationResponse, or Error

        Errors:
            - EMAIL_ALREADY_EXISTS: Email is already registered
            - PLAN_NOT_FOUND: Plan does not exist
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user is not None:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email address is already registered")
                )

            plan = await self.uow.subscription_plans.get_by_id(command.plan_id)
            if plan is None:
                return Return.err(Error("PLAN_NOT_FOUND", "Subscription plan not found"))

            plan_check = self._validate_plan(plan)
            if plan_check.is_err():
                return Return.err(plan_check.error)

            organization = Organization(
                name=command.organization_name,
                industry=command.industry,
                city=command.city,
            )
            await self.uow.organizations.create(organization)

            password_hash = bcrypt.hashpw(command.password.encode(), bcrypt.gensalt(12))
            user = User(
                organization_id=organization.id,
                role=UserRole.administrator,
                status=UserStatus.active,
                first_name=command.first_name,
                last_name=command.last_name,
                email=command.email,
                phone=command.phone,
                password_hash=password_hash.decode(),
            )
            await self.uow.users.create(user)

            if self.always_charge_paid:
                charge = plan.type == PlanType.paid
            else:
                charge = should_charge(plan)
            subscription, invoice = await start_subscription(
                self.uow, organization.id, plan, charge=charge
            )

            await self.uow.commit()

            logger.info(
                f"Registered organization {organization.id} on plan {plan.name}"
            )

            access_token = generate_jwt(user.id, organization.id, user.role.value)
            return Return.ok(
                RegisterOrganizationResponse(
                    access_token=access_token,
                    user_id=str(user.id),
                    organization_id=str(organization.id),
                    role=user.role.value,
                    dashboard_path=dashboard_path(user.role.value),
                    subscription_id=str(subscription.id),
                    plan_name=plan.name,
                    invoice_id=str(invoice.id) if invoice else None,
                )
            )
