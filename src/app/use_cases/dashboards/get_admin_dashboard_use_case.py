"""
Administrator Dashboard Use Case
"""

from libs.result import Result, Return
from src.app.repositories.read_models import RecordScope
from src.app.services.access_policy import check_role
from src.app.services.emission_aggregator import ZERO, aggregate_emissions, to_display
from src.app.services.entitlement_service import EntitlementService
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.subscriptions.dtos import LimitsResponse, SubscriptionResponse
from src.domain.entities import UserRole, UserStatus

from .dtos import AdminDashboardResponse, FactoryEmissions, UserCounts

FACTORY_EMISSIONS_PLACES = 2


class GetAdminDashboardUseCase:
    """
    Organization overview for administrators.

    Data compliance is the share of factories with at least one emission
    record, as a percentage; 0 when there are no factories.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext) -> Result[AdminDashboardResponse]:
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        organization_id = context.organization_id
        async with self.uow:
            users = await self.uow.users.list_by_organization(organization_id)
            counts = UserCounts(
                total=len(users),
                active=sum(1 for u in users if u.status == UserStatus.active),
                administrators=sum(1 for u in users if u.role == UserRole.administrator),
                sustainability_officers=sum(
                    1 for u in users if u.role == UserRole.sustainability_officer
                ),
                factory_operators=sum(1 for u in users if u.role == UserRole.factory_operator),
            )

            scope = RecordScope.organization_wide(organization_id)
            factories = await self.uow.factories.list_in_scope(scope)
            with_records = set(
                await self.uow.emission_records.list_factory_ids_with_records(organization_id)
            )
            factories_with_records = sum(1 for f in factories if f.id in with_records)
            data_compliance = (
                factories_with_records * 100.0 / len(factories) if factories else 0.0
            )

            summary = aggregate_emissions(
                await self.uow.emission_records.list_with_factor(scope)
            )
            factory_emissions = [
                FactoryEmissions(
                    factory_id=str(f.id),
                    factory_name=f.name,
                    emissions=to_display(
                        summary.by_factory.get(f.id, ZERO), FACTORY_EMISSIONS_PLACES
                    ),
                )
                for f in factories
            ]

            subscription_response = None
            subscription = await self.uow.subscriptions.get_active_by_organization(
                organization_id
            )
            if subscription is not None:
                plan = await self.uow.subscription_plans.get_by_id(subscription.plan_id)
                subscription_response = SubscriptionResponse.from_entity(subscription, plan)

            limits = await EntitlementService(self.uow).get_limits(organization_id)

            return Return.ok(
                AdminDashboardResponse(
                    users=counts,
                    total_factories=len(factories),
                    factories_with_records=factories_with_records,
                    data_compliance=round(data_compliance, 2),
                    factory_emissions=factory_emissions,
                    subscription=subscription_response,
                    limits=LimitsResponse.from_limits(limits),
                )
            )
