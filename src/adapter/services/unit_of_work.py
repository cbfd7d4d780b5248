from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.emission_record_repository import EmissionRecordRepository
from src.adapter.repositories.emission_source_repository import EmissionSourceRepository
from src.adapter.repositories.factory_repository import FactoryRepository
from src.adapter.repositories.goal_repository import GoalRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.invoice_repository import InvoiceRepository, PaymentRepository
from src.adapter.repositories.organization_repository import OrganizationRepository
from src.adapter.repositories.subscription_repository import (
    SubscriptionPlanRepository,
    SubscriptionRepository,
)
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.organizations = OrganizationRepository(self.session)
        self.users = UserRepository(self.session)
        self.factories = FactoryRepository(self.session)
        self.emission_sources = EmissionSourceRepository(self.session)
        self.emission_records = EmissionRecordRepository(self.session)
        self.goals = GoalRepository(self.session)
        self.subscription_plans = SubscriptionPlanRepository(self.session)
        self.subscriptions = SubscriptionRepository(self.session)
        self.invoices = InvoiceRepository(self.session)
        self.payments = PaymentRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
