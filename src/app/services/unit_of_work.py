from abc import ABC, abstractmethod

from src.app.repositories.emission_record_repository import IEmissionRecordRepository
from src.app.repositories.emission_source_repository import IEmissionSourceRepository
from src.app.repositories.factory_repository import IFactoryRepository
from src.app.repositories.goal_repository import IGoalRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.invoice_repository import IInvoiceRepository, IPaymentRepository
from src.app.repositories.organization_repository import IOrganizationRepository
from src.app.repositories.subscription_repository import (
    ISubscriptionPlanRepository,
    ISubscriptionRepository,
)
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    organizations: IOrganizationRepository
    users: IUserRepository
    factories: IFactoryRepository
    emission_sources: IEmissionSourceRepository
    emission_records: IEmissionRecordRepository
    goals: IGoalRepository
    subscription_plans: ISubscriptionPlanRepository
    subscriptions: ISubscriptionRepository
    invoices: IInvoiceRepository
    payments: IPaymentRepository
    invitations: IInvitationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
