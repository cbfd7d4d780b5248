from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.request_context import RequestContext
from src.domain.entities import UserRole

REPOSITORIES = (
    "organizations",
    "users",
    "factories",
    "emission_sources",
    "emission_records",
    "goals",
    "subscription_plans",
    "subscriptions",
    "invoices",
    "payments",
    "invitations",
)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Every repository method is awaitable
    for name in REPOSITORIES:
        setattr(uow, name, AsyncMock())

    return uow


@pytest.fixture
def organization_id():
    return uuid4()


@pytest.fixture
def admin_context(organization_id):
    return RequestContext(
        user_id=uuid4(), organization_id=organization_id, role=UserRole.administrator
    )


@pytest.fixture
def officer_context(organization_id):
    return RequestContext(
        user_id=uuid4(),
        organization_id=organization_id,
        role=UserRole.sustainability_officer,
    )


@pytest.fixture
def operator_context(organization_id):
    return RequestContext(
        user_id=uuid4(), organization_id=organization_id, role=UserRole.factory_operator
    )
