from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notification_service import NotificationService
from src.depends import get_notification_service, get_unit_of_work
from src.domain.entities import EmissionSource, PlanType, SubscriptionPlan


class RecordingNotificationService(NotificationService):
    """Keeps (token, organization name) of every sent invitation"""

    def __init__(self):
        self.sent = []

    async def send_invitation(self, invitation, organization_name):
        self.sent.append((invitation.token, organization_name))


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def admin_headers():
    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest.fixture
def notifications():
    return RecordingNotificationService()


@pytest_asyncio.fixture
async def client(db_session, notifications):
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notification_service] = lambda: notifications

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def plans(db_session):
    """Free plan (1 factory, 2 users) and a paid plan (2 factories, 3 users)"""
    free = SubscriptionPlan(
        name="Free", type=PlanType.free, price=Decimal("0"), max_users=2, max_factories=1,
        duration="1 month",
    )
    pro = SubscriptionPlan(
        name="Pro", type=PlanType.paid, price=Decimal("499.00"), max_users=3, max_factories=2,
        duration="12 months",
    )
    db_session.add_all([free, pro])
    await db_session.commit()
    return {"free": str(free.id), "pro": str(pro.id)}


@pytest_asyncio.fixture
async def global_sources(db_session):
    diesel = EmissionSource(
        name="Diesel", scope="Scope 1", unit="L", emission_factor=Decimal("2.68")
    )
    electricity = EmissionSource(
        name="Grid electricity", scope="Scope 2", unit="kWh", emission_factor=Decimal("0.5")
    )
    retired = EmissionSource(
        name="Coal", scope="Scope 1", unit="kg", emission_factor=Decimal("2.4"), is_active=False
    )
    db_session.add_all([diesel, electricity, retired])
    await db_session.commit()
    return {
        "diesel": str(diesel.id),
        "electricity": str(electricity.id),
        "retired": str(retired.id),
    }


@pytest.fixture
def register(client, plans):
    """Register an organization and return its administrator's auth headers"""

    async def _register(email="founder@acme.com", plan="pro", organization_name="Acme Corp"):
        response = await client.post("/auth/register", json={
            "first_name": "Ada",
            "last_name": "Admin",
            "email": email,
            "password": "SecurePass123!",
            "organization_name": organization_name,
            "plan_id": plans[plan],
        })
        assert response.status_code == 201, response.text
        data = response.json()
        return {"Authorization": f"Bearer {data['access_token']}"}, data

    return _register


@pytest.fixture
def invite_member(client, notifications):
    """Invite and accept a member; returns the member's auth headers"""

    async def _invite(admin_headers, email, role, factory_id=None):
        response = await client.post("/invitations", headers=admin_headers, json={
            "email": email,
            "role": role,
            "factory_id": factory_id,
        })
        assert response.status_code == 201, response.text
        token, _ = notifications.sent[-1]

        response = await client.post("/invitations/accept", json={
            "token": token,
            "first_name": "New",
            "last_name": "Member",
            "password": "SecurePass123!",
        })
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _invite


@pytest.fixture
def create_factory(client):
    async def _create(headers, code="F-001", name="Plant A"):
        response = await client.post("/factories", headers=headers, json={
            "code": code,
            "name": name,
            "location": "Oslo",
        })
        assert response.status_code == 201, response.text
        return response.json()

    return _create
