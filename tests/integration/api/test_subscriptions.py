import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_plans_are_public(client: AsyncClient, plans):
    response = await client.get("/subscriptions/plans")

    assert response.status_code == 200
    assert {p["name"] for p in response.json()} == {"Free", "Pro"}

    paid = (await client.get("/subscriptions/plans", params={"plan_type": "paid"})).json()
    assert [p["name"] for p in paid] == ["Pro"]

    response = await client.get("/subscriptions/plans", params={"plan_type": "gold"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PLAN_TYPE"


@pytest.mark.asyncio
async def test_checkout_requires_paid_plan(client: AsyncClient, plans):
    payload = {
        "first_name": "Ada",
        "last_name": "Admin",
        "email": "founder@acme.com",
        "password": "SecurePass123!",
        "organization_name": "Acme Corp",
    }

    response = await client.post(
        "/subscriptions/checkout", json={**payload, "plan_id": plans["free"]}
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PLAN"

    response = await client.post(
        "/subscriptions/checkout", json={**payload, "plan_id": plans["pro"]}
    )
    assert response.status_code == 201
    assert response.json()["invoice_id"] is not None


@pytest.mark.asyncio
async def test_billing_overview(client: AsyncClient, register, create_factory):
    headers, _ = await register(plan="pro")
    await create_factory(headers)

    response = await client.get("/subscriptions/billing", headers=headers)

    assert response.status_code == 200
    data = response.json()
    assert data["subscription"]["plan"]["name"] == "Pro"
    assert data["subscription"]["status"] == "active"
    assert len(data["invoices"]) == 1
    assert data["invoices"][0]["total_amount"] == pytest.approx(499.0)
    assert data["invoices"][0]["payments"][0]["status"] == "completed"
    assert data["usage"] == {"users": 1, "factories": 1, "emission_records": 0}
    assert data["limits"]["max_factories"] == 2


@pytest.mark.asyncio
async def test_renew_leaves_exactly_one_active_subscription(
    client: AsyncClient, register, plans
):
    headers, registration = await register(plan="free")

    response = await client.post("/subscriptions/renew", headers=headers, json={
        "subscription_id": registration["subscription_id"],
        "plan_id": plans["pro"],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["expired_subscription_ids"] == [registration["subscription_id"]]
    assert data["subscription"]["plan"]["name"] == "Pro"

    billing = (await client.get("/subscriptions/billing", headers=headers)).json()
    assert billing["subscription"]["id"] == data["subscription"]["id"]
    assert [i["id"] for i in billing["invoices"]] == [data["invoice_id"]]

    limits = (await client.get("/subscriptions/limits", headers=headers)).json()
    assert limits["plan_name"] == "Pro"
    assert limits["max_factories"] == 2


@pytest.mark.asyncio
async def test_renew_unknown_subscription(client: AsyncClient, register, plans):
    headers, _ = await register()

    response = await client.post("/subscriptions/renew", headers=headers, json={
        "subscription_id": "00000000-0000-0000-0000-000000000000",
        "plan_id": plans["pro"],
    })

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SUBSCRIPTION_NOT_FOUND"
