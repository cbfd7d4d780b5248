import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_invitation_round_trip(client: AsyncClient, register, create_factory, notifications):
    admin, _ = await register()
    factory = await create_factory(admin)

    response = await client.post("/invitations", headers=admin, json={
        "email": "op@acme.com",
        "role": "factory_operator",
        "factory_id": factory["id"],
    })
    assert response.status_code == 201
    assert response.json()["status"] == "pending"

    token, organization_name = notifications.sent[-1]
    assert organization_name == "Acme Corp"

    preview = await client.get("/invitations/accept", params={"token": token})
    assert preview.status_code == 200
    assert preview.json()["email"] == "op@acme.com"
    assert preview.json()["organization_name"] == "Acme Corp"

    response = await client.post("/invitations/accept", json={
        "token": token,
        "first_name": "Ola",
        "last_name": "Nord",
        "password": "SecurePass123!",
    })
    assert response.status_code == 201
    assert response.json()["dashboard_path"] == "/dashboards/operator"

    # Token is single use
    response = await client.post("/invitations/accept", json={
        "token": token,
        "first_name": "Ola",
        "last_name": "Nord",
        "password": "SecurePass123!",
    })
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVITATION_NOT_FOUND"

    login = await client.post("/auth/login", json={
        "email": "op@acme.com",
        "password": "SecurePass123!",
    })
    assert login.status_code == 200
    assert login.json()["role"] == "factory_operator"


@pytest.mark.asyncio
async def test_invitation_validation(client: AsyncClient, register):
    admin, _ = await register()

    response = await client.post("/invitations", headers=admin, json={
        "email": "boss@acme.com",
        "role": "administrator",
    })
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ROLE"

    response = await client.post("/invitations", headers=admin, json={
        "email": "op@acme.com",
        "role": "factory_operator",
    })
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "FACTORY_REQUIRED"

    await client.post("/invitations", headers=admin, json={
        "email": "officer@acme.com",
        "role": "sustainability_officer",
    })
    response = await client.post("/invitations", headers=admin, json={
        "email": "officer@acme.com",
        "role": "sustainability_officer",
    })
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INVITATION_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_user_cap_blocks_invitations(client: AsyncClient, register, invite_member):
    """Free plan allows two users: the administrator plus one member"""
    admin, _ = await register(plan="free")
    await invite_member(admin, "officer@acme.com", "sustainability_officer")

    response = await client.post("/invitations", headers=admin, json={
        "email": "second@acme.com",
        "role": "sustainability_officer",
    })

    assert response.status_code == 402
    assert response.json()["error"]["code"] == "USER_LIMIT_REACHED"


@pytest.mark.asyncio
async def test_cancelled_invitation_cannot_be_accepted(
    client: AsyncClient, register, notifications
):
    admin, _ = await register()
    invitation_id = (
        await client.post("/invitations", headers=admin, json={
            "email": "officer@acme.com",
            "role": "sustainability_officer",
        })
    ).json()["id"]
    token, _ = notifications.sent[-1]

    response = await client.post(f"/invitations/{invitation_id}/cancel", headers=admin)
    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"

    response = await client.get("/invitations/accept", params={"token": token})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_resend_notifies_again(client: AsyncClient, register, notifications):
    admin, _ = await register()
    sent = (
        await client.post("/invitations", headers=admin, json={
            "email": "officer@acme.com",
            "role": "sustainability_officer",
        })
    ).json()

    response = await client.post(f"/invitations/{sent['id']}/resend", headers=admin)

    assert response.status_code == 200
    assert response.json()["expires_at"] >= sent["expires_at"]
    assert len(notifications.sent) == 2
