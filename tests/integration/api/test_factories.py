import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_factory_cap_is_enforced(client: AsyncClient, register, create_factory):
    """Pro plan allows two factories; a third is refused until one is deleted"""
    headers, _ = await register(plan="pro")

    first = await create_factory(headers, code="F-001", name="Plant A")
    await create_factory(headers, code="F-002", name="Plant B")

    response = await client.post("/factories", headers=headers, json={
        "code": "F-003",
        "name": "Plant C",
    })
    assert response.status_code == 402
    assert response.json()["error"]["code"] == "FACTORY_LIMIT_REACHED"

    listing = (await client.get("/factories", headers=headers)).json()
    assert len(listing["factories"]) == 2
    assert listing["can_create_factory"] is False
    assert listing["max_factories"] == 2

    response = await client.delete(f"/factories/{first['id']}", headers=headers)
    assert response.status_code == 204

    await create_factory(headers, code="F-003", name="Plant C")


@pytest.mark.asyncio
async def test_factory_code_is_globally_unique(client: AsyncClient, register, create_factory):
    acme, _ = await register(email="a@acme.com")
    globex, _ = await register(email="b@globex.com", organization_name="Globex")
    await create_factory(acme, code="F-001")

    response = await client.post("/factories", headers=globex, json={
        "code": "F-001",
        "name": "Other plant",
    })

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "FACTORY_CODE_EXISTS"


@pytest.mark.asyncio
async def test_update_factory(client: AsyncClient, register, create_factory):
    headers, _ = await register()
    factory = await create_factory(headers)

    response = await client.put(f"/factories/{factory['id']}", headers=headers, json={
        "code": "F-001",
        "name": "Plant A (north)",
    })

    assert response.status_code == 200
    assert response.json()["name"] == "Plant A (north)"
    assert response.json()["location"] == ""


@pytest.mark.asyncio
async def test_factory_of_other_organization_is_not_found(
    client: AsyncClient, register, create_factory
):
    acme, _ = await register(email="a@acme.com")
    globex, _ = await register(email="b@globex.com", organization_name="Globex")
    factory = await create_factory(acme)

    response = await client.delete(f"/factories/{factory['id']}", headers=globex)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "FACTORY_NOT_FOUND"


@pytest.mark.asyncio
async def test_factory_with_records_cannot_be_deleted(
    client: AsyncClient, register, create_factory, global_sources
):
    headers, _ = await register()
    factory = await create_factory(headers)
    await client.post("/emission-records", headers=headers, json={
        "factory_id": factory["id"],
        "emission_source_id": global_sources["diesel"],
        "year": 2024,
        "month": 1,
        "quantity": "10",
    })

    response = await client.delete(f"/factories/{factory['id']}", headers=headers)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "FACTORY_HAS_RECORDS"


@pytest.mark.asyncio
async def test_officer_cannot_create_factories(
    client: AsyncClient, register, invite_member
):
    admin, _ = await register()
    officer = await invite_member(admin, "officer@acme.com", "sustainability_officer")

    response = await client.post("/factories", headers=officer, json={
        "code": "F-001",
        "name": "Plant A",
    })

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_ROLE"
