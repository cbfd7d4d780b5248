import pytest
from httpx import AsyncClient

SOURCE_PAYLOAD = {
    "name": "Boiler gas",
    "description": "On-site boiler",
    "scope": "Scope 1",
    "unit": "m3",
    "emission_factor": "1.9",
    "formula": "quantity * factor",
}


@pytest.mark.asyncio
async def test_catalog_lists_global_and_own_sources(
    client: AsyncClient, register, global_sources
):
    acme, _ = await register(email="a@acme.com")
    globex, _ = await register(email="b@globex.com", organization_name="Globex")
    response = await client.post("/emission-sources", headers=acme, json=SOURCE_PAYLOAD)
    assert response.status_code == 201
    assert response.json()["is_global"] is False

    acme_names = [s["name"] for s in (await client.get("/emission-sources", headers=acme)).json()["sources"]]
    globex_names = [s["name"] for s in (await client.get("/emission-sources", headers=globex)).json()["sources"]]

    assert "Boiler gas" in acme_names
    assert "Boiler gas" not in globex_names
    assert {"Diesel", "Grid electricity", "Coal"} <= set(globex_names)
    # Inactive sources come last
    assert acme_names[-1] == "Coal"

    active = (
        await client.get("/emission-sources", headers=acme, params={"active_only": True})
    ).json()["sources"]
    assert "Coal" not in [s["name"] for s in active]


@pytest.mark.asyncio
async def test_global_source_is_read_only(client: AsyncClient, register, global_sources):
    headers, _ = await register()
    diesel_id = global_sources["diesel"]

    response = await client.put(f"/emission-sources/{diesel_id}", headers=headers, json=SOURCE_PAYLOAD)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SOURCE_NOT_FOUND"

    response = await client.delete(f"/emission-sources/{diesel_id}", headers=headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_and_delete_own_source(client: AsyncClient, register):
    headers, _ = await register()
    source = (await client.post("/emission-sources", headers=headers, json=SOURCE_PAYLOAD)).json()

    response = await client.put(
        f"/emission-sources/{source['id']}",
        headers=headers,
        json={**SOURCE_PAYLOAD, "emission_factor": "2.1", "is_active": False},
    )
    assert response.status_code == 200
    assert response.json()["emission_factor"] == pytest.approx(2.1)
    assert response.json()["is_active"] is False

    response = await client.delete(f"/emission-sources/{source['id']}", headers=headers)
    assert response.status_code == 204


@pytest.mark.asyncio
async def test_negative_factor_is_rejected(client: AsyncClient, register):
    headers, _ = await register()

    response = await client.post(
        "/emission-sources", headers=headers, json={**SOURCE_PAYLOAD, "emission_factor": "-1"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_EMISSION_FACTOR"


@pytest.mark.asyncio
async def test_custom_source_request_review_flow(client: AsyncClient, register, admin_headers):
    headers, _ = await register()
    response = await client.post("/emission-sources/requests", headers=headers, json={
        "name": "Biogas",
        "scope": "Scope 1",
        "unit": "m3",
    })
    assert response.status_code == 201
    requested = response.json()
    assert requested["is_active"] is False
    assert requested["request_status"] == "pending"

    response = await client.get("/admin/source-requests")
    assert response.status_code == 401

    response = await client.get(
        "/admin/source-requests", headers={"X-Admin-API-Key": "wrong-key"}
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_API_KEY"

    pending = (await client.get("/admin/source-requests", headers=admin_headers)).json()
    assert [s["id"] for s in pending["sources"]] == [requested["id"]]

    response = await client.post(
        f"/admin/source-requests/{requested['id']}/review",
        headers=admin_headers,
        json={"approve": True, "emission_factor": "0.2"},
    )
    assert response.status_code == 200
    assert response.json()["is_active"] is True
    assert response.json()["request_status"] == "approved"

    response = await client.post(
        f"/admin/source-requests/{requested['id']}/review",
        headers=admin_headers,
        json={"approve": False},
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SOURCE_NOT_PENDING"

    pending = (await client.get("/admin/source-requests", headers=admin_headers)).json()
    assert pending["sources"] == []


@pytest.mark.asyncio
async def test_operator_cannot_manage_sources(
    client: AsyncClient, register, create_factory, invite_member
):
    admin, _ = await register()
    factory = await create_factory(admin)
    operator = await invite_member(admin, "op@acme.com", "factory_operator", factory["id"])

    response = await client.post("/emission-sources", headers=operator, json=SOURCE_PAYLOAD)

    assert response.status_code == 403
