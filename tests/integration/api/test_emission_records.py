import pytest
from httpx import AsyncClient


@pytest.fixture
def record_payload(global_sources):
    def _payload(factory_id, source="diesel", year=2024, month=3, quantity="100"):
        return {
            "factory_id": factory_id,
            "emission_source_id": global_sources[source],
            "year": year,
            "month": month,
            "quantity": quantity,
        }

    return _payload


@pytest.mark.asyncio
async def test_create_record_returns_emissions(
    client: AsyncClient, register, create_factory, record_payload
):
    headers, _ = await register()
    factory = await create_factory(headers)

    response = await client.post(
        "/emission-records", headers=headers, json=record_payload(factory["id"])
    )

    assert response.status_code == 201
    data = response.json()
    assert data["emissions"] == pytest.approx(268.0)
    assert data["scope"] == "Scope 1"
    assert data["factory_name"] == "Plant A"


@pytest.mark.asyncio
async def test_duplicate_period_is_rejected(
    client: AsyncClient, register, create_factory, record_payload
):
    headers, _ = await register()
    factory = await create_factory(headers)
    await client.post("/emission-records", headers=headers, json=record_payload(factory["id"]))

    response = await client.post(
        "/emission-records", headers=headers, json=record_payload(factory["id"], quantity="5")
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "DUPLICATE_PERIOD_ENTRY"

    listing = (await client.get("/emission-records", headers=headers)).json()
    assert len(listing["records"]) == 1


@pytest.mark.asyncio
async def test_update_cannot_collide_with_another_period(
    client: AsyncClient, register, create_factory, record_payload
):
    headers, _ = await register()
    factory = await create_factory(headers)
    march = (
        await client.post("/emission-records", headers=headers, json=record_payload(factory["id"]))
    ).json()
    await client.post(
        "/emission-records", headers=headers, json=record_payload(factory["id"], month=4)
    )

    response = await client.put(
        f"/emission-records/{march['id']}",
        headers=headers,
        json=record_payload(factory["id"], month=4),
    )
    assert response.status_code == 409

    response = await client.put(
        f"/emission-records/{march['id']}",
        headers=headers,
        json=record_payload(factory["id"], quantity="50"),
    )
    assert response.status_code == 200
    assert response.json()["emissions"] == pytest.approx(134.0)


@pytest.mark.asyncio
async def test_invalid_values_are_rejected(
    client: AsyncClient, register, create_factory, record_payload
):
    headers, _ = await register()
    factory = await create_factory(headers)

    response = await client.post(
        "/emission-records", headers=headers, json=record_payload(factory["id"], month=13)
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_MONTH"

    response = await client.post(
        "/emission-records", headers=headers, json=record_payload(factory["id"], quantity="-1")
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_QUANTITY"

    response = await client.post(
        "/emission-records", headers=headers, json=record_payload(factory["id"], source="retired")
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "SOURCE_INACTIVE"


@pytest.mark.asyncio
async def test_list_summarises_by_scope_and_filters(
    client: AsyncClient, register, create_factory, record_payload
):
    headers, _ = await register()
    factory = await create_factory(headers)
    await client.post(
        "/emission-records", headers=headers, json=record_payload(factory["id"], month=1)
    )
    await client.post(
        "/emission-records",
        headers=headers,
        json=record_payload(factory["id"], source="electricity", month=1, quantity="40"),
    )

    data = (await client.get("/emission-records", headers=headers)).json()

    summary = data["summary"]
    assert summary["scope1_total"] == pytest.approx(268.0)
    assert summary["scope2_total"] == pytest.approx(20.0)
    assert summary["total"] == pytest.approx(288.0)
    assert summary["by_period"] == {"2024-01": pytest.approx(288.0)}

    filtered = (
        await client.get("/emission-records", headers=headers, params={"scope": "Scope 2"})
    ).json()
    assert len(filtered["records"]) == 1
    assert filtered["summary"]["total"] == pytest.approx(20.0)


@pytest.mark.asyncio
async def test_records_are_ordered_newest_period_first(
    client: AsyncClient, register, create_factory, record_payload
):
    headers, _ = await register()
    factory = await create_factory(headers)
    for year, month in [(2023, 12), (2024, 2), (2024, 1)]:
        await client.post(
            "/emission-records",
            headers=headers,
            json=record_payload(factory["id"], year=year, month=month),
        )

    records = (await client.get("/emission-records", headers=headers)).json()["records"]

    assert [(r["year"], r["month"]) for r in records] == [(2024, 2), (2024, 1), (2023, 12)]


@pytest.mark.asyncio
async def test_detail_lists_similar_records(
    client: AsyncClient, register, create_factory, record_payload
):
    headers, _ = await register()
    factory = await create_factory(headers)
    first = (
        await client.post(
            "/emission-records", headers=headers, json=record_payload(factory["id"], month=1)
        )
    ).json()
    await client.post(
        "/emission-records", headers=headers, json=record_payload(factory["id"], month=2)
    )

    response = await client.get(f"/emission-records/{first['id']}", headers=headers)

    assert response.status_code == 200
    data = response.json()
    assert data["record"]["id"] == first["id"]
    assert [r["month"] for r in data["similar_records"]] == [2]


@pytest.mark.asyncio
async def test_records_are_isolated_between_organizations(
    client: AsyncClient, register, create_factory, record_payload
):
    acme, _ = await register(email="a@acme.com")
    globex, _ = await register(email="b@globex.com", organization_name="Globex")
    factory = await create_factory(acme)
    record = (
        await client.post("/emission-records", headers=acme, json=record_payload(factory["id"]))
    ).json()

    assert (await client.get("/emission-records", headers=globex)).json()["records"] == []

    response = await client.get(f"/emission-records/{record['id']}", headers=globex)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RECORD_NOT_FOUND"

    response = await client.delete(f"/emission-records/{record['id']}", headers=globex)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_operator_sees_only_assigned_factory(
    client: AsyncClient, register, create_factory, invite_member, record_payload
):
    admin, _ = await register()
    plant_a = await create_factory(admin, code="F-001", name="Plant A")
    plant_b = await create_factory(admin, code="F-002", name="Plant B")
    await client.post("/emission-records", headers=admin, json=record_payload(plant_b["id"]))
    operator = await invite_member(admin, "op@acme.com", "factory_operator", plant_a["id"])

    response = await client.post(
        "/emission-records", headers=operator, json=record_payload(plant_a["id"])
    )
    assert response.status_code == 201

    response = await client.post(
        "/emission-records", headers=operator, json=record_payload(plant_b["id"], month=5)
    )
    assert response.status_code == 403

    records = (await client.get("/emission-records", headers=operator)).json()["records"]
    assert [r["factory_id"] for r in records] == [plant_a["id"]]

    factories = (await client.get("/factories", headers=operator)).json()["factories"]
    assert [f["id"] for f in factories] == [plant_a["id"]]


@pytest.mark.asyncio
async def test_delete_record(client: AsyncClient, register, create_factory, record_payload):
    headers, _ = await register()
    factory = await create_factory(headers)
    record = (
        await client.post("/emission-records", headers=headers, json=record_payload(factory["id"]))
    ).json()

    response = await client.delete(f"/emission-records/{record['id']}", headers=headers)

    assert response.status_code == 204
    response = await client.get(f"/emission-records/{record['id']}", headers=headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_operator_similar_records_stay_within_assigned_factory(
    client: AsyncClient, register, create_factory, invite_member, record_payload
):
    admin, _ = await register()
    plant_a = await create_factory(admin)
    plant_b = await create_factory(admin, code="F-002", name="Plant B")
    oldest = (
        await client.post(
            "/emission-records",
            headers=admin,
            json=record_payload(plant_a["id"], year=2023, month=1),
        )
    ).json()
    await client.post(
        "/emission-records", headers=admin, json=record_payload(plant_a["id"], year=2023, month=2)
    )
    for month in range(1, 6):
        await client.post(
            "/emission-records",
            headers=admin,
            json=record_payload(plant_b["id"], year=2024, month=month),
        )
    operator = await invite_member(admin, "op@acme.com", "factory_operator", plant_a["id"])

    response = await client.get(f"/emission-records/{oldest['id']}", headers=operator)

    assert response.status_code == 200
    similar = response.json()["similar_records"]
    assert [(r["year"], r["month"]) for r in similar] == [(2023, 2)]
