import pytest
from httpx import AsyncClient


@pytest.fixture
def goal_payload(global_sources):
    return {
        "emission_source_id": global_sources["diesel"],
        "title": "Cut diesel use",
        "description": "Switch forklifts to electric",
        "target_value": "1000",
        "period": "yearly",
        "start_date": "2024-01-01",
        "end_date": "2024-12-31",
    }


@pytest.mark.asyncio
async def test_goal_lifecycle(client: AsyncClient, register, goal_payload):
    headers, _ = await register()

    response = await client.post("/goals", headers=headers, json=goal_payload)
    assert response.status_code == 201
    goal = response.json()
    assert goal["status"] == "active"

    response = await client.put(
        f"/goals/{goal['id']}", headers=headers, json={**goal_payload, "title": "Cut diesel by 20%"}
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Cut diesel by 20%"

    response = await client.patch(
        f"/goals/{goal['id']}/status", headers=headers, json={"status": "completed"}
    )
    assert response.status_code == 200
    assert response.json()["status"] == "completed"

    response = await client.get(f"/goals/{goal['id']}", headers=headers)
    assert response.json()["source_name"] == "Diesel"

    response = await client.delete(f"/goals/{goal['id']}", headers=headers)
    assert response.status_code == 204
    assert (await client.get("/goals", headers=headers)).json()["goals"] == []


@pytest.mark.asyncio
async def test_goal_validation(client: AsyncClient, register, goal_payload):
    headers, _ = await register()

    response = await client.post(
        "/goals", headers=headers, json={**goal_payload, "end_date": "2023-12-31"}
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_DATE_RANGE"

    response = await client.post(
        "/goals", headers=headers, json={**goal_payload, "target_value": "-5"}
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TARGET_VALUE"


@pytest.mark.asyncio
async def test_goals_are_isolated_between_organizations(
    client: AsyncClient, register, goal_payload
):
    acme, _ = await register(email="a@acme.com")
    globex, _ = await register(email="b@globex.com", organization_name="Globex")
    goal = (await client.post("/goals", headers=acme, json=goal_payload)).json()

    response = await client.get(f"/goals/{goal['id']}", headers=globex)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "GOAL_NOT_FOUND"
