"""
Integration tests for /api/equipment.

Covered:
- create, fetch by ?id=, list with filters
- PUT with the id in the body
- DELETE and missing ids
"""

import uuid

import pytest

pytestmark = pytest.mark.integration

URL = "/api/equipment"


async def create(client, name: str, category: str) -> dict:
    response = await client.post(URL, json={"name": name, "description": f"A {name.lower()}", "category": category})
    assert response.status_code == 201
    return response.json()


async def test_create_and_fetch(client):
    barbell = await create(client, "Barbell", "Free weights")
    response = await client.get(URL, params={"id": barbell["id"]})
    assert response.status_code == 200
    assert response.json()["category"] == "Free weights"


async def test_list_ordered_and_filtered(client):
    await create(client, "Kettlebell", "Free weights")
    await create(client, "Cable machine", "Machines")
    await create(client, "Barbell", "Free weights")

    everything = await client.get(URL)
    assert [e["name"] for e in everything.json()] == ["Barbell", "Cable machine", "Kettlebell"]

    free_weights = await client.get(URL, params={"category": "free"})
    assert [e["name"] for e in free_weights.json()] == ["Barbell", "Kettlebell"]


async def test_put_and_delete(client):
    bench = await create(client, "Bench", "Benches")
    updated = await client.put(URL, json={"id": bench["id"], "name": "Adjustable bench"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Adjustable bench"
    assert updated.json()["category"] == "Benches"

    deleted = await client.request("DELETE", URL, json={"id": bench["id"]})
    assert deleted.json() == {"success": True}
    assert (await client.get(URL, params={"id": bench["id"]})).status_code == 404


async def test_missing_required_fields(client):
    response = await client.post(URL, json={"name": "Rings"})
    assert response.status_code == 400
    assert {d["field"] for d in response.json()["details"]} == {"description", "category"}


async def test_unknown_id(client):
    response = await client.get(URL, params={"id": str(uuid.uuid4())})
    assert response.status_code == 404
    assert response.json()["code"] == "EQUIPMENT_NOT_FOUND"
