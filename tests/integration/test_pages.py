"""
Integration tests for the server-rendered pages.

Covered:
- index, exercise list (filters, view mode), exercise form
- exercise form: invalid submission re-renders with 400, valid one redirects
- muscle group list, create, edit and delete through forms
"""

import pytest

pytestmark = pytest.mark.integration


async def test_index(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "LiftLog" in response.text


# ---------------------------------------------------------------------------
# Exercises
# ---------------------------------------------------------------------------

async def test_exercise_list_shows_exercises(client, squat):
    response = await client.get("/exercises")
    assert response.status_code == 200
    assert "Back Squat" in response.text
    assert "Quadriceps" in response.text


async def test_exercise_list_filters(client, squat):
    upper = await client.get("/exercises", params={"body": "UPPER"})
    assert "Back Squat" not in upper.text
    assert "No exercises match these filters." in upper.text

    lower = await client.get("/exercises", params={"body": "LOWER", "view": "list", "type": "nonsense"})
    assert lower.status_code == 200
    assert "Back Squat" in lower.text
    assert 'class="exercises list"' in lower.text


async def test_exercise_form_lists_choices(client, quadriceps):
    response = await client.get("/exercises/new")
    assert response.status_code == 200
    assert str(quadriceps.id) in response.text


async def test_invalid_exercise_form_is_rerendered(client, quadriceps):
    response = await client.post(
        "/exercises/new",
        data={"name": "Goblet Squat", "type": "STRENGTH", "difficulty": ["BEGINNER"]},
    )
    assert response.status_code == 400
    assert 'class="error"' in response.text
    assert 'value="Goblet Squat"' in response.text
    assert (await client.get("/api/exercises")).json() == []


async def test_valid_exercise_form_redirects(client, quadriceps):
    response = await client.post(
        "/exercises/new",
        data={
            "name": "Goblet Squat",
            "type": "STRENGTH",
            "muscle_groups": [str(quadriceps.id)],
            "difficulty": ["BEGINNER", "INTERMEDIATE"],
            "image_urls": "https://example.com/goblet-1.png\nhttps://example.com/goblet-2.png\n",
            "video_url": "",
        },
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/exercises"

    [exercise] = (await client.get("/api/exercises")).json()
    assert exercise["name"] == "Goblet Squat"
    assert exercise["difficulty"] == ["BEGINNER", "INTERMEDIATE"]
    assert exercise["image_urls"] == ["https://example.com/goblet-1.png", "https://example.com/goblet-2.png"]
    assert exercise["video_url"] is None


# ---------------------------------------------------------------------------
# Muscle groups
# ---------------------------------------------------------------------------

async def test_muscle_group_list(client, quadriceps, pectorals):
    response = await client.get("/muscle-groups")
    assert response.status_code == 200
    assert response.text.index("Pectoralis Major") < response.text.index("Quadriceps")


async def test_create_muscle_group_form(client):
    assert (await client.get("/muscle-groups/new")).status_code == 200

    invalid = await client.post("/muscle-groups/new", data={"name": "Calves", "description": "", "body": ""})
    assert invalid.status_code == 400
    assert 'value="Calves"' in invalid.text

    created = await client.post("/muscle-groups/new", data={"name": "Calves", "description": "Lower leg", "body": "LOWER"})
    assert created.status_code == 303
    assert [m["name"] for m in (await client.get("/api/muscle-groups")).json()] == ["Calves"]


async def test_edit_muscle_group_form(client, quadriceps):
    page = await client.get(f"/muscle-groups/{quadriceps.id}/edit")
    assert page.status_code == 200
    assert "Edit muscle group" in page.text
    assert 'value="Quadriceps"' in page.text

    invalid = await client.post(f"/muscle-groups/{quadriceps.id}/edit", data={"name": "", "description": "x", "body": "LOWER"})
    assert invalid.status_code == 400

    saved = await client.post(
        f"/muscle-groups/{quadriceps.id}/edit",
        data={"name": "Quads", "description": "Front thigh", "body": "LOWER"},
    )
    assert saved.status_code == 303
    fetched = await client.get("/api/muscle-groups", params={"id": str(quadriceps.id)})
    assert fetched.json()["name"] == "Quads"


async def test_delete_muscle_group_form(client, quadriceps):
    response = await client.post(f"/muscle-groups/{quadriceps.id}/delete")
    assert response.status_code == 303
    assert (await client.get("/api/muscle-groups")).json() == []
