"""
Integration tests for /api/workouts.

Covered:
- sign-in required (401)
- create with exercises and sets: mm:ss durations, default ordering, embedded exercise
- start and end times without an offset are read as UTC; responses are always UTC
- exercises used in a workout get last_used_at stamped
- list newest first, date range filter, per-user scoping
- update: scalar fields, wholesale replacement of exercises, end before start (400)
- delete cascades to exercises and sets but keeps reference data
- another user's workout reads as 404
"""

import uuid

import pytest

from liftlog.api.deps import get_current_user

pytestmark = pytest.mark.integration

URL = "/api/workouts"


def leg_day(exercise_id, **overrides) -> dict:
    data = {
        "name": "Leg day",
        "notes": "Felt strong",
        "start_time": "2026-03-02T10:00:00Z",
        "end_time": "2026-03-02T11:15:00Z",
        "exercises": [
            {
                "exercise_id": str(exercise_id),
                "rest_after": "03:00",
                "notes": "High bar",
                "sets": [
                    {"reps": 5, "weight": 100, "rest": "02:00", "rest_taken": "02:30", "effort": "CHALLENGING"},
                    {"reps": 5, "weight": 110, "effort": "MAXIMUM", "notes": "Grinder"},
                ],
            }
        ],
    }
    data.update(overrides)
    return data


async def test_requires_sign_in(client):
    assert (await client.get(URL)).status_code == 401
    response = await client.post(URL, json={"name": "Leg day"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------

async def test_create_with_sets(user_client, user, squat):
    response = await user_client.post(URL, json=leg_day(squat.id))
    assert response.status_code == 201
    body = response.json()
    assert body["user_id"] == str(user.id)
    assert body["notes"] == "Felt strong"
    assert body["start_time"].startswith("2026-03-02T10:00:00")

    [exercise] = body["exercises"]
    assert exercise["exercise"] == {"id": str(squat.id), "name": "Back Squat"}
    assert exercise["order"] == 0
    assert exercise["rest_after"] == "03:00"

    first, second = exercise["sets"]
    assert (first["order"], second["order"]) == (0, 1)
    assert first["rest"] == "02:00"
    assert first["rest_taken"] == "02:30"
    assert first["duration"] is None
    assert second["weight"] == 110
    assert second["rest"] is None
    assert second["notes"] == "Grinder"


async def test_create_stamps_last_used_at(user_client, squat):
    assert squat.last_used_at is None
    await user_client.post(URL, json=leg_day(squat.id))
    exercise = await user_client.get(f"/api/exercises/{squat.id}")
    assert exercise.json()["last_used_at"] is not None


async def test_create_defaults_start_time(user_client):
    response = await user_client.post(URL, json={"name": "Quick session"})
    assert response.status_code == 201
    assert response.json()["start_time"]
    assert response.json()["exercises"] == []


async def test_create_rejects_bad_duration(user_client, squat):
    data = leg_day(squat.id)
    data["exercises"][0]["sets"][0]["rest"] = "2:00"
    response = await user_client.post(URL, json=data)
    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "exercises.0.sets.0.rest"


async def test_create_rejects_end_before_start(user_client):
    response = await user_client.post(
        URL, json={"name": "Backwards", "start_time": "2026-03-02T10:00:00Z", "end_time": "2026-03-02T09:00:00Z"}
    )
    assert response.status_code == 400


async def test_create_mixed_offsets_reads_naive_as_utc(user_client):
    response = await user_client.post(
        URL, json={"name": "Mixed", "start_time": "2026-03-02T10:00:00", "end_time": "2026-03-02T11:00:00Z"}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["start_time"] == "2026-03-02T10:00:00Z"
    assert body["end_time"] == "2026-03-02T11:00:00Z"


async def test_create_mixed_offsets_end_before_start(user_client):
    response = await user_client.post(
        URL, json={"name": "Mixed", "start_time": "2026-03-02T10:00:00Z", "end_time": "2026-03-02T09:00:00"}
    )
    assert response.status_code == 400


async def test_create_converts_offsets_to_utc(user_client):
    response = await user_client.post(
        URL, json={"name": "Abroad", "start_time": "2026-03-02T12:00:00+02:00", "end_time": "2026-03-02T10:30:00"}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["start_time"] == "2026-03-02T10:00:00Z"
    assert body["created_at"].endswith("Z")
    assert body["exercises"] == []


async def test_create_unknown_exercise(user_client):
    response = await user_client.post(URL, json=leg_day(uuid.uuid4()))
    assert response.status_code == 404
    assert response.json()["code"] == "EXERCISE_NOT_FOUND"
    assert (await user_client.get(URL)).json() == []


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------

async def test_list_newest_first_with_date_range(user_client, squat):
    for day in ("01", "03", "02"):
        await user_client.post(URL, json=leg_day(squat.id, name=f"Day {day}", start_time=f"2026-03-{day}T10:00:00Z", end_time=None))

    listed = await user_client.get(URL)
    assert [w["name"] for w in listed.json()] == ["Day 03", "Day 02", "Day 01"]

    ranged = await user_client.get(URL, params={"start_date": "2026-03-02T00:00:00Z", "end_date": "2026-03-02T23:59:59Z"})
    assert [w["name"] for w in ranged.json()] == ["Day 02"]


async def test_list_only_shows_own_workouts(app, user_client, other_user, squat):
    await user_client.post(URL, json=leg_day(squat.id))

    app.dependency_overrides[get_current_user] = lambda: other_user
    assert (await user_client.get(URL)).json() == []


async def test_other_users_workout_is_not_found(app, user_client, other_user, squat):
    workout = (await user_client.post(URL, json=leg_day(squat.id))).json()

    app.dependency_overrides[get_current_user] = lambda: other_user
    assert (await user_client.get(f"{URL}/{workout['id']}")).status_code == 404
    assert (await user_client.put(f"{URL}/{workout['id']}", json={"name": "Mine now"})).status_code == 404
    assert (await user_client.delete(f"{URL}/{workout['id']}")).status_code == 404


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------

async def test_update_scalar_fields_keeps_exercises(user_client, squat):
    workout = (await user_client.post(URL, json=leg_day(squat.id))).json()
    response = await user_client.put(f"{URL}/{workout['id']}", json={"name": "Heavy legs", "notes": None})
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Heavy legs"
    assert body["notes"] == ""
    assert len(body["exercises"][0]["sets"]) == 2


async def test_update_replaces_exercises_and_sets(user_client, squat, pectorals):
    bench = await user_client.post(
        "/api/exercises",
        json={"name": "Bench Press", "type": "STRENGTH", "muscle_groups": [str(pectorals.id)], "difficulty": ["BEGINNER"]},
    )
    workout = (await user_client.post(URL, json=leg_day(squat.id))).json()
    old_set_ids = {s["id"] for s in workout["exercises"][0]["sets"]}

    response = await user_client.put(
        f"{URL}/{workout['id']}",
        json={
            "exercises": [
                {"exercise_id": bench.json()["id"], "sets": [{"reps": 8, "weight": 60, "effort": "EASY", "duration": "00:40"}]},
                {"exercise_id": str(squat.id), "order": 5},
            ]
        },
    )
    assert response.status_code == 200
    exercises = response.json()["exercises"]
    assert [e["exercise"]["name"] for e in exercises] == ["Bench Press", "Back Squat"]
    assert [e["order"] for e in exercises] == [0, 5]
    assert exercises[0]["sets"][0]["duration"] == "00:40"
    assert exercises[1]["sets"] == []
    assert not old_set_ids & {s["id"] for e in exercises for s in e["sets"]}
    assert response.json()["name"] == "Leg day"


async def test_update_end_before_existing_start(user_client, squat):
    workout = (await user_client.post(URL, json=leg_day(squat.id))).json()
    response = await user_client.put(f"{URL}/{workout['id']}", json={"end_time": "2026-03-02T09:00:00Z"})
    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "end_time"


async def test_update_mixed_offsets(user_client, squat):
    workout = (await user_client.post(URL, json=leg_day(squat.id))).json()
    response = await user_client.put(
        f"{URL}/{workout['id']}", json={"start_time": "2026-03-02T09:00:00+00:00", "end_time": "2026-03-02T09:30:00"}
    )
    assert response.status_code == 200
    assert response.json()["end_time"] == "2026-03-02T09:30:00Z"

    response = await user_client.put(
        f"{URL}/{workout['id']}", json={"start_time": "2026-03-02T09:00:00", "end_time": "2026-03-02T08:00:00Z"}
    )
    assert response.status_code == 400


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------

async def test_delete_keeps_reference_data(user_client, squat, quadriceps):
    workout = (await user_client.post(URL, json=leg_day(squat.id))).json()

    response = await user_client.delete(f"{URL}/{workout['id']}")
    assert response.json() == {"success": True}
    assert (await user_client.get(f"{URL}/{workout['id']}")).status_code == 404

    assert (await user_client.get(f"/api/exercises/{squat.id}")).status_code == 200
    assert (await user_client.get("/api/muscle-groups", params={"id": str(quadriceps.id)})).status_code == 200
    # exercise is free to delete once no workout references it
    assert (await user_client.delete(f"/api/exercises/{squat.id}")).status_code == 200


async def test_malformed_workout_id(user_client):
    response = await user_client.get(f"{URL}/nope")
    assert response.status_code == 400
    assert response.json()["code"] == "WORKOUT_INVALID_ID"
