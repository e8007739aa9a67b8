import pytest

BASE = "/api/admin/workout-categories"

BLOCKING = {
    "name": "Blocking",
    "focusArea": "Upper Body Strength & Timing",
    "keyObjective": "Develop blocking technique and jump timing",
}


@pytest.mark.asyncio
async def test_create_category(client):
    response = await client.post(BASE, json=BLOCKING)
    assert response.status_code == 201
    data = response.json()
    assert data["id"]
    assert data["name"] == "Blocking"
    assert data["focusArea"] == "Upper Body Strength & Timing"
    assert data["exercises"] == []
    assert data["createdAt"].endswith("Z")
    assert data["createdAt"] == data["updatedAt"]


@pytest.mark.asyncio
async def test_create_category_validation_error_shape(client):
    response = await client.post(BASE, json={"name": "", "focusArea": "Timing"})
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "VALIDATION_ERROR"
    assert data["statusCode"] == 400
    assert data["timestamp"].endswith("Z")
    assert {detail["field"] for detail in data["details"]} == {"name", "keyObjective"}


@pytest.mark.asyncio
async def test_create_category_non_object_body(client):
    response = await client.post(BASE, json=["Blocking"])
    assert response.status_code == 400
    assert response.json()["message"] == "Request body must be a JSON object"


@pytest.mark.asyncio
async def test_create_category_invalid_json(client):
    response = await client.post(BASE, content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_get_category_not_found(client):
    response = await client.get(f"{BASE}/missing")
    assert response.status_code == 404
    assert response.json()["message"] == "Category not found"
    assert response.json()["error"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_list_categories_search_and_paginate(client):
    for name, focus in [("Serving", "Power & Accuracy"), ("Jumping", "Lower Body Power"), ("Passing", "Ball Control")]:
        await client.post(BASE, json={"name": name, "focusArea": focus, "keyObjective": "Get better"})

    response = await client.get(BASE)
    data = response.json()
    assert data["total"] == 3
    assert data["limit"] == 50
    assert data["offset"] == 0
    # Newest first
    assert [c["name"] for c in data["categories"]] == ["Passing", "Jumping", "Serving"]
    assert data["categories"][0]["exerciseCount"] == 0

    response = await client.get(BASE, params={"query": "POWER"})
    names = {c["name"] for c in response.json()["categories"]}
    assert names == {"Serving", "Jumping"}

    response = await client.get(BASE, params={"limit": "1", "offset": "1"})
    data = response.json()
    assert data["total"] == 3
    assert [c["name"] for c in data["categories"]] == ["Jumping"]


@pytest.mark.asyncio
async def test_list_categories_search_treats_wildcards_literally(client):
    await client.post(BASE, json=BLOCKING)
    response = await client.get(BASE, params={"query": "%"})
    assert response.json()["total"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"limit": "0"}, {"limit": "abc"}, {"offset": "-1"}, {"limit": "1001"}])
async def test_list_categories_bad_query(client, params):
    response = await client.get(BASE, params=params)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_category(client):
    created = (await client.post(BASE, json=BLOCKING)).json()

    response = await client.put(f"{BASE}/{created['id']}", json={"focusArea": "Timing"})
    assert response.status_code == 200
    data = response.json()
    assert data["focusArea"] == "Timing"
    assert data["name"] == "Blocking"
    assert data["updatedAt"] >= created["updatedAt"]


@pytest.mark.asyncio
async def test_update_category_empty_body(client):
    created = (await client.post(BASE, json=BLOCKING)).json()
    response = await client.put(f"{BASE}/{created['id']}", json={})
    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "At least one field must be provided"
    assert data["details"] == [{"field": None, "message": "At least one field must be provided"}]


@pytest.mark.asyncio
async def test_delete_category_removes_exercises(client, category):
    response = await client.delete(f"{BASE}/{category['id']}")
    assert response.status_code == 204

    response = await client.get(f"{BASE}/{category['id']}")
    assert response.status_code == 404

    response = await client.delete(f"{BASE}/{category['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_add_exercise_appends_with_next_order(client, category):
    assert [e["order"] for e in category["exercises"]] == [0, 1, 2]

    response = await client.post(f"{BASE}/{category['id']}/exercises", json={
        "name": "Squats", "sets": 3, "repetitions": "8-12", "difficulty": "medium",
    })
    assert response.status_code == 201
    data = response.json()
    assert data["order"] == 3
    assert "description" not in data


@pytest.mark.asyncio
async def test_add_exercise_validation(client, category):
    response = await client.post(f"{BASE}/{category['id']}/exercises", json={
        "name": "Squats", "sets": 11, "repetitions": "8-12", "difficulty": "hard",
    })
    assert response.status_code == 400
    assert {d["field"] for d in response.json()["details"]} == {"sets", "difficulty"}


@pytest.mark.asyncio
async def test_add_exercise_unknown_category(client):
    response = await client.post(f"{BASE}/missing/exercises", json={
        "name": "Squats", "sets": 3, "repetitions": "8-12", "difficulty": "medium",
    })
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_exercise(client, category):
    exercise = category["exercises"][1]
    response = await client.put(f"{BASE}/{category['id']}/exercises/{exercise['id']}", json={
        "difficulty": "challenging", "description": "Step off a 40cm box",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["difficulty"] == "challenging"
    assert data["description"] == "Step off a 40cm box"
    assert data["order"] == 1
    assert data["sets"] == 3


@pytest.mark.asyncio
async def test_update_exercise_not_found(client, category):
    response = await client.put(f"{BASE}/{category['id']}/exercises/missing", json={"sets": 4})
    assert response.status_code == 404
    assert response.json()["message"] == "Exercise not found"


@pytest.mark.asyncio
async def test_delete_exercise_closes_gap(client, category):
    first, second, third = category["exercises"]
    response = await client.delete(f"{BASE}/{category['id']}/exercises/{second['id']}")
    assert response.status_code == 204

    data = (await client.get(f"{BASE}/{category['id']}")).json()
    assert [(e["id"], e["order"]) for e in data["exercises"]] == [(first["id"], 0), (third["id"], 1)]


@pytest.mark.asyncio
async def test_duplicate_exercise_within_category(client, category):
    exercise = category["exercises"][0]
    response = await client.post(
        f"{BASE}/{category['id']}/exercises/{exercise['id']}/duplicate",
        json={"targetCategoryId": category["id"]},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Box Jumps (Copy)"
    assert data["order"] == 3
    assert data["id"] != exercise["id"]


@pytest.mark.asyncio
async def test_duplicate_exercise_to_other_category(client, category):
    other = (await client.post(BASE, json=BLOCKING)).json()
    exercise = category["exercises"][2]
    response = await client.post(
        f"{BASE}/{category['id']}/exercises/{exercise['id']}/duplicate",
        json={"targetCategoryId": other["id"]},
    )
    assert response.status_code == 201
    assert response.json()["name"] == "Approach Jumps"
    assert response.json()["order"] == 0

    source = (await client.get(f"{BASE}/{category['id']}")).json()
    assert len(source["exercises"]) == 3


@pytest.mark.asyncio
async def test_duplicate_exercise_missing_target(client, category):
    exercise = category["exercises"][0]
    url = f"{BASE}/{category['id']}/exercises/{exercise['id']}/duplicate"

    response = await client.post(url, json={})
    assert response.status_code == 400

    response = await client.post(url, json={"targetCategoryId": "missing"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_reorder_exercises(client, category):
    ids = [e["id"] for e in category["exercises"]]
    new_order = [ids[2], ids[0], ids[1]]

    response = await client.put(f"{BASE}/{category['id']}/exercises/reorder", json={"exerciseIds": new_order})
    assert response.status_code == 200
    exercises = response.json()["exercises"]
    assert [e["id"] for e in exercises] == new_order
    assert [e["order"] for e in exercises] == [0, 1, 2]

    data = (await client.get(f"{BASE}/{category['id']}")).json()
    assert [e["id"] for e in data["exercises"]] == new_order


@pytest.mark.asyncio
async def test_reorder_rejects_mismatched_lists(client, category):
    ids = [e["id"] for e in category["exercises"]]
    url = f"{BASE}/{category['id']}/exercises/reorder"

    response = await client.put(url, json={"exerciseIds": ids[:2]})
    assert response.status_code == 400
    assert response.json()["message"] == "Must provide all exercise IDs"

    response = await client.put(url, json={"exerciseIds": [ids[0], ids[0], ids[1]]})
    assert response.status_code == 400
    assert response.json()["message"] == "Duplicate exercise IDs"

    response = await client.put(url, json={"exerciseIds": [ids[0], ids[1], "unknown"]})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid exercise ID"

    response = await client.put(url, json={"exerciseIds": []})
    assert response.status_code == 400

    # Order untouched after rejected attempts
    data = (await client.get(f"{BASE}/{category['id']}")).json()
    assert [e["id"] for e in data["exercises"]] == ids


@pytest.mark.asyncio
async def test_category_events_are_logged(client, category):
    response = await client.get("/api/events", params={"event_type": "feature"})
    names = [event["name"] for event in response.json()["events"]]
    assert names == ["category_created", "exercise_created", "exercise_created", "exercise_created"]
    assert response.json()["events"][0]["metadata"] == {"category_id": category["id"]}
