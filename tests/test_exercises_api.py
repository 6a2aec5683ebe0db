import datetime

import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.config import Settings
from exercise_tracker_api.app.main import create_app
from exercise_tracker_api.app.models import format_date


@pytest.fixture
def user(client):
    return client.post("/api/users", data={"username": "runner"}).json()


def add(client, user_id, **fields):
    return client.post(f"/api/users/{user_id}/exercises", data=fields)


def test_add_exercise_without_date_uses_today(client, store, user):
    response = add(client, user["id"], description="run", duration="30")
    assert response.status_code == 200
    assert response.json() == {
        "username": "runner",
        "id": user["id"],
        "description": "run",
        "duration": 30,
        "date": format_date(datetime.date.today()),
    }
    stored = store.get_user(user["id"]).exercises
    assert len(stored) == 1
    assert stored[-1].description == "run"


def test_add_exercise_appends_as_last_entry(client, store, user):
    add(client, user["id"], description="swim", duration="10", date="2023-01-01")
    add(client, user["id"], description="run", duration="30")
    descriptions = [e.description for e in store.get_user(user["id"]).exercises]
    assert descriptions == ["swim", "run"]


def test_add_exercise_with_date_and_json_body(client, user):
    response = client.post(
        f"/api/users/{user['id']}/exercises",
        json={"description": "  bike  ", "duration": 45.5, "date": "2023-01-15"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["description"] == "bike"
    assert body["duration"] == 45.5
    assert body["date"] == "Sun Jan 15 2023"


def test_add_exercise_missing_fields(client, store, user):
    response = add(client, user["id"], date="2023-01-01")
    assert response.status_code == 400
    assert response.json() == {"error": "description and duration are required"}

    response = add(client, user["id"], description="run")
    assert response.status_code == 400
    assert response.json() == {"error": "duration is required"}
    assert store.get_user(user["id"]).exercises == []


def test_add_exercise_validation_precedes_lookup(client):
    response = add(client, "missing", description="run")
    assert response.status_code == 400


@pytest.mark.parametrize(
    "fields",
    [
        {"description": "run", "duration": "long"},
        {"description": "run", "duration": "30", "date": "next tuesday"},
    ],
)
def test_add_exercise_rejects_bad_values(client, store, user, fields):
    response = add(client, user["id"], **fields)
    assert response.status_code == 400
    assert "error" in response.json()
    assert store.get_user(user["id"]).exercises == []


def test_add_exercise_to_unknown_user(client, store, user):
    response = add(client, "does-not-exist", description="run", duration="30")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}
    assert store.get_user(user["id"]).exercises == []


def test_add_exercise_full_user_response():
    client = TestClient(create_app(Settings(log_level="WARNING", exercise_response="user")))
    created = client.post("/api/users", data={"username": "walker"}).json()

    add(client, created["id"], description="walk", duration="15", date="2023-01-01")
    response = add(client, created["id"], description="hike", duration="90", date="2023-01-02")

    assert response.status_code == 200
    assert response.json() == {
        "username": "walker",
        "id": created["id"],
        "exercises": [
            {"description": "walk", "duration": 15, "date": "Sun Jan 01 2023"},
            {"description": "hike", "duration": 90, "date": "Mon Jan 02 2023"},
        ],
    }


def test_logs_full(client, user_with_history):
    response = client.get(f"/api/users/{user_with_history.id}/logs")
    assert response.status_code == 200
    assert response.json() == {
        "username": "historian",
        "count": 3,
        "id": user_with_history.id,
        "log": [
            {"description": "swim", "duration": 20, "date": "Sun Jan 01 2023"},
            {"description": "run", "duration": 30, "date": "Sun Jan 15 2023"},
            {"description": "bike", "duration": 45, "date": "Wed Feb 01 2023"},
        ],
    }


def test_logs_date_window(client, user_with_history):
    response = client.get(
        f"/api/users/{user_with_history.id}/logs",
        params={"from": "2023-01-10", "to": "2023-01-31"},
    )
    body = response.json()
    assert body["count"] == 1
    assert [entry["date"] for entry in body["log"]] == ["Sun Jan 15 2023"]


def test_logs_bounds_are_inclusive(client, user_with_history):
    response = client.get(
        f"/api/users/{user_with_history.id}/logs",
        params={"from": "2023-01-01", "to": "2023-01-15"},
    )
    assert response.json()["count"] == 2


def test_logs_limit_keeps_first_inserted(client, user_with_history):
    response = client.get(f"/api/users/{user_with_history.id}/logs", params={"limit": "1"})
    body = response.json()
    assert body["count"] == 1
    assert body["log"] == [{"description": "swim", "duration": 20, "date": "Sun Jan 01 2023"}]


def test_logs_empty_params_are_ignored(client, user_with_history):
    response = client.get(f"/api/users/{user_with_history.id}/logs?from=&to=&limit=")
    assert response.status_code == 200
    assert response.json()["count"] == 3


def test_logs_for_user_without_exercises(client, user):
    response = client.get(f"/api/users/{user['id']}/logs")
    assert response.json() == {"username": "runner", "count": 0, "id": user["id"], "log": []}


@pytest.mark.parametrize("params", [{"limit": "0"}, {"limit": "many"}, {"from": "last week"}])
def test_logs_reject_bad_query(client, user_with_history, params):
    response = client.get(f"/api/users/{user_with_history.id}/logs", params=params)
    assert response.status_code == 400
    assert "error" in response.json()


def test_logs_unknown_user(client):
    response = client.get("/api/users/nobody/logs")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_repeated_reads_are_identical(client, user_with_history):
    url = f"/api/users/{user_with_history.id}/logs"
    assert client.get(url).json() == client.get(url).json()
    assert client.get("/api/users").json() == client.get("/api/users").json()
