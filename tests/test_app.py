import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.config import Settings
from exercise_tracker_api.app.main import create_app


def test_landing_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Exercise tracker" in response.text


def test_static_assets(client):
    response = client.get("/public/style.css")
    assert response.status_code == 200
    assert "body" in response.text


def test_missing_static_asset(client):
    assert client.get("/public/missing.css").status_code == 404


def test_cors_headers(client):
    response = client.get("/api/users", headers={"Origin": "https://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_origins_are_configurable():
    app = create_app(Settings(log_level="WARNING", cors_origins=["https://allowed.example"]))
    client = TestClient(app)
    response = client.get("/api/users", headers={"Origin": "https://other.example"})
    assert "access-control-allow-origin" not in response.headers


def test_invalid_exercise_response_setting():
    with pytest.raises(ValueError):
        Settings(exercise_response="bogus")


def test_exercise_response_setting_is_normalised():
    assert Settings(exercise_response=" USER ").exercise_response == "user"


def test_shutdown_clears_store():
    app = create_app(Settings(log_level="WARNING"))
    with TestClient(app) as client:
        client.post("/api/users", data={"username": "temp"})
        assert len(app.state.store) == 1
    assert len(app.state.store) == 0
