import datetime

import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.config import Settings
from exercise_tracker_api.app.main import create_app
from exercise_tracker_api.app.models import Exercise


@pytest.fixture
def settings():
    return Settings(log_level="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def user_with_history(store):
    """A user with exercises on 2023-01-01, 2023-01-15 and 2023-02-01, in that order."""
    user = store.add_user("historian")
    for description, duration, day in (
        ("swim", 20, datetime.date(2023, 1, 1)),
        ("run", 30, datetime.date(2023, 1, 15)),
        ("bike", 45, datetime.date(2023, 2, 1)),
    ):
        store.add_exercise(user, Exercise(description=description, duration=duration, date=day))
    return user
