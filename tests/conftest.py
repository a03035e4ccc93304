import sys, pathlib
from datetime import datetime, timedelta

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from rental_engine import create_app
from rental_engine.models.store import Store

# Wall-clock "now" used by every test store; returns are stamped with it.
FIXED_NOW = datetime(2030, 1, 1, 12, 0)


@pytest.fixture
def store():
    """A fresh, freshly seeded Store per test (20 vehicles, admin/admin, user/user)."""
    return Store(clock=lambda: FIXED_NOW)


@pytest.fixture
def start():
    return datetime(2030, 1, 10, 9, 0)


@pytest.fixture
def hours():
    """hours(start, n) -> start + n hours."""
    return lambda t, n: t + timedelta(hours=n)


@pytest.fixture
def app(store):
    return create_app({"TESTING": True, "SECRET_KEY": "test"}, store=store)


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def login(client):
    """login(username, password) posts to /login and returns the response."""
    def _login(username, password):
        return client.post("/login", json={"username": username, "password": password})
    return _login
