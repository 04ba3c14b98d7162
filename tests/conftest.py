"""Shared fixtures: every test gets its own app, store and deterministic ids."""

from datetime import datetime, timezone
from itertools import count

import pytest
from fastapi.testclient import TestClient

from expense_api.core.config import Settings
from expense_api.db.store import ExpenseStore
from expense_api.main import create_app

FIXED_NOW = datetime(2024, 2, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)


@pytest.fixture
def settings():
    return Settings(debug=False, log_json=True, api_prefix="/api/v1")


@pytest.fixture
def store():
    s = ExpenseStore()
    yield s
    s.reset()


@pytest.fixture
def id_generator():
    counter = count(1)
    return lambda: f"expense-{next(counter)}"


@pytest.fixture
def app(settings, store, id_generator):
    return create_app(
        settings_override=settings,
        store=store,
        id_generator=id_generator,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def valid_payload():
    return {
        "title": "Grocery Shopping",
        "amount": 150.50,
        "category": "Food",
        "date": "2024-01-15",
    }
