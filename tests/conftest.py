from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.core.config import DEFAULT_APPROVED_COMPANIES
from app.core.registry import get_registry
from app.main import app
from app.models.employee import Employee
from app.services.visitor_registry import VisitorRegistry


class FakeClock:
    """Deterministic clock that advances one minute per reading."""

    def __init__(self, start=datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self):
        now = self.current
        self.current = now + timedelta(minutes=1)
        return now


@pytest.fixture
def employees():
    return [
        Employee(id=1, name="Alice", email="alice@example.com"),
        Employee(id=2, name="Bob", email="bob@example.com"),
        Employee(id=3, name="Charlie", email="charlie@example.com"),
    ]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(employees, clock):
    return VisitorRegistry(employees, DEFAULT_APPROVED_COMPANIES, clock=clock)


@pytest.fixture
def client(registry):
    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
