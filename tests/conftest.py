"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from penalty_gateway.api.main import create_app
from penalty_gateway.api.dependencies import get_today


# Reference "today" shared by API tests
FIXED_TODAY = date(2024, 6, 15)


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def client(today: date) -> TestClient:
    """Create FastAPI test client with a pinned reference date"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: today
    return TestClient(app)
