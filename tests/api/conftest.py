"""
Pytest fixtures for career service API tests.

The app is built with in-memory workflows, so no MongoDB or LLM is needed.
"""

import pytest
from fastapi.testclient import TestClient

from career_service.app import create_app
from career_service.auth import sign_session
from career_service.dependencies import build_services
from tests.helpers.fakes import insight_json


@pytest.fixture
def client(gateway, generator):
    """FastAPI test client over the in-memory gateway and scripted generator."""
    app = create_app(services=build_services(gateway, generator))
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Session headers for a signed-in user."""
    return {"Authorization": f"Bearer {sign_session('auth0|jane')}"}


@pytest.fixture
def invalid_auth_headers():
    """Badly signed session headers."""
    return {"Authorization": "Bearer auth0|jane.0123456789abcdef"}


@pytest.fixture
def onboarded(client, auth_headers, generator):
    """Sign in and onboard into Software Engineering (warm-up consumes one report)."""
    generator.script(insight_json())
    client.get("/api/users/me", headers=auth_headers)
    response = client.put(
        "/api/users/me/onboarding",
        json={"industry": "Software Engineering", "experience": 5, "skills": ["Python"]},
        headers=auth_headers,
    )
    assert response.status_code == 200
    return response.json()
