"""
Shared fixtures for the career coach test suite.

Environment variables are set BEFORE any project imports so that Config and
ServiceSettings pick up test values when first loaded.
"""

import os

os.environ["ENVIRONMENT"] = "development"
os.environ["SESSION_SECRET"] = "test-session-secret-1234"  # Min 16 chars
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["OPENAI_API_KEY"] = "sk-test-mock-key"
os.environ["CORS_ORIGINS"] = ""

import pytest

from tests.helpers.fakes import FakeClock, FakeGenerator, build_fake_gateway


@pytest.fixture
def clock():
    """Settable clock starting at 2025-01-06 09:00 UTC."""
    return FakeClock()


@pytest.fixture
def gateway():
    """Empty in-memory persistence gateway."""
    return build_fake_gateway()


@pytest.fixture
def generator():
    """Generator with no scripted responses; tests script it as needed."""
    return FakeGenerator()


@pytest.fixture
def new_user(gateway):
    """A user that signed in but has not onboarded."""
    return gateway.users.ensure_user("auth0|new-user")


@pytest.fixture
def onboarded_user(gateway):
    """A user onboarded into "software engineering"."""
    gateway.users.ensure_user("auth0|jane")
    return gateway.users.update_profile(
        "auth0|jane",
        industry="software engineering",
        experience=6,
        skills=["Python", "SQL"],
        bio="Backend engineer",
    )
