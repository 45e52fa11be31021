"""
Unit-test guards: no real MongoDB connection, no real OpenAI key.
"""

from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def mock_mongodb():
    """
    Replace MongoClient inside DatabaseClient.

    Any collection reached through the fake client finds nothing, so a test
    that forgets to inject repositories sees an empty store instead of
    waiting on server selection.
    """
    collection = MagicMock()
    collection.find_one.return_value = None
    collection.find.return_value = []

    database = MagicMock()
    database.__getitem__.return_value = collection

    with patch("src.common.database.MongoClient") as client_cls:
        client_cls.return_value.__getitem__.return_value = database
        yield client_cls


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Development mode and a dummy key, whatever the developer's shell exports."""
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-mock-key")
