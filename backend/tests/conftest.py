"""Root conftest: fake credentials and shared MongoDB stand-ins."""

import os
from unittest.mock import MagicMock

import pytest

# Ensure tests don't accidentally use real API keys or services
os.environ.setdefault("OPENAI_API_KEY", "sk-test-fake-key")
os.environ.setdefault("TMDB_API_KEY", "tmdb-test-fake-key")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("ENABLE_SCHEDULER", "false")


@pytest.fixture
def collections():
    return {"movies": MagicMock(name="movies"), "queries": MagicMock(name="queries")}


@pytest.fixture
def fake_db(collections):
    """Database handle whose item access returns the mocked collections"""
    db = MagicMock(name="db")
    db.__getitem__.side_effect = lambda name: collections[name]
    return db
