"""HTTP-level fixtures: the app with its services swapped for mocks."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from kinokritik.dependencies import (
    get_movie_repository, get_movie_service, get_query_repository, get_review_service,
)
from kinokritik.main import app


@pytest.fixture
def movie_service():
    return MagicMock(name="movie_service")


@pytest.fixture
def movie_repo():
    return MagicMock(name="movie_repo")


@pytest.fixture
def query_repo():
    return MagicMock(name="query_repo")


@pytest.fixture
def review_service():
    return MagicMock(name="review_service")


@pytest.fixture
def client(movie_service, movie_repo, query_repo, review_service):
    # No context manager: startup hooks would connect to MongoDB.
    app.dependency_overrides[get_movie_service] = lambda: movie_service
    app.dependency_overrides[get_movie_repository] = lambda: movie_repo
    app.dependency_overrides[get_query_repository] = lambda: query_repo
    app.dependency_overrides[get_review_service] = lambda: review_service
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
