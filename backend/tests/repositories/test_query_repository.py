"""QueryRepository against a mocked queries collection."""

from datetime import datetime, timezone

import pytest
from pymongo import ReturnDocument
from pymongo.errors import ServerSelectionTimeoutError

from kinokritik.core.exceptions import DatabaseException, InvalidInputException
from kinokritik.repositories import QueryRepository


@pytest.fixture
def queries(collections):
    return collections["queries"]


@pytest.fixture
def repo(fake_db):
    return QueryRepository(fake_db)


def test_get_all_queries(repo, queries):
    created = datetime(2025, 6, 16, tzinfo=timezone.utc)
    queries.find.return_value = [{"_id": "a", "query": "western", "createdAt": created}]
    assert repo.get_all_queries() == [
        {"_id": "a", "query": "western", "createdAt": "2025-06-16T00:00:00+00:00"}
    ]


def test_get_all_queries_database_error(repo, queries):
    queries.find.side_effect = ServerSelectionTimeoutError("down")
    with pytest.raises(DatabaseException, match="Unable to fetch queries"):
        repo.get_all_queries()


def test_post_query_upserts_by_query_string(repo, queries):
    queries.find_one_and_update.return_value = {"_id": "a", "query": "western"}

    result = repo.post_query("western")

    assert result == {
        "success": True,
        "status": "Query successfully added",
        "data": {"_id": "a", "query": "western"},
    }
    args, kwargs = queries.find_one_and_update.call_args
    assert args[0] == {"query": "western"}
    assert args[1]["$setOnInsert"]["query"] == "western"
    assert isinstance(args[1]["$setOnInsert"]["createdAt"], datetime)
    assert kwargs == {"upsert": True, "return_document": ReturnDocument.AFTER}


@pytest.mark.parametrize("query", ["", "  ", None, 1])
def test_post_query_rejects_invalid_input(repo, queries, query):
    with pytest.raises(InvalidInputException, match="query must be a non-empty string"):
        repo.post_query(query)
    queries.find_one_and_update.assert_not_called()


def test_post_query_database_error(repo, queries):
    queries.find_one_and_update.side_effect = ServerSelectionTimeoutError("down")
    with pytest.raises(DatabaseException, match="Error inserting query into the database"):
        repo.post_query("western")


def test_is_query_in_db(repo, queries):
    queries.find_one.side_effect = [{"query": "western"}, None]
    assert repo.is_query_in_db("western") is True
    assert repo.is_query_in_db("krieg") is False
    queries.find_one.assert_called_with({"query": "krieg"})


def test_is_query_in_db_database_error(repo, queries):
    queries.find_one.side_effect = ServerSelectionTimeoutError("down")
    with pytest.raises(DatabaseException, match="Unable to check query existence"):
        repo.is_query_in_db("western")
