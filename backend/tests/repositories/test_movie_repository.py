"""MovieRepository against a mocked movies collection."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument, UpdateOne
from pymongo.errors import BulkWriteError, DuplicateKeyError, ServerSelectionTimeoutError

from kinokritik.core.exceptions import DatabaseException, InvalidInputException
from kinokritik.repositories import MovieRepository, serialize_document
from tests.factories import make_movie


@pytest.fixture
def movies(collections):
    return collections["movies"]


@pytest.fixture
def repo(fake_db):
    return MovieRepository(fake_db)


def test_serialize_document_converts_bson_types():
    oid = ObjectId()
    created = datetime(2025, 6, 16, 12, 0, tzinfo=timezone.utc)
    assert serialize_document({"_id": oid, "createdAt": created, "n": 1}) == {
        "_id": str(oid),
        "createdAt": "2025-06-16T12:00:00+00:00",
        "n": 1,
    }
    assert serialize_document(None) is None


# --- reads ---------------------------------------------------------------------


def test_get_all_movies(repo, movies):
    movies.find.return_value = [make_movie(1), make_movie(2)]
    assert [m["_id"] for m in repo.get_all_movies()] == [1, 2]
    movies.find.assert_called_once_with()


def test_get_all_movies_database_error(repo, movies):
    movies.find.side_effect = ServerSelectionTimeoutError("down")
    with pytest.raises(DatabaseException) as exc:
        repo.get_all_movies()
    assert exc.value.message == "Unable to fetch movies from the database"
    assert exc.value.status_code == 500


def test_get_movies_by_query_filters_on_queries(repo, movies):
    movies.find.return_value = [make_movie(1)]
    assert repo.get_movies_by_query("western") == [make_movie(1)]
    movies.find.assert_called_once_with({"queries": "western"})


@pytest.mark.parametrize("query", ["", "   ", None, 42])
def test_get_movies_by_query_rejects_invalid_query(repo, movies, query):
    with pytest.raises(InvalidInputException) as exc:
        repo.get_movies_by_query(query)
    assert exc.value.message == "Invalid input: query must be a non-empty string"
    movies.find.assert_not_called()


def test_get_movies_by_slug_and_date(repo, movies):
    movies.find.return_value = []
    repo.get_movies_by_slug("movie-1")
    repo.get_movies_by_date("2025-06-16")
    assert [c.args[0] for c in movies.find.call_args_list] == [
        {"slug": "movie-1"},
        {"dateFetched": "2025-06-16"},
    ]


def test_get_movie_by_id_parses_numeric_string(repo, movies):
    movies.find_one.return_value = make_movie(123)
    assert repo.get_movie_by_id("123")["_id"] == 123
    movies.find_one.assert_called_once_with({"_id": 123})


def test_get_movie_by_id_not_found(repo, movies):
    movies.find_one.return_value = None
    assert repo.get_movie_by_id("999") is None


def test_get_movie_by_id_rejects_non_numeric(repo, movies):
    with pytest.raises(InvalidInputException) as exc:
        repo.get_movie_by_id("abc")
    assert exc.value.message == "Invalid input: movieId must be a valid number"
    movies.find_one.assert_not_called()


# --- creates -------------------------------------------------------------------


def test_create_movie_returns_document(repo, movies):
    movies.insert_one.return_value = MagicMock(inserted_id=5)
    assert repo.create_movie(make_movie(5)) == make_movie(5)


def test_create_movie_duplicate(repo, movies):
    movies.insert_one.side_effect = DuplicateKeyError("E11000")
    with pytest.raises(InvalidInputException, match="Movie already exists"):
        repo.create_movie(make_movie(5))


def test_create_movies_duplicate(repo, movies):
    movies.find_one.return_value = None
    movies.insert_many.side_effect = BulkWriteError({"writeErrors": []})
    with pytest.raises(InvalidInputException, match="Movies already exist"):
        repo.create_movies([make_movie(5), make_movie(6)])


def test_create_movies_returns_documents(repo, movies):
    movies.find_one.return_value = None
    movies.insert_many.return_value = MagicMock(inserted_ids=[5, 6])
    assert [m["_id"] for m in repo.create_movies([make_movie(5), make_movie(6)])] == [5, 6]


def test_create_movies_with_stored_id_writes_nothing(repo, movies):
    movies.find_one.return_value = make_movie(6)

    with pytest.raises(InvalidInputException, match="Movies already exist"):
        repo.create_movies([make_movie(5), make_movie(6)])

    movies.find_one.assert_called_once_with({"_id": {"$in": [5, 6]}})
    movies.insert_many.assert_not_called()


def test_create_movies_with_repeated_id_writes_nothing(repo, movies):
    movies.find_one.return_value = None

    with pytest.raises(InvalidInputException, match="Movies already exist"):
        repo.create_movies([make_movie(5), make_movie(5)])

    movies.insert_many.assert_not_called()


# --- upserts -------------------------------------------------------------------


def test_post_movies_upserts_and_merges_queries(repo, movies):
    movie = make_movie(1, queries=["krieg"])
    repo.post_movies([movie])

    operations = movies.bulk_write.call_args.args[0]
    assert movies.bulk_write.call_args.kwargs == {"ordered": False}
    assert len(operations) == 1

    on_insert = {k: v for k, v in movie.items() if k not in ("_id", "queries")}
    assert operations[0] == UpdateOne(
        {"_id": 1},
        {"$setOnInsert": on_insert, "$addToSet": {"queries": {"$each": ["krieg"]}}},
        upsert=True,
    )


def test_post_movies_refreshes_named_fields(repo, movies):
    movie = make_movie(1, dateFetched="2025-06-17")
    repo.post_movies([movie], refresh_fields=("dateFetched",))

    update = movies.bulk_write.call_args.args[0][0]._doc
    assert update["$set"] == {"dateFetched": "2025-06-17"}
    assert "dateFetched" not in update["$setOnInsert"]


@pytest.mark.parametrize("payload", [[], None, "movie"])
def test_post_movies_rejects_empty_input(repo, movies, payload):
    with pytest.raises(InvalidInputException):
        repo.post_movies(payload)
    movies.bulk_write.assert_not_called()


def test_post_movies_database_error(repo, movies):
    movies.bulk_write.side_effect = ServerSelectionTimeoutError("down")
    with pytest.raises(DatabaseException, match="Database insertion failed"):
        repo.post_movies([make_movie(1)])


# --- watchlist -----------------------------------------------------------------


def test_get_movies_by_user(repo, movies):
    movies.find.return_value = [make_movie(1, savedBy=["u1"])]
    assert repo.get_movies_by_user("u1")[0]["savedBy"] == ["u1"]
    movies.find.assert_called_once_with({"savedBy": "u1"})


def test_add_user_id_to_movie(repo, movies):
    movies.find_one_and_update.return_value = make_movie(1, savedBy=["u1"])

    updated = repo.add_user_id_to_movie(1, "u1")

    assert updated["savedBy"] == ["u1"]
    movies.find_one_and_update.assert_called_once_with(
        {"_id": 1}, {"$addToSet": {"savedBy": "u1"}}, return_document=ReturnDocument.AFTER,
    )


def test_remove_user_id_from_movie(repo, movies):
    movies.find_one_and_update.return_value = make_movie(1)

    assert repo.remove_user_id_from_movie(1, "u1")["savedBy"] == []
    movies.find_one_and_update.assert_called_once_with(
        {"_id": 1}, {"$pull": {"savedBy": "u1"}}, return_document=ReturnDocument.AFTER,
    )


def test_watchlist_update_unknown_movie_returns_none(repo, movies):
    movies.find_one_and_update.return_value = None
    assert repo.add_user_id_to_movie(404, "u1") is None


@pytest.mark.parametrize("movie_id,user_id", [(0, "u1"), ("1", "u1"), (True, "u1"), (1, ""), (1, None)])
def test_watchlist_update_rejects_invalid_input(repo, movies, movie_id, user_id):
    with pytest.raises(InvalidInputException) as exc:
        repo.add_user_id_to_movie(movie_id, user_id)
    assert exc.value.message == "Invalid input: userId and movieId must be non-empty strings"
    movies.find_one_and_update.assert_not_called()


def test_watchlist_update_database_error(repo, movies):
    movies.find_one_and_update.side_effect = ServerSelectionTimeoutError("down")
    with pytest.raises(DatabaseException, match="Unable to update watchlist"):
        repo.remove_user_id_from_movie(1, "u1")
