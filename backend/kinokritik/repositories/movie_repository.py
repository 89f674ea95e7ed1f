import logging
from typing import Optional, List, Any, Dict, Tuple
from pymongo import UpdateOne, ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError, DuplicateKeyError, BulkWriteError
from kinokritik.db import MOVIES_COLLECTION
from kinokritik.core.exceptions import InvalidInputException, DatabaseException
from kinokritik.repositories.base_repository import BaseRepository, serialize_document

logger = logging.getLogger(__name__)

INVALID_QUERY = "Invalid input: query must be a non-empty string"
INVALID_MOVIE_ID = "Invalid input: movieId must be a valid number"
INVALID_WATCHLIST_INPUT = "Invalid input: userId and movieId must be non-empty strings"


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_movie_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class MovieRepository(BaseRepository):
    """Repository for cached movies and the per-user watchlist stored on them"""

    def __init__(self, db: Database):
        super().__init__(db[MOVIES_COLLECTION])

    def get_all_movies(self) -> List[Dict[str, Any]]:
        try:
            return self.find()
        except PyMongoError as e:
            logger.error(f"Error fetching all movies: {e}")
            raise DatabaseException("Unable to fetch movies from the database")

    def get_movies_by_query(self, query: str) -> List[Dict[str, Any]]:
        """Movies produced by a given search string"""
        if not is_non_empty_string(query):
            raise InvalidInputException(INVALID_QUERY)
        try:
            return self.find({"queries": query})
        except PyMongoError as e:
            logger.error(f"Error fetching movies for query '{query}': {e}")
            raise DatabaseException("Unable to fetch movies")

    def get_movies_by_slug(self, slug: str) -> List[Dict[str, Any]]:
        try:
            return self.find({"slug": slug})
        except PyMongoError as e:
            logger.error(f"Error fetching movies for slug '{slug}': {e}")
            raise DatabaseException("Unable to fetch movies")

    def get_movies_by_date(self, fetched_on: str) -> List[Dict[str, Any]]:
        try:
            return self.find({"dateFetched": fetched_on})
        except PyMongoError as e:
            logger.error(f"Error fetching movies fetched on {fetched_on}: {e}")
            raise DatabaseException("Unable to fetch movies")

    def get_movie_by_id(self, movie_id: str) -> Optional[Dict[str, Any]]:
        """Look a movie up by its numeric id given as a string"""
        try:
            numeric_id = int(str(movie_id).strip())
        except (TypeError, ValueError):
            raise InvalidInputException(INVALID_MOVIE_ID)
        try:
            return self.get(numeric_id)
        except PyMongoError as e:
            logger.error(f"Error fetching movie {numeric_id}: {e}")
            raise DatabaseException("Unable to fetch movie by ID")

    def create_movie(self, movie: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return self.create(movie)
        except DuplicateKeyError:
            raise InvalidInputException("Movie already exists")
        except PyMongoError as e:
            logger.error(f"Error creating movie: {e}")
            raise DatabaseException("Error creating movie")

    def create_movies(self, movies: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Insert a batch; a batch holding any known or repeated _id writes nothing"""
        ids = [movie["_id"] for movie in movies]
        try:
            if len(set(ids)) != len(ids) or self.exists({"_id": {"$in": ids}}):
                raise InvalidInputException("Movies already exist")
            return self.create_many(movies)
        except BulkWriteError:
            raise InvalidInputException("Movies already exist")
        except PyMongoError as e:
            logger.error(f"Error creating movies: {e}")
            raise DatabaseException("Error creating movies")

    def post_movies(self, movies: List[Dict[str, Any]], refresh_fields: Tuple[str, ...] = ()):
        """Upsert fetched movies keyed on _id.

        Stored movies keep their fields except those named in refresh_fields;
        new search strings are merged into their queries set.
        """
        if not isinstance(movies, list) or not movies:
            raise InvalidInputException("Invalid input: movies must be a non-empty array")

        operations = []
        for movie in movies:
            on_insert = {key: value for key, value in movie.items()
                         if key not in ("_id", "queries") and key not in refresh_fields}
            update = {
                "$setOnInsert": on_insert,
                "$addToSet": {"queries": {"$each": list(movie.get("queries") or [])}},
            }
            refreshed = {key: movie[key] for key in refresh_fields if key in movie}
            if refreshed:
                update["$set"] = refreshed
            operations.append(UpdateOne(
                {"_id": movie["_id"]},
                update,
                upsert=True,
            ))
        try:
            return self.collection.bulk_write(operations, ordered=False)
        except PyMongoError as e:
            logger.error(f"Error upserting {len(operations)} movies: {e}")
            raise DatabaseException("Database insertion failed")

    # Watchlist

    def get_movies_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        if not is_non_empty_string(user_id):
            raise InvalidInputException("Invalid input: userId must be a non-empty string")
        try:
            return self.find({"savedBy": user_id})
        except PyMongoError as e:
            logger.error(f"Error fetching watchlist of {user_id}: {e}")
            raise DatabaseException("Unable to fetch movies")

    def add_user_id_to_movie(self, movie_id: int, user_id: str) -> Optional[Dict[str, Any]]:
        """Save a movie for a user; returns the updated movie or None"""
        return self._update_saved_by(movie_id, user_id, "$addToSet")

    def remove_user_id_from_movie(self, movie_id: int, user_id: str) -> Optional[Dict[str, Any]]:
        return self._update_saved_by(movie_id, user_id, "$pull")

    def _update_saved_by(self, movie_id: int, user_id: str, operator: str) -> Optional[Dict[str, Any]]:
        if not is_movie_id(movie_id) or not is_non_empty_string(user_id):
            raise InvalidInputException(INVALID_WATCHLIST_INPUT)
        try:
            updated = self.collection.find_one_and_update(
                {"_id": movie_id},
                {operator: {"savedBy": user_id}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Error updating watchlist of {user_id} for movie {movie_id}: {e}")
            raise DatabaseException("Unable to update watchlist")
        return serialize_document(updated)
