import logging
from datetime import datetime, timezone
from typing import List, Any, Dict
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError
from kinokritik.db import QUERIES_COLLECTION
from kinokritik.core.exceptions import InvalidInputException, DatabaseException
from kinokritik.repositories.base_repository import BaseRepository, serialize_document
from kinokritik.repositories.movie_repository import INVALID_QUERY, is_non_empty_string

logger = logging.getLogger(__name__)


class QueryRepository(BaseRepository):
    """Repository for the search strings already fetched from Netzkino"""

    def __init__(self, db: Database):
        super().__init__(db[QUERIES_COLLECTION])

    def get_all_queries(self) -> List[Dict[str, Any]]:
        try:
            return self.find()
        except PyMongoError as e:
            logger.error(f"Error fetching queries: {e}")
            raise DatabaseException("Unable to fetch queries")

    def post_query(self, query: str) -> Dict[str, Any]:
        """Record a search string; recording it twice keeps the first timestamp"""
        if not is_non_empty_string(query):
            raise InvalidInputException(INVALID_QUERY)
        try:
            doc = self.collection.find_one_and_update(
                {"query": query},
                {"$setOnInsert": {"query": query, "createdAt": datetime.now(timezone.utc)}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Error inserting query '{query}': {e}")
            raise DatabaseException("Error inserting query into the database")
        return {
            "success": True,
            "status": "Query successfully added",
            "data": serialize_document(doc),
        }

    def is_query_in_db(self, query: str) -> bool:
        if not is_non_empty_string(query):
            raise InvalidInputException(INVALID_QUERY)
        try:
            return self.exists({"query": query})
        except PyMongoError as e:
            logger.error(f"Error checking query '{query}': {e}")
            raise DatabaseException("Unable to check query existence")
