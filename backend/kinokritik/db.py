import logging
from typing import Optional
from dotenv import load_dotenv
from pymongo import MongoClient, ASCENDING
from pymongo.database import Database
from kinokritik.core.config import get_settings

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

MOVIES_COLLECTION = "movies"
QUERIES_COLLECTION = "queries"

_client: Optional[MongoClient] = None

def get_client() -> MongoClient:
    """Get the MongoClient singleton; pymongo connects lazily on first use"""
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(settings.MONGO_URI, tz_aware=True)
    return _client

def get_database() -> Database:
    return get_client()[get_settings().MONGO_DB_NAME]

def get_db():
    """Dependency to get the database handle"""
    yield get_database()

def ensure_indexes(db: Database) -> None:
    """Create the indexes the handlers query on (idempotent)"""
    db[QUERIES_COLLECTION].create_index([("query", ASCENDING)], unique=True)
    movies = db[MOVIES_COLLECTION]
    movies.create_index([("queries", ASCENDING)])
    movies.create_index([("savedBy", ASCENDING)])
    movies.create_index([("dateFetched", ASCENDING)])
    movies.create_index([("slug", ASCENDING)])
    logger.info("MongoDB indexes ensured")

def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
