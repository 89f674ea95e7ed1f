from .base_repository import BaseRepository, serialize_document
from .movie_repository import MovieRepository
from .query_repository import QueryRepository

__all__ = [
    "BaseRepository",
    "serialize_document",
    "MovieRepository",
    "QueryRepository"
]
