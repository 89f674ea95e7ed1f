from .movie import MovieCreate, WatchlistUpdate
from .query import QueryCreate
from .review import ReviewRequest, ReviewResponse

__all__ = [
    "MovieCreate",
    "WatchlistUpdate",
    "QueryCreate",
    "ReviewRequest",
    "ReviewResponse"
]
