from .image_service import ImageEnrichmentService
from .movie_service import MovieService
from .review_service import ReviewService

__all__ = [
    "ImageEnrichmentService",
    "MovieService",
    "ReviewService"
]
