import logging
from typing import Any, Dict, List, Optional
from kinokritik.core.interfaces import ImageServiceInterface
from kinokritik.core.constants import MOVIE_THUMBNAIL

logger = logging.getLogger(__name__)


class ImageEnrichmentService:
    """Adds TMDB poster and backdrop URLs to Netzkino movies"""

    def __init__(self, image_service: ImageServiceInterface):
        self.image_service = image_service

    def add_images(self, movie: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Set posterImdb/backdropImdb in place; None when the movie has no IMDb id"""
        imdb_id = movie.get("imdbId")
        if not imdb_id:
            return None

        result = self.image_service.find_by_imdb_id(imdb_id) or {}
        poster = self.image_service.image_url(result.get("poster_path"))
        backdrop = self.image_service.image_url(result.get("backdrop_path"))

        movie["posterImdb"] = poster or MOVIE_THUMBNAIL
        movie["backdropImdb"] = backdrop or MOVIE_THUMBNAIL
        return movie

    def enrich_movies(self, movies: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        enriched = []
        for movie in movies:
            enriched.append(self.add_images(movie) or movie)
        logger.info(f"Enriched {len(enriched)} movies with TMDB images")
        return enriched
