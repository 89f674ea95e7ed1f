import logging
import random
from datetime import date
from typing import List, Optional, Dict, Any
from pymongo.database import Database
from kinokritik.core.config import get_settings
from kinokritik.core.exceptions import InvalidInputException
from kinokritik.core.interfaces import NetzkinoServiceInterface
from kinokritik.core.service_factory import get_image_service, get_netzkino_service
from kinokritik.repositories.movie_repository import MovieRepository
from kinokritik.repositories.query_repository import QueryRepository
from kinokritik.services.image_service import ImageEnrichmentService

logger = logging.getLogger(__name__)

class MovieService:
    """Movie lookups backed by MongoDB with Netzkino as the upstream source.

    Search results and the movies of the day are fetched from Netzkino once,
    enriched with TMDB artwork and cached in the movies collection; the
    queries collection records which search strings are already cached.
    """

    def __init__(
        self,
        db: Database,
        netzkino_service: Optional[NetzkinoServiceInterface] = None,
        enrichment_service: Optional[ImageEnrichmentService] = None,
    ):
        self.db = db
        self.settings = get_settings()

        # Initialize repositories
        self.movie_repo = MovieRepository(db)
        self.query_repo = QueryRepository(db)

        # Initialize upstream services
        self.netzkino_service = netzkino_service or get_netzkino_service()
        self.enrichment_service = enrichment_service or ImageEnrichmentService(get_image_service())

    def list_movies(self, query: Optional[str] = None, slug: Optional[str] = None) -> List[Dict[str, Any]]:
        """All cached movies, or those matching a search string or slug"""
        if query:
            return self.movie_repo.get_movies_by_query(query)
        if slug:
            return self.movie_repo.get_movies_by_slug(slug)
        return self.movie_repo.get_all_movies()

    def get_movie(self, movie_id: str) -> Optional[Dict[str, Any]]:
        return self.movie_repo.get_movie_by_id(movie_id)

    def create_movie(self, movie: Dict[str, Any]) -> Dict[str, Any]:
        return self.movie_repo.create_movie(movie)

    def create_movies(self, movies: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return self.movie_repo.create_movies(movies)

    def get_movies_of_the_day(self, random_queries: List[str]) -> List[Dict[str, Any]]:
        """Today's featured movies, fetched from Netzkino on the first call of the day"""
        count = self.settings.MOVIES_OF_THE_DAY_COUNT
        max_attempts = self.settings.MOVIES_OF_THE_DAY_MAX_ATTEMPTS
        if not random_queries:
            raise InvalidInputException("Invalid input: randomQueries must be a non-empty list")

        today = date.today().isoformat()
        todays_movies = self.movie_repo.get_movies_by_date(today)
        if todays_movies:
            return todays_movies[:count]

        movies_of_the_day: List[Dict[str, Any]] = []
        seen_ids = set()
        attempts = 0

        while len(movies_of_the_day) < count and attempts < max_attempts:
            attempts += 1
            query = random.choice(random_queries)
            movies = self.netzkino_service.fetch_movies(query)
            self.query_repo.post_query(query)

            for movie in movies:
                if movie["_id"] not in seen_ids:
                    movies_of_the_day.append(movie)
                    seen_ids.add(movie["_id"])
                if len(movies_of_the_day) == count:
                    break

        if len(movies_of_the_day) < count:
            logger.warning(
                f"Could not fetch {count} unique movies within {max_attempts} attempts "
                f"(got {len(movies_of_the_day)})"
            )

        enriched = self.enrichment_service.enrich_movies(movies_of_the_day)
        if enriched:
            self.movie_repo.post_movies(enriched, refresh_fields=("dateFetched",))
        logger.info(f"Movies of the day: {[movie.get('title') for movie in enriched]}")
        return enriched

    def get_search_movies(self, query: str) -> List[Dict[str, Any]]:
        """Movies for a search string, served from the cache when it was seen before"""
        if self.query_repo.is_query_in_db(query):
            return self.movie_repo.get_movies_by_query(query)

        movies = self.netzkino_service.fetch_movies(query)
        if not movies:
            return []

        self.query_repo.post_query(query)
        enriched = self.enrichment_service.enrich_movies(movies)
        self.movie_repo.post_movies(enriched)
        return enriched
