from typing import Dict, Optional
from ..interfaces import ImageServiceInterface, ApiClientInterface
from ..cache import CacheService, CACHE_TTL_24H

class TMDBImageService(ImageServiceInterface):
    """Looks up TMDB artwork for movies known by their IMDb id"""

    def __init__(self, client: ApiClientInterface, image_url: str, cache: Optional[CacheService] = None):
        self.client = client
        self.image_base_url = image_url.rstrip("/")
        self.cache = cache if cache is not None else CacheService()

    def find_by_imdb_id(self, imdb_id: str) -> Optional[Dict]:
        """Return the first TMDB movie result for an IMDb id, or None"""
        cache_key = f"tmdb:find:{imdb_id}"
        cached = self.cache.get_json(cache_key)
        if cached is None:
            resp = self.client.make_request(f"find/{imdb_id}", {"external_source": "imdb_id"})
            if not resp.success:
                return None
            cached = resp.data
            self.cache.set_json(cache_key, cached, CACHE_TTL_24H)
        results = cached.get("movie_results") or []
        return results[0] if results else None

    def image_url(self, path: Optional[str]) -> Optional[str]:
        if not path:
            return None
        return f"{self.image_base_url}/{path.lstrip('/')}"

    def close(self) -> None:
        self.client.close()
        self.cache.close()
