import logging
import re
from datetime import date
from typing import Any, Dict, List, Optional
from ..interfaces import NetzkinoServiceInterface, ApiClientInterface
from ..exceptions import UpstreamServiceException
from ..constants import NOT_AVAILABLE, UNTITLED, MOVIE_THUMBNAIL

logger = logging.getLogger(__name__)

IMDB_ID_PATTERN = re.compile(r"tt\d+")


def first_value(custom_fields: Dict[str, Any], key: str) -> Optional[Any]:
    """Netzkino custom fields are lists; return the first entry or None"""
    values = custom_fields.get(key)
    if isinstance(values, list):
        return values[0] if values else None
    return values


def sanitize_stars(stars: Any) -> List[str]:
    """Split comma-separated cast entries, trim them and drop blanks and duplicates"""
    if not stars:
        return []
    if isinstance(stars, str):
        stars = [stars]
    names: List[str] = []
    for entry in stars:
        for name in str(entry).split(","):
            name = name.strip()
            if name and name not in names:
                names.append(name)
    return names


def extract_imdb_id(link: Optional[str]) -> Optional[str]:
    """Pull the tt-identifier out of an IMDb link"""
    if not link:
        return None
    match = IMDB_ID_PATTERN.search(str(link))
    return match.group(0) if match else None


def map_post(post: Dict[str, Any], query: str, fetched_on: str) -> Dict[str, Any]:
    """Convert a Netzkino post into a movie document"""
    fields = post.get("custom_fields") or {}
    years = fields.get("Jahr") or [NOT_AVAILABLE]
    directors = fields.get("Regisseur") or [NOT_AVAILABLE]

    return {
        "_id": post.get("id"),
        "netzkinoId": post.get("id"),
        "slug": post.get("slug") or NOT_AVAILABLE,
        "title": post.get("title") or UNTITLED,
        "year": list(years) if isinstance(years, list) else [str(years)],
        "regisseur": list(directors) if isinstance(directors, list) else [str(directors)],
        "stars": sanitize_stars(fields.get("Stars")),
        "overview": post.get("content") or NOT_AVAILABLE,
        "imgNetzkino": first_value(fields, "featured_img_all") or MOVIE_THUMBNAIL,
        "imgNetzkinoSmall": first_value(fields, "featured_img_all_small") or MOVIE_THUMBNAIL,
        "imdbId": extract_imdb_id(first_value(fields, "IMDb-Link")),
        "posterImdb": NOT_AVAILABLE,
        "backdropImdb": NOT_AVAILABLE,
        "queries": [query],
        "savedBy": [],
        "dateFetched": fetched_on,
    }


class NetzkinoService(NetzkinoServiceInterface):
    """Service class for Netzkino catalogue searches"""

    def __init__(self, client: ApiClientInterface):
        self.client = client

    def fetch_movies(self, query: str) -> List[Dict[str, Any]]:
        """Search Netzkino and map every hit into a movie document.

        Upstream failures and unexpected payloads yield an empty list so a
        single bad search never breaks the caller's loop.
        """
        try:
            response = self.client.make_request(params={"q": query})
        except UpstreamServiceException as e:
            logger.error(f"Netzkino search for '{query}' failed: {e.message}")
            return []

        if not response.success:
            return []

        posts = response.data.get("posts") if isinstance(response.data, dict) else None
        if not isinstance(posts, list):
            logger.warning(f"Unexpected Netzkino payload for '{query}'")
            return []

        fetched_on = date.today().isoformat()
        movies = [map_post(post, query, fetched_on) for post in posts if post.get("id") is not None]
        logger.info(f"Netzkino returned {len(movies)} movies for '{query}'")
        return movies

    def close(self) -> None:
        self.client.close()
