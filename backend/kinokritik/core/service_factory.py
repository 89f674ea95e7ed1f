import logging
from typing import Optional
from .config import get_settings
from .interfaces import NetzkinoConfig, TMDBConfig
from .api_client import NetzkinoClient, TMDBClient
from .services.netzkino_service import NetzkinoService
from .services.tmdb_service import TMDBImageService

logger = logging.getLogger(__name__)

# One client of each kind per process; the Netzkino throttle spans all requests
_netzkino_service: Optional[NetzkinoService] = None
_image_service: Optional[TMDBImageService] = None

class ApiServiceFactory:
    """Factory class for the outbound API services"""

    @staticmethod
    def create_netzkino_service(base_url: str = None, api_key: str = None, min_interval: float = None) -> NetzkinoService:
        """Create a new Netzkino service instance"""
        settings = get_settings()
        config = NetzkinoConfig(
            base_url=base_url or settings.NETZKINO_API_URL,
            api_key=api_key or settings.NETZKINO_API_KEY,
            min_interval=settings.NETZKINO_MIN_INTERVAL_SECONDS if min_interval is None else min_interval,
        )
        return NetzkinoService(NetzkinoClient(config))

    @staticmethod
    def create_image_service(api_key: str = None) -> TMDBImageService:
        """Create a new TMDB image service instance"""
        settings = get_settings()
        if api_key is None:
            api_key = settings.TMDB_API_KEY
        if not api_key:
            logger.warning("TMDB_API_KEY is not configured; image lookups will fail")
        config = TMDBConfig(
            api_key=api_key,
            base_url=settings.TMDB_API_URL,
            image_url=settings.TMDB_IMAGE_URL,
        )
        return TMDBImageService(TMDBClient(config), config.image_url)


def get_netzkino_service() -> NetzkinoService:
    """Get the process-wide Netzkino service"""
    global _netzkino_service
    if _netzkino_service is None:
        _netzkino_service = ApiServiceFactory.create_netzkino_service()
    return _netzkino_service


def get_image_service() -> TMDBImageService:
    """Get the process-wide TMDB image service"""
    global _image_service
    if _image_service is None:
        _image_service = ApiServiceFactory.create_image_service()
    return _image_service


def close_services() -> None:
    """Release the shared HTTP sessions and the Redis pool"""
    global _netzkino_service, _image_service
    if _netzkino_service is not None:
        _netzkino_service.close()
        _netzkino_service = None
    if _image_service is not None:
        _image_service.close()
        _image_service = None
