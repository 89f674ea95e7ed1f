from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from dataclasses import dataclass

@dataclass
class NetzkinoConfig:
    """Configuration class for the Netzkino search API"""
    base_url: str
    api_key: str
    min_interval: float = 1.0
    timeout: int = 30

@dataclass
class TMDBConfig:
    """Configuration class for TMDB API"""
    api_key: str
    base_url: str = "https://api.themoviedb.org/3"
    image_url: str = "https://image.tmdb.org/t/p/original"
    timeout: int = 30

class ApiResponse:
    """Response wrapper for outbound API calls"""
    def __init__(self, data: Dict, status_code: int, success: bool):
        self.data = data
        self.status_code = status_code
        self.success = success

class ApiClientInterface(ABC):
    """Abstract interface for an outbound JSON API client"""

    @abstractmethod
    def make_request(self, endpoint: str = "", params: Dict = None) -> ApiResponse:
        pass

    def close(self) -> None:
        """Release the underlying connection pool"""
        pass

class NetzkinoServiceInterface(ABC):
    """Abstract interface for the Netzkino catalogue service"""

    @abstractmethod
    def fetch_movies(self, query: str) -> List[Dict]:
        pass

class ImageServiceInterface(ABC):
    """Abstract interface for the poster/backdrop lookup service"""

    @abstractmethod
    def find_by_imdb_id(self, imdb_id: str) -> Optional[Dict]:
        pass

    @abstractmethod
    def image_url(self, path: Optional[str]) -> Optional[str]:
        pass
