import requests
import logging
from typing import Dict, Optional
from .interfaces import ApiClientInterface, ApiResponse, NetzkinoConfig, TMDBConfig
from .exceptions import UpstreamServiceException
from .throttle import RequestThrottle

logger = logging.getLogger(__name__)

class JsonApiClient(ApiClientInterface):
    """requests-based client shared by the Netzkino and TMDB integrations"""

    def __init__(self, base_url: str, timeout: int = 30, throttle: Optional[RequestThrottle] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.throttle = throttle
        self.session = session or requests.Session()
        self.session.headers.update({
            "accept": "application/json"
        })

    def default_params(self) -> Dict:
        return {}

    def make_request(self, endpoint: str = "", params: Dict = None) -> ApiResponse:
        """Make HTTP GET request and wrap the JSON body"""
        url = f"{self.base_url}/{endpoint.lstrip('/')}" if endpoint else self.base_url
        params = {**(params or {}), **self.default_params()}

        if self.throttle is not None:
            self.throttle.wait()

        try:
            logger.info(f"Making request to: {url}")
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request exception: {str(e)}")
            raise UpstreamServiceException(f"Request failed: {str(e)}")

        if response.status_code != 200:
            logger.error(f"API request failed: {response.status_code} - {response.text}")
            return ApiResponse({}, response.status_code, False)

        try:
            data = response.json()
        except ValueError:
            logger.error(f"API returned a non-JSON body from {url}")
            return ApiResponse({}, response.status_code, False)
        return ApiResponse(data, response.status_code, True)

    def close(self) -> None:
        self.session.close()


class NetzkinoClient(JsonApiClient):
    """Netzkino search API client; every call goes through the throttle"""

    def __init__(self, config: NetzkinoConfig, session: Optional[requests.Session] = None):
        self.config = config
        super().__init__(
            config.base_url,
            timeout=config.timeout,
            throttle=RequestThrottle(config.min_interval),
            session=session,
        )

    def default_params(self) -> Dict:
        return {"d": self.config.api_key}


class TMDBClient(JsonApiClient):
    """TMDB API client"""

    def __init__(self, config: TMDBConfig, session: Optional[requests.Session] = None):
        self.config = config
        super().__init__(config.base_url, timeout=config.timeout, session=session)

    def default_params(self) -> Dict:
        return {"api_key": self.config.api_key}
