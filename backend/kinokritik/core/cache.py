import json
import logging
import zlib
from typing import Optional, Any
import redis
from .config import get_settings

logger = logging.getLogger(__name__)

CACHE_TTL_24H = 24 * 60 * 60


class CacheService:
    """Redis lookup cache for upstream API responses (JSON + optional zlib).

    A cache outage never fails a request: reads degrade to a miss and writes
    report False.
    """

    def __init__(self, url: Optional[str] = None, compress: bool = True, client=None):
        if client is None:
            settings = get_settings()
            client = redis.Redis.from_url(url or settings.REDIS_URL, decode_responses=False)
        self.redis = client
        self.compress = compress

    def get_json(self, key: str) -> Optional[Any]:
        try:
            data = self.redis.get(key)
        except redis.RedisError as e:
            logger.warning(f"Cache read failed for {key}: {e}")
            return None
        if data is None:
            return None
        if self.compress:
            try:
                data = zlib.decompress(data)
            except zlib.error:
                pass
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            return json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError):
            logger.warning(f"Discarding unreadable cache entry {key}")
            return None

    def set_json(self, key: str, value: Any, ttl_seconds: int = CACHE_TTL_24H) -> bool:
        raw = json.dumps(value, ensure_ascii=False).encode("utf-8")
        payload = zlib.compress(raw) if self.compress else raw
        try:
            self.redis.setex(key, ttl_seconds, payload)
        except redis.RedisError as e:
            logger.warning(f"Cache write failed for {key}: {e}")
            return False
        return True

    def close(self) -> None:
        self.redis.close()
