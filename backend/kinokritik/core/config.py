import os
from typing import Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings using Pydantic BaseSettings"""

    # Database
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "kinokritik")

    # Cache
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # Netzkino
    NETZKINO_API_URL: str = os.getenv("NETZKINO_API_URL", "https://api.netzkino.de.simplecache.net/capi-2.0a/search")
    NETZKINO_API_KEY: str = os.getenv("NETZKINO_API_KEY", "www")
    NETZKINO_MIN_INTERVAL_SECONDS: float = float(os.getenv("NETZKINO_MIN_INTERVAL_SECONDS", "1.0"))

    # TMDB
    TMDB_API_KEY: str = os.getenv("TMDB_API_KEY", "")
    TMDB_API_URL: str = os.getenv("TMDB_API_URL", "https://api.themoviedb.org/3")
    TMDB_IMAGE_URL: str = os.getenv("TMDB_IMAGE_URL", "https://image.tmdb.org/t/p/original")

    # OpenAI
    OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4.1-mini")
    REVIEW_TEMPERATURE: float = float(os.getenv("REVIEW_TEMPERATURE", "0.8"))
    REVIEW_MAX_TOKENS: int = int(os.getenv("REVIEW_MAX_TOKENS", "300"))

    # Movies of the day
    MOVIES_OF_THE_DAY_COUNT: int = int(os.getenv("MOVIES_OF_THE_DAY_COUNT", "5"))
    MOVIES_OF_THE_DAY_MAX_ATTEMPTS: int = int(os.getenv("MOVIES_OF_THE_DAY_MAX_ATTEMPTS", "10"))

    # HTTP
    CORS_ALLOW_ORIGINS: Optional[str] = os.getenv("CORS_ALLOW_ORIGINS")

    # Scheduler
    ENABLE_SCHEDULER: bool = os.getenv("ENABLE_SCHEDULER", "false").lower() == "true"
    SCHEDULE_HOUR: int = int(os.getenv("SCHEDULE_HOUR", "4"))
    SCHEDULE_MINUTE: int = int(os.getenv("SCHEDULE_MINUTE", "0"))

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = os.getenv("DEBUG", "True").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

# Singleton instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get settings singleton instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
