# ===========================================================================
# File: app/core/config.py
# ===========================================================================
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import logging
import os

class Settings(BaseSettings):
    PROJECT_NAME: str = "News Announcements API"
    API_V1_STR: str = "/api/v1"

    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DB_NAME: str = "news_db"

    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB_CACHE: int = 1
    REDIS_PASSWORD: Optional[str] = None

    # Tokens are issued by the platform's auth service with the same secret
    SECRET_KEY: str
    ALGORITHM: str = "HS256"

    NEWS_LAST_ANNOUNCEMENT_TITLE: str = "LAST CHANCE FOR LAVA DRAGON SET AND SPOTLIGHT ON BACK TO SCHOOL"
    NEWS_POINTER_CACHE_TTL_SECONDS: int = 300

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore'
    )

    @model_validator(mode='after')
    def set_computed_urls(self) -> 'Settings':
        redis_password_part = f":{self.REDIS_PASSWORD}@" if self.REDIS_PASSWORD else ""
        self.CACHE_REDIS_URL = f"redis://{redis_password_part}{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB_CACHE}"
        return self

    CACHE_REDIS_URL: Optional[str] = None

settings = Settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(settings.PROJECT_NAME)
logger.info(f"Logger initialized with level: {settings.LOG_LEVEL}")
if "CHANGE_ME" in settings.SECRET_KEY or len(settings.SECRET_KEY) < 32:
    logger.critical("SECURITY WARNING: Default SECRET_KEY is in use or too weak. Please change it in your .env file immediately!")
