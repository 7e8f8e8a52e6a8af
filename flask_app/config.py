from datetime import timedelta

from domain.core.settings import settings


class Config:
    JWT_SECRET_KEY = settings.JWT_SECRET_KEY
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRES_MINUTES)

    CACHE_TYPE = settings.CACHE_TYPE if settings.CACHE_ENABLED else "NullCache"
    CACHE_DEFAULT_TIMEOUT = settings.CACHE_DEFAULT_TIMEOUT
    CACHE_REDIS_URL = settings.REDIS_URL

    RATELIMIT_ENABLED = settings.RATELIMIT_ENABLED
    RATELIMIT_HEADERS_ENABLED = True
