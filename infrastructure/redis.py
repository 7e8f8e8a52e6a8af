import logging
import redis
import redis.asyncio as aioredis

from domain.core.settings import settings

logger = logging.getLogger(__name__)


def _client_options(decode_responses: bool) -> dict:
    return {
        "socket_connect_timeout": settings.REDIS_CONNECT_TIMEOUT,
        "socket_timeout": settings.REDIS_CONNECT_TIMEOUT,
        "decode_responses": decode_responses,
    }


def redis_reachable() -> bool:
    client = redis.Redis.from_url(settings.REDIS_URL, **_client_options(False))
    try:
        client.ping()
        return True
    except redis.RedisError:
        logger.warning("Sync_Redis_unavailable", exc_info=True)
        return False
    finally:
        client.close()


def rate_limit_storage_uri() -> str:
    """Shared Redis storage for rate limits, or process memory without it.

    Both the FastAPI and the Flask limiter are built from this, so every
    worker counts against the same buckets whenever Redis is up.
    """
    if settings.RATELIMIT_ENABLED and redis_reachable():
        logger.info("Rate_limit_storage=redis")
        return settings.REDIS_URL

    logger.warning("Rate_limit_storage=memory")
    return "memory://"


async def get_async_redis_client(decode_responses: bool = True) -> aioredis.Redis | None:
    """Redis for the response cache, or None when it is unreachable."""
    client = aioredis.from_url(settings.REDIS_URL, **_client_options(decode_responses))
    try:
        await client.ping()
        logger.info("Async_Redis_available")
        return client

    except redis.RedisError:
        logger.warning("Async_Redis_unavailable", exc_info=True)

    except Exception:
        logger.exception("Unexpected_error_during_Async_Redis_init")

    await client.aclose()
    return None
