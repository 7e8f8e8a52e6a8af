from infrastructure.logging_config import configure_logging

configure_logging()

import logging
import asyncio
import contextlib
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi_cache import FastAPICache
from fastapi_cache.backends.redis import RedisBackend
from fastapi_cache.backends.inmemory import InMemoryBackend
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from fastapi import Request
from fastapi.responses import JSONResponse

from fastapi_app.core.middleware import setup_middleware
from fastapi_app.api.router import api_router
from domain.core.constants import RedisPrefix, CacheNamespace
from domain.core.settings import settings
from fastapi_app.core.limiter import limiter
from infrastructure.redis import get_async_redis_client
from infrastructure.scheduler import AnalyticsJob, run_daily

logger = logging.getLogger(__name__)


async def _clear_dashboard_cache():
    await FastAPICache.clear(CacheNamespace.DASHBOARD)


@asynccontextmanager
async def lifespan(app: FastAPI):
    redis_client = await get_async_redis_client() if settings.CACHE_ENABLED else None

    if redis_client:
        FastAPICache.init(
            RedisBackend(redis_client),
            prefix=RedisPrefix.CACHE,
            enable=settings.CACHE_ENABLED,
        )
        app.state.redis = redis_client
        logger.info("FastAPI_cache_initialized_with_Redis")
    else:
        FastAPICache.init(InMemoryBackend(), prefix=RedisPrefix.CACHE, enable=settings.CACHE_ENABLED)
        logger.warning("FastAPI_cache_using_in-memory_backend")

    scheduler_task = None
    if settings.ANALYTICS_SCHEDULER_ENABLED:
        scheduler_task = asyncio.create_task(run_daily(AnalyticsJob(), on_success=_clear_dashboard_cache))
        logger.info("Analytics_scheduler_started")

    yield

    if scheduler_task:
        scheduler_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await scheduler_task
        logger.info("Analytics_scheduler_stopped")

    if redis_client:
        await redis_client.aclose()
        logger.info("Redis_connection_closed")


app = FastAPI(title="Restaurant Back Office API", lifespan=lifespan)

app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests"},
    )


setup_middleware(app)

app.include_router(api_router, prefix="/api")
