from slowapi import Limiter
from slowapi.util import get_remote_address

from domain.core.constants import RedisPrefix
from domain.core.settings import settings
from infrastructure.redis import rate_limit_storage_uri

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=rate_limit_storage_uri(),
    key_prefix=RedisPrefix.RATELIMIT,
    enabled=settings.RATELIMIT_ENABLED,
)
