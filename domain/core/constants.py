from enum import StrEnum

DASHBOARD_IDENTIFIER = "main_dashboard"
BOT_SCHEDULE_ID = 1

ORDER_LIST_DEFAULT_LIMIT = 50
ORDER_LIST_MAX_LIMIT = 500

REQUIRED_ORDER_FIELDS = ("user_id", "delivery_type", "products", "total_price")


class RedisPrefix(StrEnum):
    CACHE = "cache"
    RATELIMIT = "ratelimit"


class CacheNamespace(StrEnum):
    DASHBOARD = "dashboard"
    MENU = "menu"


class CacheKey(StrEnum):
    DETAIL = "detail"
    LIST = "list"
