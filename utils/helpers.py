from datetime import datetime, timezone
from uuid import UUID, uuid4


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; everything is stored in UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def new_id() -> str:
    return uuid4().hex


def is_valid_id(value: str) -> bool:
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


def normalize_id(value: str) -> str:
    return UUID(str(value)).hex


def short_order_id(order_id: str) -> str:
    return f"#{order_id[-6:]}"


def static_key(key: str):
    def builder(func, namespace: str = "", *args, **kwargs) -> str:
        return f"{namespace}:{key}"

    return builder
