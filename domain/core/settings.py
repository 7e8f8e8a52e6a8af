from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./restaurant.db"
    REDIS_URL: str = "redis://localhost:6379/0"
    LOG_FILE_PATH: Path = Path("logs/app.log")
    LOG_LEVEL: str = "INFO"
    LOG_MAX_BYTES: int = 10 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 5

    JWT_SECRET_KEY: str = "change-me"
    JWT_ACCESS_TOKEN_EXPIRES_MINUTES: int = 60

    BOT_SERVER_URL: str = "http://localhost:5000"
    ADMIN_SERVER_API_KEY: str | None = None
    BROADCAST_URL: str | None = None
    BROADCAST_SECRET_KEY: str | None = None
    BOT_REQUEST_TIMEOUT: float = 10

    ANALYTICS_TIMEZONE: str = "Asia/Tashkent"
    ANALYTICS_SCHEDULE_HOUR: int = 0
    ANALYTICS_SCHEDULE_MINUTE: int = 5
    ANALYTICS_SCHEDULER_ENABLED: bool = True

    CACHE_ENABLED: bool = True
    CACHE_TYPE: str = "SimpleCache"
    CACHE_DEFAULT_TIMEOUT: int = 300
    RATELIMIT_ENABLED: bool = True
    REDIS_CONNECT_TIMEOUT: float = 1

    CORS_ORIGINS: list[str] = ["*"]

    @property
    def BOT_NOTIFY_URL(self) -> str:
        return f"{self.BOT_SERVER_URL.rstrip('/')}/api/notify"


settings = Settings()
