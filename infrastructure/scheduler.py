import asyncio
import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable
from zoneinfo import ZoneInfo

from domain import services
from domain.core.settings import settings
from infrastructure.db.engine import SessionLocal
from utils.helpers import utcnow

logger = logging.getLogger(__name__)


def next_run_after(now: datetime, hour: int, minute: int, tz: ZoneInfo) -> datetime:
    """Next wall-clock ``hour:minute`` in ``tz`` strictly after ``now`` (UTC)."""
    local_now = now.astimezone(tz)
    candidate = local_now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if candidate <= local_now:
        candidate = (local_now + timedelta(days=1)).replace(hour=hour, minute=minute, second=0, microsecond=0)
    return candidate.astimezone(timezone.utc)


class AnalyticsJob:
    """Recomputes the dashboard snapshot. Never raises; overlapping runs are skipped."""

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory
        self._lock = threading.Lock()

    def __call__(self) -> bool:
        if not self._lock.acquire(blocking=False):
            logger.warning("Scheduled_analytics_update_skipped_already_running")
            return False

        try:
            return self._run()
        finally:
            self._lock.release()

    def _run(self) -> bool:
        db = self.session_factory()
        try:
            snapshot = services.update_dashboard_analytics(db)
            if snapshot is None:
                db.rollback()
                return False
            db.commit()
            return True
        except Exception:
            db.rollback()
            logger.exception("Scheduled_analytics_update_failed")
            return False
        finally:
            db.close()


def _seconds_until_next_run() -> float:
    now = utcnow()
    next_run = next_run_after(
        now,
        settings.ANALYTICS_SCHEDULE_HOUR,
        settings.ANALYTICS_SCHEDULE_MINUTE,
        ZoneInfo(settings.ANALYTICS_TIMEZONE),
    )
    logger.info(f"Analytics_update_scheduled next_run={next_run.isoformat()}")
    return (next_run - now).total_seconds()


async def run_daily(job: AnalyticsJob, on_success: Callable[[], Awaitable[None]] | None = None):
    while True:
        await asyncio.sleep(_seconds_until_next_run())

        updated = await asyncio.to_thread(job)
        if updated and on_success is not None:
            try:
                await on_success()
            except Exception:
                logger.exception("Scheduled_analytics_post_update_hook_failed")


class DailyJobThread(threading.Thread):
    def __init__(self, job: AnalyticsJob, on_success: Callable[[], None] | None = None):
        super().__init__(name="analytics-scheduler", daemon=True)
        self.job = job
        self.on_success = on_success
        self._stop_event = threading.Event()

    def run(self):
        while not self._stop_event.wait(_seconds_until_next_run()):
            if self.job() and self.on_success is not None:
                try:
                    self.on_success()
                except Exception:
                    logger.exception("Scheduled_analytics_post_update_hook_failed")

    def stop(self):
        self._stop_event.set()
