"""Daily analytics job: next-run arithmetic, overlap guard and failure handling."""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from domain import services
from infrastructure.scheduler import AnalyticsJob, next_run_after

TASHKENT = ZoneInfo("Asia/Tashkent")


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestNextRun:

    def test_later_today(self):
        # 23:04 in Tashkent
        assert next_run_after(utc(2026, 10, 14, 18, 4), 23, 5, TASHKENT) == utc(2026, 10, 14, 18, 5)

    def test_after_midnight_local(self):
        # 23:00 local, the 00:05 run is the following local day
        assert next_run_after(utc(2026, 10, 14, 18, 0), 0, 5, TASHKENT) == utc(2026, 10, 14, 19, 5)

    def test_exact_run_time_schedules_tomorrow(self):
        assert next_run_after(utc(2026, 10, 14, 19, 5), 0, 5, TASHKENT) == utc(2026, 10, 15, 19, 5)

    def test_result_is_utc(self):
        assert next_run_after(utc(2026, 10, 14, 12), 0, 5, TASHKENT).tzinfo == timezone.utc


class TestAnalyticsJob:

    def test_run_writes_snapshot(self, db, make_order):
        make_order()

        assert AnalyticsJob()() is True
        assert services.get_dashboard_analytics(db).identifier == "main_dashboard"

    def test_overlapping_run_is_skipped(self):
        job = AnalyticsJob()
        job._lock.acquire()
        try:
            assert job() is False
        finally:
            job._lock.release()

        assert job() is True

    def test_failure_never_raises(self, monkeypatch):
        def broken(db, now=None):
            raise RuntimeError("database went away")

        monkeypatch.setattr(services, "update_dashboard_analytics", broken)

        assert AnalyticsJob()() is False

    def test_failed_update_reports_false(self, monkeypatch):
        monkeypatch.setattr(services, "update_dashboard_analytics", lambda db, now=None: None)

        assert AnalyticsJob()() is False
