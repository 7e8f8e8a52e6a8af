"""
Dashboard analytics aggregation tests.

Covers the per-period scalar totals, the chart bucketing in the analytics
timezone (Asia/Tashkent, UTC+5) and the singleton snapshot upsert.
"""
from datetime import datetime, timedelta, timezone

import pytest

from domain import services
from domain.core.errors import NotFoundError
from infrastructure.db.models import DashboardAnalytics

TZ = "Asia/Tashkent"
NOW = datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestPeriodStats:

    def test_empty_store_yields_zeroed_periods(self, db):
        data = services.compute_dashboard_analytics(db, NOW, TZ)

        for period in (data.today, data.week, data.month, data.year):
            assert period.orders == 0
            assert period.price == 0
            assert period.delivery_orders == 0
            assert period.users == 0
            assert period.chart == []

    def test_totals_split_delivery_from_takeout(self, db, make_order):
        make_order(user_id="u1", total_price=10, created_at=NOW - timedelta(hours=1))
        make_order(user_id="u1", total_price=20, created_at=NOW - timedelta(hours=2))
        make_order(
            user_id="u2",
            delivery_type="delivery",
            total_price=15,
            delivery_distance=3.5,
            created_at=NOW - timedelta(hours=3),
        )

        today = services.compute_dashboard_analytics(db, NOW, TZ).today

        assert today.orders == 3
        assert today.price == 45
        assert today.delivery_orders == 1
        assert today.delivery_price == 15
        assert today.delivery_distance == 3.5
        assert today.users == 2

    def test_every_status_is_counted(self, db, make_order):
        make_order(order_status="denied", created_at=NOW)
        make_order(order_status="completed", created_at=NOW)

        assert services.compute_dashboard_analytics(db, NOW, TZ).today.orders == 2

    def test_old_orders_fall_outside_every_period(self, db, make_order):
        make_order(created_at=utc(2024, 10, 14, 12))

        data = services.compute_dashboard_analytics(db, NOW, TZ)

        for period in (data.today, data.week, data.month, data.year):
            assert (period.orders, period.price, period.users) == (0, 0, 0)
            assert period.chart == []

    def test_three_delivery_customers(self, db, make_order):
        for user_id in ("1", "2", "3"):
            make_order(user_id=user_id, delivery_type="delivery", delivery_distance=1, created_at=NOW)

        today = services.compute_dashboard_analytics(db, NOW, TZ).today

        assert today.users == 3
        assert today.delivery_orders == 3
        assert today.delivery_distance == 3

    def test_periods_nest(self, db, make_order):
        make_order(created_at=NOW)                           # today
        make_order(created_at=utc(2026, 10, 12, 8))          # Monday of this week
        make_order(created_at=utc(2026, 10, 2, 8))           # earlier this month
        make_order(created_at=utc(2026, 2, 10, 8))           # earlier this year

        data = services.compute_dashboard_analytics(db, NOW, TZ)

        assert (data.today.orders, data.week.orders, data.month.orders, data.year.orders) == (1, 2, 3, 4)


class TestCharts:

    def test_today_is_bucketed_by_local_hour(self, db, make_order):
        make_order(total_price=9.5, created_at=utc(2026, 10, 14, 9, 10))
        make_order(total_price=0.5, created_at=utc(2026, 10, 14, 9, 50))
        make_order(total_price=4, created_at=utc(2026, 10, 14, 3, 0))

        chart = services.compute_dashboard_analytics(db, NOW, TZ).today.chart

        assert [p.model_dump() for p in chart] == [
            {"date": "8:00", "total": 4},
            {"date": "14:00", "total": 10},
        ]

    def test_late_utc_order_lands_in_next_local_day_hour(self, db, make_order):
        make_order(created_at=utc(2026, 10, 14, 22, 30))

        chart = services.compute_dashboard_analytics(db, NOW, TZ).today.chart

        assert chart[0].date == "3:00"

    def test_week_chart_orders_sunday_first(self, db, make_order):
        make_order(total_price=7, created_at=utc(2026, 10, 12, 10))
        make_order(total_price=5, created_at=utc(2026, 10, 18, 10))

        chart = services.compute_dashboard_analytics(db, NOW, TZ).week.chart

        assert [(p.date, p.total) for p in chart] == [("Sun", 5), ("Mon", 7)]

    def test_month_chart_numbers_weeks_from_month_start(self, db, make_order):
        make_order(total_price=3, created_at=utc(2026, 10, 14, 8))
        make_order(total_price=2, created_at=utc(2026, 10, 2, 8))
        make_order(total_price=1, created_at=utc(2026, 10, 1, 8))

        chart = services.compute_dashboard_analytics(db, NOW, TZ).month.chart

        assert [(p.date, p.total) for p in chart] == [("Week 1", 3), ("Week 3", 3)]

    def test_year_chart_uses_month_abbreviations(self, db, make_order):
        make_order(total_price=11, created_at=utc(2026, 10, 3, 8))
        make_order(total_price=12, created_at=utc(2026, 2, 3, 8))

        chart = services.compute_dashboard_analytics(db, NOW, TZ).year.chart

        assert [(p.date, p.total) for p in chart] == [("Feb", 12), ("Oct", 11)]

    def test_chart_total_matches_price(self, db, make_order):
        for hours in range(5):
            make_order(total_price=hours + 1, created_at=NOW - timedelta(hours=hours))

        year = services.compute_dashboard_analytics(db, NOW, TZ).year

        assert sum(p.total for p in year.chart) == year.price


class TestSnapshot:

    def test_dashboard_missing_before_first_update(self, db):
        with pytest.raises(NotFoundError, match="Run the update process first"):
            services.get_dashboard_analytics(db)

    def test_update_then_read(self, db, make_order):
        make_order(total_price=42, created_at=NOW)

        snapshot = services.update_dashboard_analytics(db, NOW)
        db.commit()

        stored = services.get_dashboard_analytics(db)
        assert snapshot is not None
        assert stored.identifier == "main_dashboard"
        assert stored.today.price == 42
        assert stored.year.orders == 1

    def test_repeated_updates_keep_one_snapshot(self, db, make_order):
        make_order(created_at=NOW)

        first = services.update_dashboard_analytics(db, NOW)
        db.commit()
        second = services.update_dashboard_analytics(db, NOW + timedelta(minutes=5))
        db.commit()

        assert db.query(DashboardAnalytics).count() == 1
        assert second.created_at == first.created_at
        assert second.updated_at > first.updated_at
        assert first.model_dump(exclude={"created_at", "updated_at"}) == \
            second.model_dump(exclude={"created_at", "updated_at"})

    def test_snapshot_reflects_new_orders(self, db, make_order):
        services.update_dashboard_analytics(db, NOW)
        db.commit()
        make_order(created_at=NOW)

        services.update_dashboard_analytics(db, NOW)
        db.commit()

        assert services.get_dashboard_analytics(db).today.orders == 1

    def test_calculation_failure_leaves_snapshot_untouched(self, db, make_order, monkeypatch):
        services.update_dashboard_analytics(db, NOW)
        db.commit()
        make_order(created_at=NOW)

        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("domain.services.analytics.compute_dashboard_analytics", broken)

        assert services.calculate_global_analytics(db, NOW) is None
        assert services.update_dashboard_analytics(db, NOW) is None
        assert services.get_dashboard_analytics(db).today.orders == 0

    def test_save_failure_is_reported_as_none(self, db, make_order, monkeypatch):
        make_order(created_at=NOW)
        monkeypatch.setattr("domain.services.analytics._UPSERT_DIALECTS", {})

        assert services.update_dashboard_analytics(db, NOW) is None
        with pytest.raises(NotFoundError):
            services.get_dashboard_analytics(db)

    def test_snapshot_serializes_with_camel_case_keys(self, db, make_order):
        make_order(delivery_type="delivery", delivery_distance=2, created_at=NOW)

        snapshot = services.update_dashboard_analytics(db, NOW)
        body = snapshot.model_dump(by_alias=True, mode="json")

        assert {"createdAt", "updatedAt", "identifier"} <= body.keys()
        assert body["today"]["deliveryOrders"] == 1
        assert body["today"]["deliveryDistance"] == 2
