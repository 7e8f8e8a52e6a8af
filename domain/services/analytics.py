import logging
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo
from sqlalchemy import select, func, case, distinct
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from domain import schemas
from domain.core.constants import DASHBOARD_IDENTIFIER
from domain.core.errors import NotFoundError, StoreError
from domain.core.settings import settings
from infrastructure.db.models import Order, DashboardAnalytics
from utils import periods
from utils.enums import DeliveryType, Period
from utils.helpers import as_utc, utcnow

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _period_stats(db: Session, window: periods.TimeWindow) -> dict:
    is_delivery = Order.delivery_type == DeliveryType.delivery.value

    stmt = (
        select(
            func.count(Order.id),
            func.coalesce(func.sum(Order.total_price), 0),
            func.coalesce(func.sum(case((is_delivery, 1), else_=0)), 0),
            func.coalesce(func.sum(case((is_delivery, Order.total_price), else_=0)), 0),
            func.coalesce(func.sum(case((is_delivery, Order.delivery_distance), else_=0)), 0),
            func.count(distinct(Order.user_id)),
        )
        .where(Order.created_at.between(window.start, window.end))
    )
    orders, price, delivery_orders, delivery_price, delivery_distance, users = db.execute(stmt).one()

    return {
        "orders": orders,
        "price": price,
        "delivery_orders": delivery_orders,
        "delivery_price": delivery_price,
        "delivery_distance": delivery_distance,
        "users": users,
    }


def _chart_rows(db: Session, window: periods.TimeWindow) -> list[tuple[datetime, float]]:
    stmt = (
        select(Order.created_at, Order.total_price)
        .where(Order.created_at.between(window.start, window.end))
    )
    return [(as_utc(created_at), total) for created_at, total in db.execute(stmt)]


def _period_chart(
        db: Session,
        period: Period,
        window: periods.TimeWindow,
        tz: tzinfo,
) -> list[dict]:
    rows = _chart_rows(db, window)

    if period is Period.today:
        return periods.build_chart(rows, tz, periods.hour_bucket, periods.hour_label)
    if period is Period.week:
        return periods.build_chart(rows, tz, periods.day_of_week_bucket, periods.day_label)
    if period is Period.month:
        return periods.build_chart(
            rows,
            tz,
            periods.iso_week_bucket,
            periods.week_of_month_labeler(window, tz),
            sort_by_first_seen=True,
        )
    return periods.build_chart(rows, tz, periods.month_bucket, periods.month_label)


def compute_dashboard_analytics(
        db: Session,
        now: datetime | None = None,
        tz_name: str | None = None,
) -> schemas.AnalyticsDataSchema:
    """Roll up every order into today/week/month/year statistics.

    Each period is an independent pass over the same orders: scalar totals
    come from one aggregate query, the chart from grouping the period's
    orders by a calendar bucket in the configured timezone.
    """
    now = now or utcnow()
    tz = ZoneInfo(tz_name or settings.ANALYTICS_TIMEZONE)

    data = {}
    for period, window in periods.build_windows(now).items():
        stats = _period_stats(db, window)
        stats["chart"] = _period_chart(db, period, window, tz)
        data[period.value] = schemas.PeriodStatsSchema.model_validate(stats)

    return schemas.AnalyticsDataSchema(**data)


def calculate_global_analytics(db: Session, now: datetime | None = None) -> schemas.AnalyticsDataSchema | None:
    try:
        return compute_dashboard_analytics(db, now)
    except Exception:
        logger.exception("Analytics_calculation_failed")
        return None


def save_dashboard_analytics(
        db: Session,
        data: schemas.AnalyticsDataSchema,
        now: datetime | None = None,
) -> schemas.DashboardAnalyticsSchema:
    now = now or utcnow()
    dialect = db.get_bind().dialect.name
    insert = _UPSERT_DIALECTS.get(dialect)
    if insert is None:
        raise StoreError(f"Upsert is not supported for dialect {dialect}")

    values = {
        period.value: getattr(data, period.value).model_dump(by_alias=True)
        for period in Period
    }
    stmt = insert(DashboardAnalytics).values(
        identifier=DASHBOARD_IDENTIFIER,
        created_at=now,
        updated_at=now,
        **values,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[DashboardAnalytics.identifier],
        set_={column: stmt.excluded[column] for column in (*values, "updated_at")},
    )

    try:
        db.execute(stmt)
        snapshot = db.execute(
            select(DashboardAnalytics)
            .where(DashboardAnalytics.identifier == DASHBOARD_IDENTIFIER)
            .execution_options(populate_existing=True)
        ).scalar_one()
    except SQLAlchemyError as e:
        raise StoreError("Failed to save dashboard analytics") from e

    return schemas.DashboardAnalyticsSchema.model_validate(snapshot)


def update_dashboard_analytics(db: Session, now: datetime | None = None) -> schemas.DashboardAnalyticsSchema | None:
    logger.info("Analytics_update_started")

    data = calculate_global_analytics(db, now)
    if data is None:
        logger.error("Analytics_calculation_failed_update_aborted")
        return None

    try:
        snapshot = save_dashboard_analytics(db, data, now)
    except StoreError:
        logger.exception("Analytics_save_failed")
        return None

    logger.info(f"Analytics_updated updated_at={snapshot.updated_at.isoformat()}")
    return snapshot


def get_dashboard_analytics(db: Session) -> schemas.DashboardAnalyticsSchema:
    snapshot = db.get(DashboardAnalytics, DASHBOARD_IDENTIFIER)
    if not snapshot:
        raise NotFoundError("Global analytics data not found. Run the update process first.")
    return schemas.DashboardAnalyticsSchema.model_validate(snapshot)
