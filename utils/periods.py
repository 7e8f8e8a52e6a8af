"""Calendar windows and chart bucketing for dashboard analytics.

Window boundaries are always computed in UTC. The configured timezone is only
used to decide which chart bucket an order falls into.
"""
import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Iterable

from utils.enums import Period

DAY_LABELS = {1: "Sun", 2: "Mon", 3: "Tue", 4: "Wed", 5: "Thu", 6: "Fri", 7: "Sat"}
MONTH_LABELS = {i: calendar.month_abbr[i] for i in range(1, 13)}
UNKNOWN_LABEL = "Unk"

_END_OF_DAY = {"hour": 23, "minute": 59, "second": 59, "microsecond": 999000}


@dataclass(frozen=True)
class TimeWindow:
    start: datetime
    end: datetime

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


def _start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def today_window(now: datetime) -> TimeWindow:
    start = _start_of_day(now)
    return TimeWindow(start, start.replace(**_END_OF_DAY))


def week_window(now: datetime) -> TimeWindow:
    # weekday() is 0 for Monday, so Sunday walks back six days
    start = _start_of_day(now) - timedelta(days=now.weekday())
    end = (start + timedelta(days=6)).replace(**_END_OF_DAY)
    return TimeWindow(start, end)


def month_window(now: datetime) -> TimeWindow:
    last_day = calendar.monthrange(now.year, now.month)[1]
    start = _start_of_day(now).replace(day=1)
    return TimeWindow(start, start.replace(day=last_day, **_END_OF_DAY))


def year_window(now: datetime) -> TimeWindow:
    start = _start_of_day(now).replace(month=1, day=1)
    return TimeWindow(start, start.replace(month=12, day=31, **_END_OF_DAY))


def build_windows(now: datetime) -> dict[Period, TimeWindow]:
    now = now.astimezone(timezone.utc)
    return {
        Period.today: today_window(now),
        Period.week: week_window(now),
        Period.month: month_window(now),
        Period.year: year_window(now),
    }


# Bucketing. Each bucketer maps a timezone-local datetime to a sortable key,
# and each labeler turns that key into the chart label.

def hour_bucket(local: datetime) -> int:
    return local.hour


def day_of_week_bucket(local: datetime) -> int:
    # 1=Sun ... 7=Sat
    return local.isoweekday() % 7 + 1


def iso_week_bucket(local: datetime) -> int:
    return local.isocalendar()[1]


def month_bucket(local: datetime) -> int:
    return local.month


def hour_label(hour: int) -> str:
    return f"{hour}:00"


def day_label(day: int) -> str:
    return DAY_LABELS.get(day, UNKNOWN_LABEL)


def month_label(month: int) -> str:
    return MONTH_LABELS.get(month, UNKNOWN_LABEL)


def week_of_month_labeler(window: TimeWindow, tz: tzinfo) -> Callable[[int], str]:
    first_week = iso_week_bucket(window.start.astimezone(tz))

    def label(week: int) -> str:
        return f"Week {week - first_week + 1}"

    return label


def build_chart(
        rows: Iterable[tuple[datetime, float]],
        tz: tzinfo,
        bucket: Callable[[datetime], int],
        label: Callable[[int], str],
        sort_by_first_seen: bool = False,
) -> list[dict]:
    """Group (created_at, total_price) rows into labelled chart points.

    Buckets are ordered by their key, or by the earliest timestamp that fell
    into them when ``sort_by_first_seen`` is set. Empty buckets never appear.
    """
    totals: dict[int, float] = {}
    first_seen: dict[int, datetime] = {}

    for created_at, total_price in rows:
        key = bucket(created_at.astimezone(tz))
        totals[key] = totals.get(key, 0) + (total_price or 0)
        if key not in first_seen or created_at < first_seen[key]:
            first_seen[key] = created_at

    if sort_by_first_seen:
        keys = sorted(totals, key=lambda k: first_seen[k])
    else:
        keys = sorted(totals)

    return [{"date": label(key), "total": totals[key]} for key in keys]
