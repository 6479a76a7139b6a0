"""Calendar helpers for day, week and month windows.

Days are counted in the user's configured timezone, whatever zone the
compared moments carry. Weeks start on Sunday by default and week 1 is the
week containing January 1st.
"""

from datetime import date, datetime, timedelta
from typing import Literal
from zoneinfo import ZoneInfo

from lifequest.domain.value import RedeemPeriod

WeekStart = Literal["sunday", "monday"]


def to_local(moment: datetime, tz: str = "UTC") -> datetime:
    """Express ``moment`` in zone ``tz``. Naive moments are taken as local."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(ZoneInfo(tz))


def local_date(moment: datetime, tz: str = "UTC") -> date:
    return to_local(moment, tz).date()


def is_same_day(a: datetime, b: datetime, tz: str = "UTC") -> bool:
    """Whether two moments fall on the same calendar day in ``tz``."""
    return local_date(a, tz) == local_date(b, tz)


def is_later_day(earlier: datetime, later: datetime, tz: str = "UTC") -> bool:
    """Whether ``later`` falls on a calendar day after ``earlier``'s in ``tz``."""
    return local_date(later, tz) > local_date(earlier, tz)


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _week_offset(day: date, week_start: WeekStart) -> int:
    if week_start == "monday":
        return day.weekday()
    return (day.weekday() + 1) % 7


def start_of_week(moment: datetime, week_start: WeekStart = "sunday") -> datetime:
    day_start = start_of_day(moment)
    return day_start - timedelta(days=_week_offset(moment.date(), week_start))


def start_of_month(moment: datetime) -> datetime:
    return start_of_day(moment).replace(day=1)


def period_start(
    period: RedeemPeriod,
    moment: datetime,
    week_start: WeekStart = "sunday",
    tz: str = "UTC",
) -> datetime:
    """Start of the redemption window containing ``moment``, local to ``tz``."""
    local = to_local(moment, tz)
    if period is RedeemPeriod.DAILY:
        return start_of_day(local)
    if period is RedeemPeriod.WEEKLY:
        return start_of_week(local, week_start)
    return start_of_month(local)


def week_number(
    moment: datetime, week_start: WeekStart = "sunday", tz: str = "UTC"
) -> int:
    """Week of the year in ``tz``, where week 1 contains January 1st.

    The last days of December belong to week 1 of the next year when their
    week contains the next January 1st.
    """
    day = local_date(moment, tz)
    first_day = day - timedelta(days=_week_offset(day, week_start))
    if first_day + timedelta(days=6) >= date(first_day.year + 1, 1, 1):
        return 1
    jan1 = date(first_day.year, 1, 1)
    first_week = jan1 - timedelta(days=_week_offset(jan1, week_start))
    return (first_day - first_week).days // 7 + 1
