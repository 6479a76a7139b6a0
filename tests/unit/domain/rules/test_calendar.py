"""Unit tests for calendar helpers."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from lifequest.domain.rules.calendar import (
    is_later_day,
    is_same_day,
    period_start,
    week_number,
)
from lifequest.domain.value import RedeemPeriod


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestWeekNumber:
    def test_week_one_contains_january_first(self):
        assert week_number(_utc(2025, 1, 1)) == 1
        assert week_number(_utc(2025, 1, 4)) == 1  # Saturday

    def test_sunday_starts_a_new_week(self):
        assert week_number(_utc(2025, 1, 5)) == 2

    def test_monday_start(self):
        assert week_number(_utc(2025, 1, 5), "monday") == 1
        assert week_number(_utc(2025, 1, 6), "monday") == 2

    def test_late_december_belongs_to_next_years_week_one(self):
        assert week_number(_utc(2025, 12, 31)) == 1

    def test_mid_year(self):
        assert week_number(_utc(2025, 6, 11)) == 24


class TestDayComparisons:
    def test_same_day(self):
        assert is_same_day(_utc(2025, 6, 11, 1), _utc(2025, 6, 11, 23))
        assert not is_same_day(_utc(2025, 6, 11, 23), _utc(2025, 6, 12, 1))

    def test_later_day(self):
        assert is_later_day(_utc(2025, 6, 11, 23), _utc(2025, 6, 12, 0, 5))
        assert not is_later_day(_utc(2025, 6, 11, 1), _utc(2025, 6, 11, 23))
        assert not is_later_day(_utc(2025, 6, 12), _utc(2025, 6, 11))

    def test_days_are_counted_in_the_configured_zone(self):
        tokyo = ZoneInfo("Asia/Tokyo")
        login = datetime(2025, 6, 11, 8, 0, tzinfo=tokyo)
        # 23:30 UTC on the 11th is 08:30 on the 12th in Tokyo
        assert is_later_day(login, _utc(2025, 6, 11, 23, 30), "Asia/Tokyo")
        # Both moments are on the 10th and 11th in UTC
        assert not is_same_day(login, _utc(2025, 6, 11, 23, 30))

    def test_utc_moments_compare_as_local_days(self):
        new_york = ZoneInfo("America/New_York")
        morning = datetime(2026, 3, 10, 8, 0, tzinfo=new_york).astimezone(timezone.utc)
        evening = datetime(2026, 3, 10, 21, 0, tzinfo=new_york)
        # 21:00 in New York is already the 11th in UTC
        assert is_same_day(morning, evening, "America/New_York")
        assert not is_later_day(morning, evening, "America/New_York")


class TestPeriodStart:
    def test_daily(self):
        assert period_start(RedeemPeriod.DAILY, _utc(2025, 6, 11, 15)) == _utc(
            2025, 6, 11
        )

    def test_weekly(self):
        assert period_start(RedeemPeriod.WEEKLY, _utc(2025, 6, 11, 15)) == _utc(
            2025, 6, 8
        )

    def test_monthly(self):
        moment = _utc(2025, 6, 11, 15)
        assert period_start(RedeemPeriod.MONTHLY, moment) == _utc(2025, 6, 1)
        assert period_start(RedeemPeriod.MONTHLY, moment) <= moment - timedelta(days=10)

    def test_local_midnight(self):
        tz = "America/New_York"
        # 02:00 UTC on the 12th is still the 11th in New York
        start = period_start(RedeemPeriod.DAILY, _utc(2025, 6, 12, 2), tz=tz)
        assert start == datetime(2025, 6, 11, tzinfo=ZoneInfo(tz))


class TestWeekNumberTimezone:
    def test_week_follows_the_local_day(self):
        # Sunday 01:00 UTC is Saturday evening in New York
        moment = _utc(2025, 1, 5, 1)
        assert week_number(moment) == 2
        assert week_number(moment, tz="America/New_York") == 1
