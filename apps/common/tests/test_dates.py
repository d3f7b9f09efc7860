import pytest
from datetime import date, datetime, timezone as dt_timezone
from django.test import override_settings
from django.utils import timezone

from apps.common.dates import add_months, current_month_bounds, day_bounds, day_floor


class TestAddMonths:

    @pytest.mark.parametrize('start, expected', [
        (date(2024, 3, 15), date(2024, 4, 15)),
        (date(2024, 1, 31), date(2024, 2, 29)),
        (date(2023, 1, 31), date(2023, 2, 28)),
        (date(2024, 12, 10), date(2025, 1, 10)),
    ])
    def test_one_month(self, start, expected):
        assert add_months(start, 1) == expected

    def test_keeps_time_of_day(self):
        start = datetime(2024, 8, 31, 18, 45, tzinfo=dt_timezone.utc)

        assert add_months(start, 1) == datetime(2024, 9, 30, 18, 45, tzinfo=dt_timezone.utc)


class TestDayFloor:

    def test_date_passes_through(self):
        assert day_floor(date(2024, 1, 10)) == date(2024, 1, 10)

    @override_settings(TIME_ZONE='Africa/Casablanca')
    def test_uses_local_calendar_day(self):
        # 23:30 UTC on Jan 10 is already Jan 11 in Casablanca (UTC+1)
        late = datetime(2024, 1, 10, 23, 30, tzinfo=dt_timezone.utc)

        assert day_floor(late) == date(2024, 1, 11)

    def test_bounds_cover_whole_days(self):
        lower, upper = day_bounds(date(2024, 1, 10), date(2024, 1, 11))

        assert timezone.is_aware(lower)
        assert lower == datetime(2024, 1, 10, tzinfo=dt_timezone.utc)
        assert upper == datetime(2024, 1, 12, tzinfo=dt_timezone.utc)


def test_current_month_bounds():
    assert current_month_bounds(date(2024, 2, 14)) == (date(2024, 2, 1), date(2024, 2, 29))
