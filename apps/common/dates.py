"""Calendar helpers shared by the ledgers."""

import calendar
from datetime import date, datetime, time, timedelta

from django.utils import timezone


def day_floor(value) -> date:
    """
    Truncate a timestamp to its calendar day in the current time zone.

    Plain dates are returned unchanged; naive datetimes are taken as local.
    """
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    return value


def day_bounds(start, end) -> tuple[datetime, datetime]:
    """
    Return aware datetimes covering the full days from start to end.

    The lower bound is the start of the first day and the upper bound is the
    start of the day after the last one (exclusive).
    """
    first = datetime.combine(day_floor(start), time.min)
    after_last = datetime.combine(day_floor(end) + timedelta(days=1), time.min)
    tz = timezone.get_current_timezone()
    return timezone.make_aware(first, tz), timezone.make_aware(after_last, tz)


def add_months(value, months: int):
    """
    Shift a date or datetime by whole calendar months.

    The day is clamped to the last day of the target month, so Jan 31 plus
    one month is Feb 28 (or 29).
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def current_month_bounds(today=None) -> tuple[date, date]:
    """Return the first and last day of the month containing today."""
    today = today or timezone.localdate()
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)
