import calendar
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from trending_repos.domain.models import Duration
from trending_repos.domain.validation import validate_duration

CUTOFF_FORMAT = "%Y-%m-%d"


def _months_back(day: date, months: int) -> date:
    """Steps back whole calendar months, clamping to the last day of the target month."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def cutoff_date(duration, today: Optional[date] = None) -> date:
    """
    Maps a duration token to the calendar date repositories must be created after.

    Args:
        duration: A `Duration` or a token accepted by `validate_duration`.
        today: Reference date; defaults to the current UTC date.

    Returns:
        date: The cutoff date. Time of day is intentionally discarded.
    """
    duration = validate_duration(duration)
    if today is None:
        today = datetime.now(timezone.utc).date()

    if duration is Duration.DAY:
        return today - timedelta(days=1)
    if duration is Duration.WEEK:
        return today - timedelta(days=7)
    if duration is Duration.MONTH:
        return _months_back(today, 1)
    return _months_back(today, 12)


def format_cutoff(day: date) -> str:
    return day.strftime(CUTOFF_FORMAT)
