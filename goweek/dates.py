"""
dates.py
Resolve the ISO week, its Monday/Friday boundaries and the month label for
the current (or previous) week.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import TimezoneError

DEFAULT_TIMEZONE = "Asia/Hong_Kong"

DATE_FORMAT = "%Y/%m/%d"
MONTH_FORMAT = "%Y-%m"


@dataclass(frozen=True)
class DateInfo:
    """Date strings substituted into the template and used for the report path.

    Attributes
    ----------
    week : str
        ISO week number, zero-padded to two digits.
    week_start : str
        Monday of the week as ``YYYY/MM/DD``.
    week_end : str
        Friday of the week as ``YYYY/MM/DD``.
    month : str
        ``YYYY-MM`` of the reference day.

    """

    week: str
    week_start: str
    week_end: str
    month: str


def load_timezone(tz_name: str = DEFAULT_TIMEZONE) -> ZoneInfo:
    """Load a timezone from the tz database, raising TimezoneError if absent."""
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimezoneError(f"Unable to load timezone '{tz_name}': {e}")


def get_date_info(
    last_week: bool = False,
    now: Optional[datetime] = None,
    tz_name: str = DEFAULT_TIMEZONE,
) -> DateInfo:
    """Compute the DateInfo for the week containing ``now`` (or a week before it).

    Args:
        last_week : Step back exactly seven calendar days before resolving.
        now : Reference instant (default: the current time). Aware values are
              converted to ``tz_name``; naive values are taken as local to it.
        tz_name : Timezone the reference instant is interpreted in.

    Returns:
        The resolved DateInfo.

    Raises:
        TimezoneError: when ``tz_name`` is not in the tz database.

    """
    tz = load_timezone(tz_name)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=tz)
    else:
        now = now.astimezone(tz)

    day = now.date()
    if last_week:
        day = day - timedelta(days=7)

    # Monday=1 ... Sunday=7
    _, week_no, weekday = day.isocalendar()
    week_start = day - timedelta(days=weekday - 1)
    week_end = day + timedelta(days=5 - weekday)

    return DateInfo(
        week=f"{week_no:02d}",
        week_start=week_start.strftime(DATE_FORMAT),
        week_end=week_end.strftime(DATE_FORMAT),
        month=day.strftime(MONTH_FORMAT),
    )
