# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Optional

import pendulum
from pendulum.parsing.exceptions import ParserError

from symera.model.date_like import DateLike

_logger = logging.getLogger(__name__)

# Stand-in for missing or unparsable dates so that sorting and filtering
# stay total orderings.
FAR_FUTURE: pendulum.Date = pendulum.Date(2099, 12, 31)


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def now_in(tz: str) -> pendulum.DateTime:
    return pendulum.now(tz)


def _day_in_zone(value: datetime.datetime, tz: str) -> Optional[pendulum.Date]:
    try:
        return pendulum.instance(value, tz=tz).in_tz(tz).date()
    except (OverflowError, ValueError):
        # Shifting zones pushed the instant past year 1 or year 9999
        _logger.debug("date %r out of range in %s", value, tz)
        return None


def to_day(value: Optional[DateLike], tz: str = "UTC") -> Optional[pendulum.Date]:
    """Reduce a date-like value to its calendar day in ``tz``.

    Date-only values keep their calendar date. Values carrying a time of day
    are moved into ``tz`` first and then truncated to midnight; naive values
    are read as already being in ``tz``.

    Returns None for missing or unparsable input instead of raising.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return _day_in_zone(value, tz)
    if isinstance(value, datetime.date):
        return pendulum.Date(value.year, value.month, value.day)
    if not isinstance(value, str) or value.strip() == "":
        return None

    try:
        parsed = pendulum.parse(value.strip(), tz=tz, exact=True)
    except (ParserError, ValueError, TypeError, OverflowError):
        _logger.debug("unparsable date %r", value)
        return None

    if isinstance(parsed, pendulum.DateTime):
        return _day_in_zone(parsed, tz)
    if isinstance(parsed, pendulum.Date):
        return parsed
    # Times of day and durations carry no calendar date
    _logger.debug("value %r is not a calendar date", value)
    return None


def to_day_or_sentinel(value: Optional[DateLike], tz: str = "UTC") -> pendulum.Date:
    day = to_day(value, tz)
    if day is None:
        return FAR_FUTURE
    return day


def day_in_range(
    day: pendulum.Date, start: pendulum.Date, end: Optional[pendulum.Date]
) -> bool:
    """Inclusive containment of ``day`` in ``start..end``.

    A missing or inverted range collapses to the single ``start`` day.
    """
    if end is None or end < start:
        end = start
    return start <= day <= end


def days_between(start: datetime.date, end: datetime.date) -> int:
    return end.toordinal() - start.toordinal()


def month_grid_days(
    month: datetime.date, week_starts_on: int = pendulum.SUNDAY
) -> list[list[pendulum.Date]]:
    """
    Return the calendar days of the full weeks covering ``month``.

    Args:
        month: Any day inside the month to lay out
        week_starts_on: Weekday of the first column (Monday = 0 ... Sunday = 6)

    Returns:
        Rows of seven days; leading and trailing days belong to the adjacent months
    """
    first = pendulum.Date(month.year, month.month, 1)
    last = first.end_of("month")

    grid_start = first.subtract(days=(int(first.day_of_week) - week_starts_on) % 7)
    grid_end = last.add(days=(week_starts_on + 6 - int(last.day_of_week)) % 7)

    weeks: list[list[pendulum.Date]] = []
    current = grid_start
    while current <= grid_end:
        weeks.append([current.add(days=offset) for offset in range(7)])
        current = current.add(days=7)
    return weeks


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_to_display_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_display_str(date)
