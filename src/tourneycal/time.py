# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_to_iso_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_iso_str(date)


def date_from_value(value: str | datetime.date) -> pendulum.Date:
    """Convert a 'YYYY-MM-DD' string or a plain date into a pendulum.Date.

    YAML files edited by hand load unquoted dates as datetime.date, so both
    forms are accepted.
    """
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    return cast(pendulum.DateTime, pendulum.parse(value)).date()


def date_from_value_optional(
    value: Optional[str | datetime.date],
) -> Optional[pendulum.Date]:
    if value is None:
        return None
    return date_from_value(value)


def format_date(date: pendulum.Date) -> str:
    return date.format("MMM D, YYYY")


def format_date_range(start: pendulum.Date, end: Optional[pendulum.Date]) -> str:
    """Format a tournament date range for display.

    Examples: "Feb 3, 2024", "Feb 3-5, 2024", "Jan 30 - Feb 2, 2024",
    "Dec 30, 2024 - Jan 2, 2025".
    """
    if end is None or end == start:
        return format_date(start)
    if start.year != end.year:
        return f"{format_date(start)} - {format_date(end)}"
    if start.month == end.month:
        return f"{start.format('MMM D')}-{end.day}, {end.year}"
    return f"{start.format('MMM D')} - {end.format('MMM D')}, {end.year}"
