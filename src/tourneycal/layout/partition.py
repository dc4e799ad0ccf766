# SPDX-License-Identifier: MIT

import datetime
import logging

import pendulum

from tourneycal.constants import DAYS_PER_WEEK
from tourneycal.errors import InvalidArgumentError
from tourneycal.layout.validate import validate_month, validate_year
from tourneycal.model.month_grid import MonthGrid, Week

logger = logging.getLogger(__name__)


def sunday_offset(date: pendulum.Date) -> int:
    """Column of a date in a Sunday-first week (Sunday = 0 ... Saturday = 6)."""
    return date.isoweekday() % DAYS_PER_WEEK


def build_month_grid(year: int, month: int) -> MonthGrid:
    """
    Partition a month into complete Sunday-to-Saturday weeks.

    Args:
        year: Gregorian year
        month: Zero-based month (0 = January, 11 = December)

    Returns:
        The month grid; leading and trailing days borrowed from the adjacent
        months are kept with in_current_month set to False

    Raises:
        InvalidArgumentError: If the month is outside 0-11 or the grid would
            leave the representable date range
    """
    validate_year(year)
    validate_month(month)

    try:
        first_day = pendulum.date(year, month + 1, 1)
        leading_days = sunday_offset(first_day)
        week_count = (
            leading_days + first_day.days_in_month + DAYS_PER_WEEK - 1
        ) // DAYS_PER_WEEK
    except ValueError as e:
        raise InvalidArgumentError(
            f"cannot build a month grid for {year}-{month + 1:02d}: {e}"
        ) from e

    first_ordinal = first_day.toordinal() - leading_days
    last_ordinal = first_ordinal + week_count * DAYS_PER_WEEK - 1
    if first_ordinal < 1 or last_ordinal > datetime.date.max.toordinal():
        raise InvalidArgumentError(
            f"the grid for {year}-{month + 1:02d} leaves the supported date range"
        )

    grid_start = first_day.subtract(days=leading_days)
    grid_dates = [
        grid_start.add(days=offset) for offset in range(week_count * DAYS_PER_WEEK)
    ]

    weeks: list[Week] = []
    for week_index in range(week_count):
        week_dates = grid_dates[
            week_index * DAYS_PER_WEEK : (week_index + 1) * DAYS_PER_WEEK
        ]
        weeks.append(
            [
                {
                    "date": date,
                    "in_current_month": date.year == year and date.month == month + 1,
                }
                for date in week_dates
            ]
        )

    logger.debug(
        "built grid for %d-%02d: %d weeks, %d leading days",
        year,
        month + 1,
        week_count,
        leading_days,
    )

    return {"year": year, "month": month, "weeks": weeks}
