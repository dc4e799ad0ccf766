# SPDX-License-Identifier: MIT

import logging

import pendulum

from tourneycal.constants import DEFAULT_MAX_VISIBLE_TRACKS
from tourneycal.errors import InvalidArgumentError
from tourneycal.layout.pack import pack_week
from tourneycal.layout.partition import build_month_grid
from tourneycal.layout.validate import (
    validate_events,
    validate_max_visible_tracks,
    validate_month,
    validate_year,
)
from tourneycal.model.calendar_event import CalendarEvent
from tourneycal.model.layout import MonthLayout

logger = logging.getLogger(__name__)


def layout_month(
    year: int,
    month: int,
    events: list[CalendarEvent],
    max_visible_tracks: int = DEFAULT_MAX_VISIBLE_TRACKS,
) -> MonthLayout:
    """
    Compute the full calendar layout for a month.

    All inputs are validated before any layout work starts. Each week is
    packed independently from the same event list.

    Args:
        year: Gregorian year
        month: Zero-based month (0 = January)
        events: Events to place; events outside the visible weeks are ignored
        max_visible_tracks: Number of bar rows shown per week

    Returns:
        The month grid and one week layout per grid week
    """
    validate_year(year)
    validate_month(month)
    validate_max_visible_tracks(max_visible_tracks)
    validate_events(events)

    grid = build_month_grid(year, month)
    weeks = [pack_week(events, week, max_visible_tracks) for week in grid["weeks"]]

    logger.debug(
        "laid out %d events over %d weeks for %d-%02d",
        len(events),
        len(weeks),
        year,
        month + 1,
    )

    return {"grid": grid, "weeks": weeks}


def events_for_date(
    events: list[CalendarEvent], date: pendulum.Date
) -> list[CalendarEvent]:
    """Events covering a single day, higher priority first, then by start date and id."""
    day_events = [
        event
        for event in events
        if event["date_start"] <= date and event["date_end"] >= date
    ]
    day_events.sort(
        key=lambda event: (
            -int(event["priority"] or 0),
            event["date_start"].toordinal(),
            event["id"],
        )
    )
    return day_events


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move a zero-based (year, month) pair by a number of months."""
    validate_year(year)
    validate_month(month)
    absolute_month = year * 12 + month + offset
    return absolute_month // 12, absolute_month % 12


def fetch_window(year: int, month: int) -> tuple[pendulum.Date, pendulum.Date]:
    """
    Date range an event source should load to fill a month view.

    Spans the first day of the previous month through the last day of the
    next month, which covers every borrowed leading and trailing day.
    """
    previous_year, previous_month = shift_month(year, month, -1)
    next_year, next_month = shift_month(year, month, 1)
    try:
        window_start = pendulum.date(previous_year, previous_month + 1, 1)
        window_end = pendulum.date(next_year, next_month + 1, 1).end_of("month")
    except ValueError as e:
        raise InvalidArgumentError(
            f"cannot compute a fetch window for {year}-{month + 1:02d}: {e}"
        ) from e
    return window_start, window_end
