# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Optional, cast

from tourneycal.constants import CALENDAR_STATUSES
from tourneycal.layout.month import fetch_window
from tourneycal.layout.validate import validate_event
from tourneycal.model.calendar_event import CalendarEvent
from tourneycal.model.tournament import Tournament

logger = logging.getLogger(__name__)


def tournament_to_calendar_event(tournament: Tournament) -> CalendarEvent:
    """
    Convert a stored tournament into a calendar event.

    A tournament without an end date is a single-day event. Featured
    tournaments get a higher priority so they win placement ties.

    Raises:
        InvalidArgumentError: If the tournament ends before it starts
    """
    date_end = tournament["date_end"]
    event: CalendarEvent = {
        "id": cast(str, tournament["id"]),
        "title": tournament["name"],
        "date_start": tournament["date_start"],
        "date_end": date_end if date_end is not None else tournament["date_start"],
        "priority": 1 if tournament["featured"] else 0,
    }
    validate_event(event)
    return event


def filter_tournaments(
    tournaments: list[Tournament],
    region: Optional[str] = None,
    statuses: Iterable[str] = CALENDAR_STATUSES,
) -> list[Tournament]:
    allowed_statuses = set(statuses)
    return [
        tournament
        for tournament in tournaments
        if tournament["status"] in allowed_statuses
        and (region is None or tournament["region"] == region)
    ]


def calendar_events_for_month(
    tournaments: list[Tournament],
    year: int,
    month: int,
    region: Optional[str] = None,
    statuses: Iterable[str] = CALENDAR_STATUSES,
) -> list[CalendarEvent]:
    """
    Select the tournaments relevant to a month view and convert them to events.

    Only tournaments with an allowed status, in the requested region (when
    given) and overlapping the month's fetch window are kept. The result is
    ordered by start date then id.

    Args:
        tournaments: All known tournaments
        year: Gregorian year
        month: Zero-based month
        region: Optional region filter
        statuses: Tournament statuses shown on the calendar

    Returns:
        Calendar events ready for layout_month
    """
    window_start, window_end = fetch_window(year, month)

    events: list[CalendarEvent] = []
    for tournament in filter_tournaments(tournaments, region, statuses):
        event = tournament_to_calendar_event(tournament)
        if event["date_end"] >= window_start and event["date_start"] <= window_end:
            events.append(event)

    events.sort(key=lambda event: (event["date_start"].toordinal(), event["id"]))

    logger.debug(
        "selected %d of %d tournaments for %d-%02d",
        len(events),
        len(tournaments),
        year,
        month + 1,
    )
    return events
