# SPDX-License-Identifier: MIT

from tourneycal.model.calendar_event import CalendarEvent
from tourneycal.model.month_grid import Week


def select_events_for_week(
    events: list[CalendarEvent], week: Week
) -> list[CalendarEvent]:
    """Return the events whose inclusive date range overlaps the week, in input order."""
    week_start = week[0]["date"]
    week_end = week[-1]["date"]
    return [
        event
        for event in events
        if event["date_start"] <= week_end and event["date_end"] >= week_start
    ]
