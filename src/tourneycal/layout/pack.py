# SPDX-License-Identifier: MIT

import logging
from typing import TypedDict

from tourneycal.constants import DAYS_PER_WEEK, DEFAULT_MAX_VISIBLE_TRACKS
from tourneycal.layout.select import select_events_for_week
from tourneycal.layout.validate import (
    validate_events,
    validate_max_visible_tracks,
    validate_week,
)
from tourneycal.model.calendar_event import CalendarEvent
from tourneycal.model.layout import PositionedBar, WeekLayout
from tourneycal.model.month_grid import Week

logger = logging.getLogger(__name__)


class _ClippedEvent(TypedDict):
    event: CalendarEvent
    start_col: int
    end_col: int


def _clip_to_week(event: CalendarEvent, week: Week) -> _ClippedEvent:
    week_start = week[0]["date"]
    week_end = week[-1]["date"]
    visible_start = max(event["date_start"], week_start)
    visible_end = min(event["date_end"], week_end)
    return {
        "event": event,
        "start_col": visible_start.toordinal() - week_start.toordinal(),
        "end_col": visible_end.toordinal() - week_start.toordinal(),
    }


def _sort_key(clipped: _ClippedEvent) -> tuple[int, int, int, str]:
    span = clipped["end_col"] - clipped["start_col"] + 1
    return (
        clipped["start_col"],
        -span,
        -int(clipped["event"]["priority"] or 0),
        clipped["event"]["id"],
    )


def _fits(placed: list[tuple[int, int]], start_col: int, end_col: int) -> bool:
    return all(
        not (existing_start <= end_col and existing_end >= start_col)
        for existing_start, existing_end in placed
    )


def pack_week(
    events: list[CalendarEvent],
    week: Week,
    max_visible_tracks: int = DEFAULT_MAX_VISIBLE_TRACKS,
) -> WeekLayout:
    """
    Assign each event touching the week to a track and position it as a bar.

    Events are placed greedily in order of start column, longer spans first,
    then higher priority, then id. Each event goes on the lowest track where
    its clipped column range does not overlap anything already placed. This
    does not guarantee the minimum number of tracks; hidden events are
    reported through the overflow counters instead.

    Args:
        events: Candidate events; those not touching the week are ignored
        week: Seven consecutive days starting on a Sunday
        max_visible_tracks: Number of tracks emitted as bars

    Returns:
        The week layout with bars sorted by track then start column

    Raises:
        InvalidArgumentError: If an event is malformed, the week is not a
            Sunday-to-Saturday run of days, or max_visible_tracks is not positive
    """
    validate_week(week)
    validate_max_visible_tracks(max_visible_tracks)
    validate_events(events)

    clipped_events = sorted(
        (_clip_to_week(event, week) for event in select_events_for_week(events, week)),
        key=_sort_key,
    )

    tracks: list[list[tuple[int, int]]] = []
    bars: list[PositionedBar] = []
    overflow_count = 0
    overflow_by_day = [0] * DAYS_PER_WEEK

    for clipped in clipped_events:
        start_col = clipped["start_col"]
        end_col = clipped["end_col"]

        track_index = next(
            (
                index
                for index, placed in enumerate(tracks)
                if _fits(placed, start_col, end_col)
            ),
            len(tracks),
        )
        if track_index == len(tracks):
            tracks.append([])
        tracks[track_index].append((start_col, end_col))

        if track_index >= max_visible_tracks:
            overflow_count += 1
            for col in range(start_col, end_col + 1):
                overflow_by_day[col] += 1
            continue

        event = clipped["event"]
        bars.append(
            {
                "event_id": event["id"],
                "start_col": start_col,
                "span": end_col - start_col + 1,
                "track": track_index,
                "continues_before": event["date_start"] < week[0]["date"],
                "continues_after": event["date_end"] > week[-1]["date"],
            }
        )

    bars.sort(key=lambda bar: (bar["track"], bar["start_col"]))

    if overflow_count > 0:
        logger.debug(
            "week of %s: %d tracks used, %d events hidden",
            week[0]["date"].to_date_string(),
            len(tracks),
            overflow_count,
        )

    return {
        "week": week,
        "bars": bars,
        "overflow_count": overflow_count,
        "overflow_by_day": overflow_by_day,
    }
