# SPDX-License-Identifier: MIT

from tourneycal.constants import DAYS_PER_WEEK
from tourneycal.errors import InvalidArgumentError
from tourneycal.model.calendar_event import CalendarEvent
from tourneycal.model.month_grid import Week


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_month(month: int) -> None:
    if not _is_int(month) or month < 0 or month > 11:
        raise InvalidArgumentError(
            f"month must be an integer between 0 and 11, got {month!r}"
        )


def validate_year(year: int) -> None:
    if not _is_int(year):
        raise InvalidArgumentError(f"year must be an integer, got {year!r}")


def validate_max_visible_tracks(max_visible_tracks: int) -> None:
    if not _is_int(max_visible_tracks) or max_visible_tracks < 1:
        raise InvalidArgumentError(
            f"max_visible_tracks must be a positive integer, got {max_visible_tracks!r}"
        )


def validate_event(event: CalendarEvent) -> None:
    event_id = event["id"]
    if not isinstance(event_id, str) or event_id == "":
        raise InvalidArgumentError(f"event id must be a non-empty string, got {event_id!r}")
    if event["date_end"] < event["date_start"]:
        raise InvalidArgumentError(
            f"event {event_id} ends ({event['date_end'].to_date_string()}) "
            f"before it starts ({event['date_start'].to_date_string()})"
        )


def validate_events(events: list[CalendarEvent]) -> None:
    seen_ids: set[str] = set()
    for event in events:
        validate_event(event)
        if event["id"] in seen_ids:
            raise InvalidArgumentError(f"duplicate event id: {event['id']}")
        seen_ids.add(event["id"])


def validate_week(week: Week) -> None:
    if len(week) != DAYS_PER_WEEK:
        raise InvalidArgumentError(
            f"a week must contain {DAYS_PER_WEEK} days, got {len(week)}"
        )
    # isoweekday: Monday = 1 ... Sunday = 7
    if week[0]["date"].isoweekday() != 7:
        raise InvalidArgumentError(
            f"a week must start on a Sunday, got {week[0]['date'].to_date_string()}"
        )
    for previous_day, day in zip(week, week[1:]):
        if day["date"].toordinal() - previous_day["date"].toordinal() != 1:
            raise InvalidArgumentError(
                f"week days must be consecutive, got {previous_day['date'].to_date_string()} "
                f"followed by {day['date'].to_date_string()}"
            )
