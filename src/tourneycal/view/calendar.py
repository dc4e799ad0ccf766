# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tourneycal.color import (
    OUT_OF_MONTH_STYLE,
    OVERFLOW_STYLE,
    TODAY_STYLE,
    bar_style,
)
from tourneycal.constants import WEEKDAY_LABELS
from tourneycal.model.calendar_event import CalendarEvent
from tourneycal.model.layout import MonthLayout, PositionedBar, WeekLayout
from tourneycal.model.tournament import Tournament
from tourneycal.time import format_date_range, today_local
from tourneycal.view.header import header


def calendar_month_view(
    region: Optional[str],
    month_layout: MonthLayout,
    events: list[CalendarEvent],
    max_visible_tracks: int,
    cell_width: int = 18,
) -> None:
    """
    Display a month grid with tournaments drawn as bars across the days they cover.

    Args:
        region: The region filter in effect
        month_layout: Output of layout_month for the displayed month
        events: The events the layout was computed from (for titles and colors)
        max_visible_tracks: Number of bar rows reserved in every week
        cell_width: Width of each day cell in characters
    """
    grid = month_layout["grid"]
    month_start = pendulum.date(grid["year"], grid["month"] + 1, 1)

    header(region, "calendar-month")

    console = Console()
    console.print(f"\n[bold]{month_start.format('MMMM YYYY')}[/bold]\n")
    console.print(
        render_month_grid(month_layout, events, max_visible_tracks, cell_width)
    )

    if len(events) == 0:
        console.print("[dim]No tournaments this month[/dim]")
    console.print()


def render_month_grid(
    month_layout: MonthLayout,
    events: list[CalendarEvent],
    max_visible_tracks: int,
    cell_width: int = 18,
) -> Table:
    """
    Render a laid-out month as a rich table, one row per week.

    Each day cell holds the day number, one line per visible track and a
    "+N more" line when hidden events cover that day.
    """
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 0))
    for day_name in WEEKDAY_LABELS:
        table.add_column(day_name, style="bold", width=cell_width, no_wrap=True)

    events_by_id = {event["id"]: event for event in events}
    today = today_local()

    for week_layout in month_layout["weeks"]:
        table.add_row(
            *_render_week_cells(
                week_layout, events_by_id, today, max_visible_tracks, cell_width
            )
        )

    return table


def _render_week_cells(
    week_layout: WeekLayout,
    events_by_id: dict[str, CalendarEvent],
    today: pendulum.Date,
    max_visible_tracks: int,
    cell_width: int,
) -> list[Text]:
    bars_by_track: dict[int, list[PositionedBar]] = {}
    for bar in week_layout["bars"]:
        bars_by_track.setdefault(bar["track"], []).append(bar)

    has_overflow = week_layout["overflow_count"] > 0

    cells: list[Text] = []
    for col, day in enumerate(week_layout["week"]):
        cell_content = Text()

        # Day number
        day_label = f"{day['date'].day:2d}"
        if not day["in_current_month"]:
            cell_content.append(f"{day_label}\n", style=OUT_OF_MONTH_STYLE)
        elif day["date"] == today:
            cell_content.append(day_label, style=TODAY_STYLE)
            cell_content.append("\n")
        else:
            cell_content.append(f"{day_label}\n", style="bold")

        # One line per track so bars stay aligned across the week
        for track in range(max_visible_tracks):
            bar = _bar_at(bars_by_track.get(track, []), col)
            if bar is None:
                cell_content.append("\n")
                continue
            event = events_by_id.get(bar["event_id"])
            cell_content.append(
                _bar_segment(bar, event, col, cell_width),
                style=bar_style(event["priority"] if event is not None else 0),
            )
            cell_content.append("\n")

        if has_overflow:
            hidden = week_layout["overflow_by_day"][col]
            if hidden > 0:
                cell_content.append(f"+{hidden} more", style=OVERFLOW_STYLE)

        cells.append(cell_content)

    return cells


def _bar_at(bars: list[PositionedBar], col: int) -> Optional[PositionedBar]:
    for bar in bars:
        if bar["start_col"] <= col < bar["start_col"] + bar["span"]:
            return bar
    return None


def _bar_segment(
    bar: PositionedBar,
    event: Optional[CalendarEvent],
    col: int,
    cell_width: int,
) -> str:
    """Text for one day of a bar: the title on its first day, filler after."""
    if col != bar["start_col"]:
        segment = ""
    else:
        title = "[no title]"
        if event is not None and event["title"]:
            title = event["title"]
        prefix = "◀ " if bar["continues_before"] else ""
        segment = f"{prefix}{title}"

    is_last_day = col == bar["start_col"] + bar["span"] - 1
    if is_last_day and bar["continues_after"]:
        width = cell_width - 2
        suffix = " ▶"
    else:
        width = cell_width
        suffix = ""

    # Truncate title to fit in cell
    if len(segment) > width:
        segment = segment[: width - 3] + "..."
    return segment.ljust(width) + suffix


def calendar_day_view(
    region: Optional[str],
    date: pendulum.Date,
    tournaments: list[Tournament],
) -> None:
    """
    Display the tournaments running on a single day.

    Args:
        region: The region filter in effect
        date: The selected day
        tournaments: Tournaments covering the day, already ordered for display
    """
    header(region, "calendar-day")

    console = Console()
    console.print(f"\n[bold]{date.format('dddd, MMMM D')}[/bold]\n")

    if len(tournaments) == 0:
        console.print("[dim]No tournaments on this day[/dim]\n")
        return

    for tournament in tournaments:
        line = Text()
        if tournament["featured"]:
            line.append("FEATURED ", style=bar_style(1))
            line.append(" ")
        line.append(tournament["name"], style="bold")
        console.print(line)

        location = ", ".join(
            part for part in (tournament["city"], tournament["region"]) if part
        )
        details = [format_date_range(tournament["date_start"], tournament["date_end"])]
        if location:
            details.append(location)
        if tournament["level"]:
            details.append(tournament["level"])
        if tournament["entry_fee_min"] is not None:
            details.append(f"${tournament['entry_fee_min']}+")
        console.print(f"  [dim]{' • '.join(details)}[/dim]")
        console.print(f"  [dim]{tournament['slug']}[/dim]")
    console.print()
