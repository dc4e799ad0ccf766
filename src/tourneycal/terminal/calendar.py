# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from tourneycal.errors import InvalidArgumentError
from tourneycal.layout.month import events_for_date, layout_month, shift_month
from tourneycal.repository.configuration import CONFIGURATION_REPO
from tourneycal.repository.tournament import TOURNAMENT_REPO
from tourneycal.service.event_source import (
    calendar_events_for_month,
    filter_tournaments,
    tournament_to_calendar_event,
)
from tourneycal.terminal.custom_typer import AliasedTyperGroup
from tourneycal.terminal.parse import parse_date, parse_month, parse_region
from tourneycal.time import today_local
from tourneycal.view.calendar import calendar_day_view, calendar_month_view

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _resolve_region(region: Optional[str]) -> Optional[str]:
    if region is not None:
        return parse_region(region)
    return CONFIGURATION_REPO.get_config().get("default_region")


@app.command("month, m")
def month_view(
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help="YYYY-MM, defaults to the current month"),
    ] = None,
    offset: Annotated[
        int,
        typer.Option(
            "--offset",
            "-o",
            help="Months to move from --month, e.g. -1 for previous, 1 for next",
        ),
    ] = 0,
    region: Annotated[Optional[str], typer.Option("--region", "-r")] = None,
    max_tracks: Annotated[
        Optional[int],
        typer.Option(
            "--max-tracks",
            "-t",
            help="Tournament rows per week, defaults to the max_visible_tracks setting",
        ),
    ] = None,
    cell_width: Annotated[
        Optional[int],
        typer.Option("--cell-width", "-w", min=6, help="Width of each day cell"),
    ] = None,
) -> None:
    """Display a month grid of approved tournaments."""
    config = CONFIGURATION_REPO.get_config()
    region = _resolve_region(region)

    selected_month = parse_month(month)
    if selected_month is None:
        today = today_local()
        selected_month = (today.year, today.month - 1)
    year, zero_based_month = shift_month(*selected_month, offset)

    max_visible_tracks = (
        max_tracks if max_tracks is not None else config["max_visible_tracks"]
    )

    try:
        events = calendar_events_for_month(
            TOURNAMENT_REPO.get_all_tournaments(), year, zero_based_month, region
        )
        month_layout = layout_month(year, zero_based_month, events, max_visible_tracks)
    except InvalidArgumentError as e:
        logger.debug("layout rejected input", exc_info=True)
        Console().print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    calendar_month_view(
        region,
        month_layout,
        events,
        max_visible_tracks,
        cell_width if cell_width is not None else config["cell_width"],
    )


@app.command("day, d")
def day_view(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Argument(
            parser=parse_date,
            help="YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    region: Annotated[Optional[str], typer.Option("--region", "-r")] = None,
) -> None:
    """List the approved tournaments running on a day."""
    region = _resolve_region(region)
    if date is None:
        date = today_local()

    tournaments = filter_tournaments(TOURNAMENT_REPO.get_all_tournaments(), region)
    tournaments_by_id = {tournament["id"]: tournament for tournament in tournaments}

    try:
        day_events = events_for_date(
            [tournament_to_calendar_event(tournament) for tournament in tournaments],
            date,
        )
    except InvalidArgumentError as e:
        Console().print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    calendar_day_view(
        region,
        date,
        [tournaments_by_id[event["id"]] for event in day_events],
    )
