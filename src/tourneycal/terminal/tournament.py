# SPDX-License-Identifier: MIT

from typing import Annotated, NoReturn, Optional

import pendulum
import typer
from rich.console import Console

from tourneycal.constants import (
    TOURNAMENT_CATEGORIES,
    TOURNAMENT_STATUSES,
    TournamentStatus,
)
from tourneycal.errors import TournamentNotFoundError
from tourneycal.repository.tournament import TOURNAMENT_REPO
from tourneycal.template.tournament import get_tournament_template
from tourneycal.terminal.custom_typer import AliasedTyperGroup
from tourneycal.terminal.parse import parse_date, parse_level, parse_region
from tourneycal.view.tournament import single_tournament_view, tournaments_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()


def _not_found(error: TournamentNotFoundError) -> NoReturn:
    console.print(f"[red]Error: {error}[/red]")
    raise typer.Exit(1)


def _check_date_range(
    date_start: Optional[pendulum.Date], date_end: Optional[pendulum.Date]
) -> None:
    if date_start is not None and date_end is not None and date_end < date_start:
        raise typer.BadParameter(
            f"End date {date_end.to_date_string()} is before start date "
            f"{date_start.to_date_string()}"
        )


def _check_categories(categories: Optional[list[str]]) -> None:
    if categories is None:
        return
    for category in categories:
        if category not in TOURNAMENT_CATEGORIES:
            raise typer.BadParameter(
                f"Unknown category '{category}', expected one of: "
                f"{', '.join(TOURNAMENT_CATEGORIES)}"
            )


@app.command("add, a", no_args_is_help=True)
def add(
    name: Annotated[str, typer.Argument(help="tournament name")],
    start: Annotated[
        pendulum.Date,
        typer.Option(
            "--start",
            "-s",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ],
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--end",
            "-e",
            parser=parse_date,
            help="last day; omit for a single-day tournament",
        ),
    ] = None,
    city: Annotated[Optional[str], typer.Option("--city", "-c")] = None,
    region: Annotated[Optional[str], typer.Option("--region", "-r")] = None,
    level: Annotated[Optional[str], typer.Option("--level", "-l")] = None,
    categories: Annotated[
        Optional[list[str]],
        typer.Option("--category", "-cat", help="repeatable"),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    entry_fee_min: Annotated[
        Optional[int], typer.Option("--entry-fee-min", min=0)
    ] = None,
    registration_url: Annotated[
        Optional[str], typer.Option("--registration-url", "-u")
    ] = None,
    featured: Annotated[bool, typer.Option("--featured", "-f")] = False,
) -> None:
    """Submit a tournament; it stays pending until approved."""
    _check_date_range(start, end)
    _check_categories(categories)

    tournament = get_tournament_template()
    tournament["name"] = name
    tournament["date_start"] = start
    tournament["date_end"] = end
    tournament["city"] = city
    tournament["region"] = parse_region(region)
    tournament["level"] = parse_level(level)
    tournament["categories"] = categories
    tournament["description"] = description
    tournament["entry_fee_min"] = entry_fee_min
    tournament["registration_url"] = registration_url
    tournament["featured"] = featured

    TOURNAMENT_REPO.save_new_tournament(tournament)

    single_tournament_view(tournament)


@app.command("modify, m", no_args_is_help=True)
def modify(
    slug: str,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", "-s", parser=parse_date),
    ] = None,
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option("--end", "-e", parser=parse_date),
    ] = None,
    city: Annotated[Optional[str], typer.Option("--city", "-c")] = None,
    region: Annotated[Optional[str], typer.Option("--region", "-r")] = None,
    level: Annotated[Optional[str], typer.Option("--level", "-l")] = None,
    categories: Annotated[
        Optional[list[str]],
        typer.Option("--category", "-cat", help="replaces all categories"),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    entry_fee_min: Annotated[
        Optional[int], typer.Option("--entry-fee-min", min=0)
    ] = None,
    registration_url: Annotated[
        Optional[str], typer.Option("--registration-url", "-u")
    ] = None,
    remove_end: Annotated[bool, typer.Option("--remove-end", "-re")] = False,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
    remove_registration_url: Annotated[
        bool, typer.Option("--remove-registration-url", "-ru")
    ] = False,
) -> None:
    """Edit a tournament's details."""
    _check_categories(categories)
    try:
        current = TOURNAMENT_REPO.get_tournament_by_slug(slug)
    except TournamentNotFoundError as e:
        _not_found(e)

    new_start = start if start is not None else current["date_start"]
    new_end = None if remove_end else (end if end is not None else current["date_end"])
    _check_date_range(new_start, new_end)

    TOURNAMENT_REPO.modify_tournament(
        slug,
        name=name,
        description=description,
        date_start=start,
        date_end=end,
        city=city,
        region=parse_region(region),
        level=parse_level(level),
        categories=categories,
        entry_fee_min=entry_fee_min,
        registration_url=registration_url,
        remove_date_end=remove_end,
        remove_description=remove_description,
        remove_registration_url=remove_registration_url,
    )

    single_tournament_view(TOURNAMENT_REPO.get_tournament_by_slug(slug))


def _set_status(slug: str, status: str) -> None:
    try:
        TOURNAMENT_REPO.set_status(slug, status)
    except TournamentNotFoundError as e:
        _not_found(e)
    console.print(f"[green]{slug}: {status}[/green]")


@app.command("approve, ap", no_args_is_help=True)
def approve(slug: str) -> None:
    """Approve a submitted tournament so it appears on the calendar."""
    _set_status(slug, TournamentStatus.APPROVED)


@app.command("reject, rj", no_args_is_help=True)
def reject(slug: str) -> None:
    """Reject a submitted tournament."""
    _set_status(slug, TournamentStatus.REJECTED)


@app.command("status, st", no_args_is_help=True)
def status(
    slug: str,
    new_status: Annotated[str, typer.Argument(help=", ".join(TOURNAMENT_STATUSES))],
) -> None:
    """Set any tournament status."""
    if new_status not in TOURNAMENT_STATUSES:
        raise typer.BadParameter(
            f"Status must be one of {', '.join(TOURNAMENT_STATUSES)}, got '{new_status}'"
        )
    _set_status(slug, new_status)


@app.command("feature, f", no_args_is_help=True)
def feature(
    slug: str,
    featured: Annotated[
        bool, typer.Option("--featured/--unfeatured", help="Feature or unfeature")
    ] = True,
) -> None:
    """Mark a tournament as featured, which places it first on the calendar."""
    try:
        TOURNAMENT_REPO.modify_tournament(slug, featured=featured)
    except TournamentNotFoundError as e:
        _not_found(e)
    console.print(
        f"[green]{slug}: {'featured' if featured else 'not featured'}[/green]"
    )


@app.command("delete, d", no_args_is_help=True)
def delete(slug: str) -> None:
    """Permanently remove a tournament."""
    try:
        TOURNAMENT_REPO.delete_tournament(slug)
    except TournamentNotFoundError as e:
        _not_found(e)
    console.print(f"[green]Deleted {slug}[/green]")


@app.command("show, s", no_args_is_help=True)
def show(slug: str) -> None:
    """Show a single tournament."""
    try:
        tournament = TOURNAMENT_REPO.get_tournament_by_slug(slug)
    except TournamentNotFoundError as e:
        _not_found(e)
    single_tournament_view(tournament)


@app.command("list, ls")
def list_tournaments(
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-st", help=", ".join(TOURNAMENT_STATUSES)),
    ] = None,
    region: Annotated[Optional[str], typer.Option("--region", "-r")] = None,
) -> None:
    """List tournaments ordered by start date."""
    region = parse_region(region)
    tournaments = TOURNAMENT_REPO.get_all_tournaments()

    if status is not None:
        tournaments = [t for t in tournaments if t["status"] == status]
    if region is not None:
        tournaments = [t for t in tournaments if t["region"] == region]

    tournaments.sort(key=lambda t: (t["date_start"].toordinal(), t["name"]))
    tournaments_view(region, tournaments)
