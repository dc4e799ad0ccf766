# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tourneycal.color import STATUS_COLORS
from tourneycal.model.tournament import Tournament
from tourneycal.time import format_date_range
from tourneycal.view.header import header


def _status_markup(status: str) -> str:
    color = STATUS_COLORS.get(status, "white")
    return f"[{color}]{status}[/{color}]"


def tournaments_view(region: Optional[str], tournaments: list[Tournament]) -> None:
    header(region, "tournaments")

    tournaments_table = Table(box=box.SIMPLE)
    tournaments_table.add_column("slug")
    tournaments_table.add_column("name")
    tournaments_table.add_column("dates")
    tournaments_table.add_column("city")
    tournaments_table.add_column("region")
    tournaments_table.add_column("status")
    tournaments_table.add_column("featured")

    for tournament in tournaments:
        tournaments_table.add_row(
            tournament["slug"] or "",
            tournament["name"],
            format_date_range(tournament["date_start"], tournament["date_end"]),
            tournament["city"] or "",
            tournament["region"] or "",
            _status_markup(tournament["status"]),
            "★" if tournament["featured"] else "",
        )

    console = Console()
    console.print(tournaments_table)


def single_tournament_view(tournament: Tournament) -> None:
    header(tournament["region"], "tournament")

    tournament_table = Table(box=box.SIMPLE)
    tournament_table.add_column("property")
    tournament_table.add_column("value")

    tournament_table.add_row("slug", tournament["slug"] or "")
    tournament_table.add_row("name", tournament["name"])
    tournament_table.add_row(
        "dates", format_date_range(tournament["date_start"], tournament["date_end"])
    )
    tournament_table.add_row("city", tournament["city"] or "")
    tournament_table.add_row("region", tournament["region"] or "")
    tournament_table.add_row("level", tournament["level"] or "")
    tournament_table.add_row("categories", ", ".join(tournament["categories"] or []))
    tournament_table.add_row("featured", str(tournament["featured"]))
    tournament_table.add_row(
        "entry_fee_min",
        f"${tournament['entry_fee_min']}"
        if tournament["entry_fee_min"] is not None
        else "",
    )
    tournament_table.add_row("registration_url", tournament["registration_url"] or "")
    tournament_table.add_row("status", _status_markup(tournament["status"]))
    tournament_table.add_row("description", tournament["description"] or "")

    console = Console()
    console.print(tournament_table)
