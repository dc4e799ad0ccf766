# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tourneycal import configuration
from tourneycal.configuration import Configuration
from tourneycal.logger import LOG_LEVELS
from tourneycal.repository.configuration import CONFIGURATION_REPO
from tourneycal.terminal.custom_typer import AliasedTyperGroup
from tourneycal.terminal.parse import parse_region

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("max_visible_tracks", str(config["max_visible_tracks"]))
    table.add_row("cell_width", str(config["cell_width"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("default_region", config.get("default_region") or "None")
    table.add_row("data_path", config["data_path"] or str(configuration.DATA_PATH))
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))


@app.command("set, s")
def set(
    max_visible_tracks: Annotated[
        Optional[int],
        typer.Option(
            "--max-visible-tracks",
            min=1,
            help="Number of tournament rows shown per calendar week",
        ),
    ] = None,
    cell_width: Annotated[
        Optional[int],
        typer.Option("--cell-width", min=6, help="Width of calendar day cells"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=f"One of {', '.join(LOG_LEVELS)}"),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above views",
        ),
    ] = None,
    default_region: Annotated[
        Optional[str],
        typer.Option("--default-region", help="Region used when none is given"),
    ] = None,
    remove_default_region: Annotated[
        bool,
        typer.Option("--remove-default-region", help="Show all regions by default"),
    ] = False,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing tournament files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            raise typer.BadParameter(
                f"Log level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
            )

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        max_visible_tracks=max_visible_tracks,
        cell_width=cell_width,
        log_level=log_level,
        default_region=parse_region(default_region),
        remove_default_region=remove_default_region,
        data_path=data_path,
        remove_data_path=remove_data_path,
    )

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(config, title="Updated Configuration"))
