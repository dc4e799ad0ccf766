# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tourneycal.logger import configure_logging
from tourneycal.repository.configuration import CONFIGURATION_REPO
from tourneycal.terminal import calendar, configuration, tournament
from tourneycal.terminal.custom_typer import OrderedAliasedTyperGroup
from tourneycal.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="tourneycal - Regional tournament calendar in the CLI",
    no_args_is_help=True,
)
app.add_typer(calendar.app, name="calendar, cal", help="Month and day calendar views")
app.add_typer(tournament.app, name="tournament, t", help="Submit and review tournaments")
app.add_typer(configuration.app, name="config, c", help="View and change settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    tourneycal - Regional tournament calendar in the CLI

    Global options that apply to all commands.
    """
    config = CONFIGURATION_REPO.get_config()
    configure_logging("DEBUG" if verbose else config["log_level"])

    view_state.set_show_header(config["show_header"] and not no_header)


def run() -> None:
    app()
