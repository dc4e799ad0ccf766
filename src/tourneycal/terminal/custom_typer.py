# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

_ALIAS_SEPARATOR = re.compile(r"\s*,\s*")

# Top-level command groups, as registered in terminal/app.py
TOP_LEVEL_ORDER = ("calendar, cal", "tournament, t", "config, c")


def command_aliases(registered_name: str) -> list[str]:
    """Split a registered name like "month, m" into ["month", "m"]."""
    return _ALIAS_SEPARATOR.split(registered_name.strip())


class AliasedTyperGroup(typer.core.TyperGroup):
    """Group whose commands are registered as "name, alias, ..." strings"""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.registered_name(cmd_name))

    def registered_name(self, typed_name: str) -> str:
        for registered in self.commands:
            if typed_name in command_aliases(registered):
                return registered
        return typed_name


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Aliased group that lists the main command groups first"""

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in TOP_LEVEL_ORDER if name in self.commands]
        ordered.extend(name for name in self.commands if name not in ordered)
        return ordered
