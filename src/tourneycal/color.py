# SPDX-License-Identifier: MIT

FEATURED_COLOR = "dark_orange3"
TOURNAMENT_COLOR = "dark_sea_green4"
TODAY_STYLE = "bold black on bright_cyan"
OUT_OF_MONTH_STYLE = "dim"
OVERFLOW_STYLE = "dim"

STATUS_COLORS = {
    "pending": "yellow",
    "approved": "green",
    "rejected": "red",
    "completed": "bright_black",
    "cancelled": "bright_black",
}


def bar_style(priority: int) -> str:
    color = FEATURED_COLOR if priority > 0 else TOURNAMENT_COLOR
    return f"bold white on {color}"
