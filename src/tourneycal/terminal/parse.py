# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from tourneycal.constants import REGIONS, SKILL_LEVELS
from tourneycal.time import date_from_value, today_local


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param)

    # Match YYYY-MM-DD format
    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_value(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_month(month_param: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse a month in YYYY-MM format into a (year, zero-based month) pair.

    Raises:
        typer.BadParameter: If the format is invalid or the month is out of range
    """
    if month_param is None:
        return None

    month_match = re.match(r"^(\d{4})-(\d{1,2})$", month_param)
    if not month_match:
        raise typer.BadParameter(
            f"Month must be in YYYY-MM format (e.g., 2024-02), got '{month_param}'"
        )

    year = int(month_match.group(1))
    month = int(month_match.group(2))
    if month < 1 or month > 12:
        raise typer.BadParameter(f"Month must be between 1 and 12, got {month}")

    return (year, month - 1)


def parse_region(region: Optional[str]) -> Optional[str]:
    """Resolve a region name case-insensitively against the known regions."""
    if region is None:
        return None
    for known_region in REGIONS:
        if known_region.lower() == region.strip().lower():
            return known_region
    raise typer.BadParameter(
        f"Unknown region '{region}', expected one of: {', '.join(REGIONS)}"
    )


def parse_level(level: Optional[str]) -> Optional[str]:
    if level is None:
        return None
    for known_level in SKILL_LEVELS:
        if known_level.lower() == level.strip().lower():
            return known_level
    raise typer.BadParameter(
        f"Unknown skill level '{level}', expected one of: {', '.join(SKILL_LEVELS)}"
    )
