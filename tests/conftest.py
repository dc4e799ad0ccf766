# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Callable, Optional

import pendulum
import pytest

from tourneycal import configuration
from tourneycal.constants import TournamentStatus
from tourneycal.layout.partition import build_month_grid
from tourneycal.model.calendar_event import CalendarEvent
from tourneycal.model.month_grid import Week
from tourneycal.model.tournament import Tournament

EventFactory = Callable[..., CalendarEvent]


def make_event(
    id: str,
    date_start: str,
    date_end: Optional[str] = None,
    priority: int = 0,
    title: Optional[str] = None,
) -> CalendarEvent:
    start = pendulum.parse(date_start).date()
    end = pendulum.parse(date_end).date() if date_end is not None else start
    return {
        "id": id,
        "title": title if title is not None else id,
        "date_start": start,
        "date_end": end,
        "priority": priority,
    }


def week_starting(sunday: str) -> Week:
    start = pendulum.parse(sunday).date()
    return [
        {"date": start.add(days=offset), "in_current_month": True}
        for offset in range(7)
    ]


@pytest.fixture
def event() -> EventFactory:
    return make_event


@pytest.fixture
def february_2024_weeks() -> list[Week]:
    return build_month_grid(2024, 1)["weeks"]


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration and data files at a temporary directory."""
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path / "config")
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    monkeypatch.setattr(
        configuration, "DATA_TOURNAMENTS_DIR", tmp_path / "data" / "tournaments"
    )
    return tmp_path


@pytest.fixture
def week_of() -> Callable[[str], Week]:
    return week_starting


@pytest.fixture
def tournament() -> Callable[..., Tournament]:
    def make_tournament(
        id: str,
        date_start: str,
        date_end: Optional[str] = None,
        status: str = TournamentStatus.APPROVED,
        region: Optional[str] = "Tampa Bay",
        featured: bool = False,
        name: Optional[str] = None,
    ) -> Tournament:
        created = pendulum.datetime(2024, 1, 1, tz="UTC")
        return {
            "id": id,
            "name": name if name is not None else f"Tournament {id}",
            "slug": id,
            "description": None,
            "date_start": pendulum.parse(date_start).date(),
            "date_end": pendulum.parse(date_end).date() if date_end else None,
            "city": "Tampa",
            "region": region,
            "level": "All Levels",
            "categories": None,
            "featured": featured,
            "entry_fee_min": None,
            "registration_url": None,
            "status": status,
            "created": created,
            "updated": created,
        }

    return make_tournament
