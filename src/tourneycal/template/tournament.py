# SPDX-License-Identifier: MIT

from tourneycal.constants import TournamentStatus
from tourneycal.model.tournament import Tournament
from tourneycal.time import now_utc, today_local


def get_tournament_template() -> Tournament:
    now = now_utc()
    return {
        "id": None,
        "name": "",
        "slug": None,
        "description": None,
        "date_start": today_local(),
        "date_end": None,
        "city": None,
        "region": None,
        "level": None,
        "categories": None,
        "featured": False,
        "entry_fee_min": None,
        "registration_url": None,
        "status": TournamentStatus.PENDING,
        "created": now,
        "updated": now,
    }
