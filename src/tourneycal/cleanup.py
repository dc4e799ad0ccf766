# SPDX-License-Identifier: MIT

import atexit

from tourneycal.repository.configuration import CONFIGURATION_REPO
from tourneycal.repository.tournament import TOURNAMENT_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    TOURNAMENT_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
