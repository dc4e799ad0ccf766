# SPDX-License-Identifier: MIT

REGIONS = [
    "South Florida",
    "Central Florida",
    "Tampa Bay",
    "North Florida",
    "Panhandle",
]

SKILL_LEVELS = [
    "All Levels",
    "Amateur",
    "Intermediate",
    "Pro/Open",
    "Seniors (50+)",
]

TOURNAMENT_CATEGORIES = [
    "Open",
    "Mixed",
    "Seniors",
    "Junior",
    "College",
    "Charity",
    "Non-profit",
    "Moneyball",
]

# Weeks always run Sunday through Saturday; this is not a setting.
WEEK_STARTS_ON = "Sunday"
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
DAYS_PER_WEEK = 7

DEFAULT_MAX_VISIBLE_TRACKS = 3


class TournamentStatus:
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


TOURNAMENT_STATUSES = [
    TournamentStatus.PENDING,
    TournamentStatus.APPROVED,
    TournamentStatus.REJECTED,
    TournamentStatus.COMPLETED,
    TournamentStatus.CANCELLED,
]

CALENDAR_STATUSES = (TournamentStatus.APPROVED,)
