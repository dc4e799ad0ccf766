# SPDX-License-Identifier: MIT

from typing import TypedDict

from tourneycal.model.entity_id import EntityId
from tourneycal.model.month_grid import MonthGrid, Week


class PositionedBar(TypedDict):
    event_id: EntityId
    start_col: int
    span: int
    track: int
    continues_before: bool
    continues_after: bool


class WeekLayout(TypedDict):
    week: Week
    bars: list[PositionedBar]
    overflow_count: int
    overflow_by_day: list[int]


class MonthLayout(TypedDict):
    grid: MonthGrid
    weeks: list[WeekLayout]
