# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict

import pendulum


class GridDay(TypedDict):
    date: pendulum.Date
    in_current_month: bool


# Sunday (index 0) through Saturday (index 6)
Week: TypeAlias = list[GridDay]


class MonthGrid(TypedDict):
    year: int
    month: int  # zero-based, 0 = January
    weeks: list[Week]
