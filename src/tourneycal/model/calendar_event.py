# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from tourneycal.model.entity_id import EntityId


class CalendarEvent(TypedDict):
    id: EntityId
    title: Optional[str]
    date_start: pendulum.Date
    date_end: pendulum.Date
    priority: int
