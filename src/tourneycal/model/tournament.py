# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from tourneycal.model.entity_id import EntityId


class Tournament(TypedDict):
    id: Optional[EntityId]
    name: str
    slug: Optional[str]
    description: Optional[str]
    date_start: pendulum.Date
    date_end: Optional[pendulum.Date]
    city: Optional[str]
    region: Optional[str]
    level: Optional[str]
    categories: Optional[list[str]]
    featured: bool
    entry_fee_min: Optional[int]
    registration_url: Optional[str]
    status: str
    created: pendulum.DateTime
    updated: pendulum.DateTime
