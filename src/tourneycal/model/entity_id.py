# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

# Tournament ids are uuid4 strings; hand-made calendar events may use any
# non-empty string
EntityId: TypeAlias = str


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())
