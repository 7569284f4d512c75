# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from numpad.model.entity_id import EntityId


class Entry(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "entry"
    quantity_type_id: EntityId  # Reference to owning quantity type
    # Always a plain number, durations are total minutes
    value: float
    timestamp: pendulum.DateTime
    notes: str
    created: pendulum.DateTime
    updated: pendulum.DateTime
