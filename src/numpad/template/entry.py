# SPDX-License-Identifier: MIT

from numpad.model.entity_id import UNSET_ENTITY_ID
from numpad.model.entity_type import EntityType
from numpad.model.entry import Entry
from numpad.time import now_utc


def get_entry_template() -> Entry:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.ENTRY,
        "quantity_type_id": UNSET_ENTITY_ID,  # Must be set
        "value": 0.0,
        "timestamp": now,
        "notes": "",
        "created": now,
        "updated": now,
    }
