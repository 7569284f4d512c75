# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from numpad.model.entity_id import EntityId

IdMapEntityType = Literal["quantity_types", "entries"]


class IdMap(TypedDict):
    """
    Short synthetic ids shown in the terminal, mapped to real entity ids.

    Example:

    Entry with an id of "1f0c...".
    Synthetic id for that entry is 7.

    real_entry_id = id_map["entries"]["synthetic_to_real"][7]
    """

    quantity_types: "IdMapMapping"
    entries: "IdMapMapping"


class IdMapMapping(TypedDict):
    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
