# SPDX-License-Identifier: MIT

from numpad.model.id_map import IdMap


def get_id_map_template() -> IdMap:
    return {
        "quantity_types": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "entries": {"synthetic_to_real": {}, "real_to_synthetic": {}},
    }
