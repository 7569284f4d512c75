# SPDX-License-Identifier: MIT

from numpad.model.aggregation_type import AggregationType
from numpad.model.entity_type import EntityType
from numpad.model.period import AggregationPeriod
from numpad.model.quantity_type import QuantityType
from numpad.model.value_format import ValueFormat
from numpad.time import now_utc

DEFAULT_ICON = "number"
DEFAULT_COLOR = "#007AFF"


def get_quantity_type_template() -> QuantityType:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.QUANTITY_TYPE,
        "name": "",
        "value_format": ValueFormat.INTEGER,
        "aggregation_type": AggregationType.SUM,
        "aggregation_period": AggregationPeriod.ALL_TIME,
        "icon": DEFAULT_ICON,
        "color": DEFAULT_COLOR,
        "sort_order": 0,
        "hidden": False,
        "is_compound": False,
        "compound_config": None,
        "created": now,
        "updated": now,
        "last_used": now,
    }
