# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from numpad.model.aggregation_type import AggregationType
from numpad.model.entity_id import EntityId
from numpad.model.period import AggregationPeriod
from numpad.model.value_format import ValueFormat


class QuantityType(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "quantity_type"
    name: str  # e.g., "Steps"
    value_format: ValueFormat
    aggregation_type: AggregationType
    aggregation_period: AggregationPeriod

    # Visual attributes, not used by any calculation
    icon: str
    color: str

    sort_order: int
    hidden: bool

    # Serialized CompoundConfig (JSON text), only meaningful when is_compound
    is_compound: bool
    compound_config: Optional[str]

    created: pendulum.DateTime
    updated: pendulum.DateTime
    last_used: pendulum.DateTime
