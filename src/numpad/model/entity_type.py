# SPDX-License-Identifier: MIT

from enum import StrEnum


class EntityType(StrEnum):
    QUANTITY_TYPE = "quantity_type"
    ENTRY = "entry"
