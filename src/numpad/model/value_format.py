# SPDX-License-Identifier: MIT

from enum import StrEnum


class ValueFormat(StrEnum):
    INTEGER = "integer"
    DECIMAL = "decimal"
    # Stored as total minutes, displayed as H:MM or M min
    DURATION = "duration"

    @property
    def display_name(self) -> str:
        match self:
            case ValueFormat.INTEGER:
                return "Integer"
            case ValueFormat.DECIMAL:
                return "Decimal"
            case ValueFormat.DURATION:
                return "Duration (HH:MM)"
