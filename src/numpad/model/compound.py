# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Literal, Optional, TypedDict

from numpad.model.value_format import ValueFormat


class CompoundOperation(StrEnum):
    DIVIDE = "divide"
    MULTIPLY = "multiply"
    ADD = "add"
    SUBTRACT = "subtract"
    # Both inputs are instants, result is end - start in minutes
    TIME_DIFFERENCE = "timeDifference"

    @property
    def symbol(self) -> str:
        return {
            CompoundOperation.DIVIDE: "÷",
            CompoundOperation.MULTIPLY: "×",
            CompoundOperation.ADD: "+",
            CompoundOperation.SUBTRACT: "−",
            CompoundOperation.TIME_DIFFERENCE: "→",
        }[self]


class CompoundConfig(TypedDict):
    input1_label: str
    input1_format: ValueFormat
    input2_label: str
    input2_format: ValueFormat
    operation: CompoundOperation


CompoundError = Literal["first_input", "second_input", "divide_by_zero"]


class CompoundEvaluation(TypedDict):
    value: Optional[float]
    error: Optional[CompoundError]
