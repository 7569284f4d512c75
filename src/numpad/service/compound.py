# SPDX-License-Identifier: MIT

import json
from typing import Any, Callable, Optional, Union

import pendulum
from loguru import logger

from numpad.model.compound import (
    CompoundConfig,
    CompoundEvaluation,
    CompoundOperation,
)
from numpad.model.quantity_type import QuantityType
from numpad.model.value_format import ValueFormat
from numpad.service.value_format import parse_value
from numpad.time import instant_from_text, minutes_between

Operand = Union[float, pendulum.DateTime]


def calculate(
    operation: CompoundOperation, value1: Operand, value2: Operand
) -> Optional[float]:
    """
    Combine two inputs into one derived value.

    Returns None for a division by zero so callers can show an error state
    instead of a misleading 0. Time differences take instants (or POSIX
    seconds) and are signed: end before start gives a negative result.
    """
    if operation == CompoundOperation.TIME_DIFFERENCE:
        if isinstance(value1, pendulum.DateTime) and isinstance(
            value2, pendulum.DateTime
        ):
            return calculate_time_difference(value1, value2)
        return (_as_number(value2) - _as_number(value1)) / 60

    first = _as_number(value1)
    second = _as_number(value2)

    match operation:
        case CompoundOperation.DIVIDE:
            if second == 0:
                return None
            return first / second
        case CompoundOperation.MULTIPLY:
            return first * second
        case CompoundOperation.ADD:
            return first + second
        case CompoundOperation.SUBTRACT:
            return first - second
    raise ValueError(f"Unknown compound operation: {operation}")


def calculate_time_difference(
    start: pendulum.DateTime, end: pendulum.DateTime
) -> float:
    return minutes_between(start, end)


def _as_number(value: Operand) -> float:
    if isinstance(value, pendulum.DateTime):
        raise TypeError("Instants are only valid operands for time differences")
    return float(value)


def default_result_format(operation: CompoundOperation) -> ValueFormat:
    if operation == CompoundOperation.TIME_DIFFERENCE:
        return ValueFormat.DURATION
    return ValueFormat.DECIMAL


def encode_compound_config(config: CompoundConfig) -> str:
    return json.dumps(
        {
            "input1Label": config["input1_label"],
            "input1Format": str(config["input1_format"]),
            "input2Label": config["input2_label"],
            "input2Format": str(config["input2_format"]),
            "operation": str(config["operation"]),
        }
    )


def decode_compound_config(raw: Optional[str]) -> Optional[CompoundConfig]:
    """Decode a stored configuration, None when it is missing or malformed."""
    if raw is None:
        return None
    try:
        data: Any = json.loads(raw)
        return {
            "input1_label": str(data["input1Label"]),
            "input1_format": ValueFormat(data["input1Format"]),
            "input2_label": str(data["input2Label"]),
            "input2_format": ValueFormat(data["input2Format"]),
            "operation": CompoundOperation(data["operation"]),
        }
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("Ignoring malformed compound configuration {!r}: {}", raw, e)
        return None


def get_compound_config(quantity_type: QuantityType) -> Optional[CompoundConfig]:
    """
    Compound configuration of a quantity type.

    Returns None for plain quantity types and for compound ones whose stored
    configuration can't be decoded; callers treat both as non-compound.
    """
    if not quantity_type["is_compound"]:
        return None
    config = decode_compound_config(quantity_type["compound_config"])
    if config is None:
        logger.warning(
            "Quantity type '{}' is marked compound but has no usable configuration",
            quantity_type["name"],
        )
    return config


def evaluate_compound_inputs(
    config: CompoundConfig,
    first_text: str,
    second_text: str,
    instant_parser: Callable[[str], Optional[pendulum.DateTime]] = instant_from_text,
) -> CompoundEvaluation:
    """
    Parse both raw inputs and combine them.

    Time differences read both inputs as instants and ignore the configured
    input formats.
    """
    first: Optional[Operand]
    second: Optional[Operand]
    if config["operation"] == CompoundOperation.TIME_DIFFERENCE:
        first = instant_parser(first_text)
        second = instant_parser(second_text)
    else:
        first = parse_value(config["input1_format"], first_text)
        second = parse_value(config["input2_format"], second_text)

    if first is None:
        return {"value": None, "error": "first_input"}
    if second is None:
        return {"value": None, "error": "second_input"}

    value = calculate(config["operation"], first, second)
    if value is None:
        return {"value": None, "error": "divide_by_zero"}
    return {"value": value, "error": None}
