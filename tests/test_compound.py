"""Tests for service/compound.py: compound operations and their configuration."""

import json

import pendulum
import pytest

from numpad.model.compound import CompoundConfig, CompoundOperation
from numpad.model.value_format import ValueFormat
from numpad.service.compound import (
    calculate,
    decode_compound_config,
    default_result_format,
    encode_compound_config,
    evaluate_compound_inputs,
    get_compound_config,
)
from tests.factories import local, make_quantity_type


def pace_config() -> CompoundConfig:
    return {
        "input1_label": "Distance (mi)",
        "input1_format": ValueFormat.DECIMAL,
        "input2_label": "Time",
        "input2_format": ValueFormat.DURATION,
        "operation": CompoundOperation.DIVIDE,
    }


def shift_config() -> CompoundConfig:
    return {
        "input1_label": "Start",
        "input1_format": ValueFormat.DECIMAL,
        "input2_label": "End",
        "input2_format": ValueFormat.DECIMAL,
        "operation": CompoundOperation.TIME_DIFFERENCE,
    }


@pytest.mark.parametrize(
    "operation, expected",
    [
        (CompoundOperation.DIVIDE, 5.0),
        (CompoundOperation.MULTIPLY, 20.0),
        (CompoundOperation.ADD, 12.0),
        (CompoundOperation.SUBTRACT, 8.0),
    ],
)
def test_arithmetic(operation, expected):
    assert calculate(operation, 10.0, 2.0) == expected


@pytest.mark.parametrize("numerator", [0.0, 1.0, -7.5, 1e9])
def test_divide_by_zero_is_none(numerator):
    assert calculate(CompoundOperation.DIVIDE, numerator, 0.0) is None


def test_time_difference_between_instants():
    start = local(2025, 10, 16, 9, 0)
    end = local(2025, 10, 16, 17, 30)
    assert calculate(CompoundOperation.TIME_DIFFERENCE, start, end) == 510.0


def test_time_difference_is_signed():
    start = local(2025, 10, 16, 17, 30)
    end = local(2025, 10, 16, 9, 0)
    assert calculate(CompoundOperation.TIME_DIFFERENCE, start, end) == -510.0


def test_time_difference_of_posix_seconds():
    assert calculate(CompoundOperation.TIME_DIFFERENCE, 0.0, 5400.0) == 90.0


def test_instants_are_rejected_for_arithmetic():
    with pytest.raises(TypeError):
        calculate(CompoundOperation.ADD, pendulum.now("UTC"), 1.0)


def test_default_result_format():
    assert default_result_format(CompoundOperation.TIME_DIFFERENCE) == ValueFormat.DURATION
    assert default_result_format(CompoundOperation.MULTIPLY) == ValueFormat.DECIMAL


def test_config_encoding_uses_stable_keys():
    encoded = encode_compound_config(pace_config())
    assert json.loads(encoded) == {
        "input1Label": "Distance (mi)",
        "input1Format": "decimal",
        "input2Label": "Time",
        "input2Format": "duration",
        "operation": "divide",
    }
    assert decode_compound_config(encoded) == pace_config()


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "not json",
        "[]",
        '{"input1Label": "a"}',
        '{"input1Label": "a", "input1Format": "decimal", "input2Label": "b", '
        '"input2Format": "decimal", "operation": "power"}',
    ],
)
def test_malformed_config_decodes_to_none(raw):
    assert decode_compound_config(raw) is None


def test_compound_config_of_quantity_type():
    quantity_type = make_quantity_type("Pace")
    assert get_compound_config(quantity_type) is None

    quantity_type["is_compound"] = True
    quantity_type["compound_config"] = encode_compound_config(pace_config())
    assert get_compound_config(quantity_type) == pace_config()

    quantity_type["compound_config"] = "{broken"
    assert get_compound_config(quantity_type) is None


def test_evaluate_inputs_with_formats():
    evaluation = evaluate_compound_inputs(pace_config(), "6.2", "0:50")
    assert evaluation["error"] is None
    assert evaluation["value"] == pytest.approx(6.2 / 50)


@pytest.mark.parametrize(
    "first, second, error",
    [
        ("far", "0:50", "first_input"),
        ("6.2", "later", "second_input"),
        ("6.2", "0", "divide_by_zero"),
    ],
)
def test_evaluate_inputs_errors(first, second, error):
    evaluation = evaluate_compound_inputs(pace_config(), first, second)
    assert evaluation == {"value": None, "error": error}


def test_evaluate_time_difference_reads_instants():
    evaluation = evaluate_compound_inputs(
        shift_config(), "2025-10-16 09:00", "2025-10-16 17:15"
    )
    assert evaluation == {"value": 495.0, "error": None}


def test_evaluate_time_difference_with_custom_parser():
    instants = {"start": local(2025, 10, 16, 22), "end": local(2025, 10, 17, 6)}
    evaluation = evaluate_compound_inputs(
        shift_config(), "start", "end", instant_parser=instants.get
    )
    assert evaluation["value"] == 480.0


def test_operation_symbols():
    assert CompoundOperation.DIVIDE.symbol == "÷"
    assert CompoundOperation.TIME_DIFFERENCE.value == "timeDifference"
