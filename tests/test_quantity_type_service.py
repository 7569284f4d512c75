"""Tests for service/quantity_type.py."""

import pendulum
import pytest

from numpad.model.aggregation_type import AggregationType
from numpad.model.compound import CompoundOperation
from numpad.model.period import AggregationPeriod
from numpad.model.value_format import ValueFormat
from numpad.service.compound import get_compound_config
from numpad.service.quantity_type import (
    QuantityTypeValidationError,
    build_quantity_type,
    find_quantity_type_by_name,
    get_default_quantity_types,
    get_most_recently_used,
    get_next_sort_order,
    move_quantity_type,
    sort_quantity_types,
)
from numpad.template.quantity_type import DEFAULT_COLOR, DEFAULT_ICON
from tests.factories import make_quantity_type


def test_build_quantity_type_defaults():
    quantity_type = build_quantity_type("  Steps ")
    assert quantity_type["id"] is None
    assert quantity_type["name"] == "Steps"
    assert quantity_type["value_format"] == ValueFormat.INTEGER
    assert quantity_type["aggregation_type"] == AggregationType.SUM
    assert quantity_type["aggregation_period"] == AggregationPeriod.ALL_TIME
    assert quantity_type["icon"] == DEFAULT_ICON
    assert quantity_type["color"] == DEFAULT_COLOR
    assert not quantity_type["is_compound"]
    assert quantity_type["compound_config"] is None


def test_blank_name_is_rejected():
    with pytest.raises(QuantityTypeValidationError):
        build_quantity_type("   ")


def test_compound_quantity_type_gets_result_format():
    shift = build_quantity_type(
        "Shift",
        compound_config={
            "input1_label": "Start",
            "input1_format": ValueFormat.DECIMAL,
            "input2_label": "End",
            "input2_format": ValueFormat.DECIMAL,
            "operation": CompoundOperation.TIME_DIFFERENCE,
        },
    )
    assert shift["is_compound"]
    assert shift["value_format"] == ValueFormat.DURATION
    config = get_compound_config(shift)
    assert config is not None
    assert config["operation"] == CompoundOperation.TIME_DIFFERENCE


def test_compound_inputs_need_labels():
    with pytest.raises(QuantityTypeValidationError):
        build_quantity_type(
            "Pace",
            compound_config={
                "input1_label": "Distance",
                "input1_format": ValueFormat.DECIMAL,
                "input2_label": " ",
                "input2_format": ValueFormat.DURATION,
                "operation": CompoundOperation.DIVIDE,
            },
        )


def test_default_quantity_types():
    defaults = get_default_quantity_types()
    assert [quantity_type["name"] for quantity_type in defaults] == [
        "Minutes Read",
        "Steps",
        "Calories",
        "Water (oz)",
    ]
    assert defaults[0]["value_format"] == ValueFormat.DURATION
    assert [quantity_type["sort_order"] for quantity_type in defaults] == [0, 1, 2, 3]


def test_sort_hides_hidden_unless_asked():
    first = make_quantity_type("First")
    second = make_quantity_type("Second")
    hidden = make_quantity_type("Hidden")
    first["sort_order"], second["sort_order"], hidden["sort_order"] = 2, 1, 0
    hidden["hidden"] = True

    visible = sort_quantity_types([first, second, hidden])
    assert [quantity_type["name"] for quantity_type in visible] == ["Second", "First"]

    everything = sort_quantity_types([first, second, hidden], include_hidden=True)
    assert [quantity_type["name"] for quantity_type in everything] == [
        "Hidden",
        "Second",
        "First",
    ]


def test_find_by_name_is_case_insensitive():
    water = make_quantity_type("Water (oz)")
    assert find_quantity_type_by_name([water], " water (OZ) ") == water
    assert find_quantity_type_by_name([water], "Coffee") is None


def test_most_recently_used():
    steps = make_quantity_type("Steps")
    water = make_quantity_type("Water")
    water["last_used"] = steps["last_used"].add(minutes=5)
    assert get_most_recently_used([steps, water]) == water
    assert get_most_recently_used([]) is None


def test_next_sort_order():
    assert get_next_sort_order([]) == 0
    steps = make_quantity_type("Steps")
    steps["sort_order"] = 4
    assert get_next_sort_order([steps]) == 5


def test_move_quantity_type_renumbers():
    created = pendulum.datetime(2025, 1, 1, tz="UTC")
    quantity_types = []
    for index, name in enumerate(["A", "B", "C", "D"]):
        quantity_type = make_quantity_type(name)
        quantity_type["sort_order"] = index
        quantity_type["created"] = created
        quantity_types.append(quantity_type)

    changes = move_quantity_type(quantity_types, quantity_types[3]["id"], 1)
    assert changes == {
        quantity_types[3]["id"]: 1,
        quantity_types[1]["id"]: 2,
        quantity_types[2]["id"]: 3,
    }


def test_move_clamps_to_the_ends():
    quantity_types = [make_quantity_type(name) for name in ["A", "B"]]
    quantity_types[1]["sort_order"] = 1
    changes = move_quantity_type(quantity_types, quantity_types[0]["id"], 10)
    assert changes == {quantity_types[1]["id"]: 0, quantity_types[0]["id"]: 1}


def test_move_unknown_quantity_type():
    with pytest.raises(QuantityTypeValidationError):
        move_quantity_type([make_quantity_type()], "missing", 0)
