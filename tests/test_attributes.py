import json

import pytest

from notifyhub.attributes import attributes_from_json, attributes_to_json


def test_empty_map():
    assert attributes_to_json({}) == "{}"


@pytest.mark.parametrize(
    "attrs",
    [
        {"a": None},
        {"flag": True, "other": False},
        {"count": 42, "neg": -7},
        {"name": "value", "quote": 'he said "hi"'},
        {"mixed": "x", "n": 1, "b": True, "z": None},
    ],
)
def test_round_trip(attrs):
    assert attributes_from_json(attributes_to_json(attrs)) == attrs


def test_output_is_valid_json_with_sorted_keys():
    attrs = {"zeta": 1, "alpha": 2, "mid": "m"}
    text = attributes_to_json(attrs)
    assert list(json.loads(text)) == sorted(attrs)


def test_booleans_are_not_numbers():
    result = attributes_from_json(attributes_to_json({"flag": True}))
    assert result["flag"] is True


def test_float_is_written_as_integer():
    result = attributes_from_json(attributes_to_json({"speed": 12.9}))
    assert result["speed"] == 12
    assert isinstance(result["speed"], int)


@pytest.mark.parametrize("value", [[1, 2], {"nested": 1}])
def test_containers_become_placeholder(value):
    result = attributes_from_json(attributes_to_json({"x": value}))
    assert result["x"] == "<no-serializable>"


def test_invalid_json_gives_empty_map():
    assert attributes_from_json("{not json") == {}


def test_non_object_json_raises():
    with pytest.raises(ValueError):
        attributes_from_json("[1, 2, 3]")


def test_from_json_keeps_nested_values():
    text = json.dumps({"list": [1, 2], "obj": {"k": "v"}})
    assert attributes_from_json(text) == {"list": [1, 2], "obj": {"k": "v"}}