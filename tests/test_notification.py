import json

import pytest

from notifyhub.attributes import attributes_from_json
from notifyhub.notification import Notification


def _full_row():
    return {
        "id": 12,
        "description": "Alert on alarm",
        "calendarid": 3,
        "commandid": 8,
        "type": "alarm",
        "notificators": "web,mail",
        "always": True,
        "attributes": json.dumps({"alarms": "sos", "priority": 2}),
    }


def test_from_row_reads_all_columns():
    row = _full_row()
    n = Notification.from_row(row)
    assert n.id == row["id"]
    assert n.description == row["description"]
    assert n.calendar_id == row["calendarid"]
    assert n.command_id == row["commandid"]
    assert n.type == row["type"]
    assert n.notificators == row["notificators"]
    assert n.always is True
    assert n.attributes == {"alarms": "sos", "priority": 2}


def test_from_row_nulls_give_defaults():
    row = {
        "id": 5,
        "description": None,
        "calendarid": None,
        "commandid": None,
        "type": None,
        "notificators": None,
        "always": None,
        "attributes": None,
    }
    assert Notification.from_row(row) == Notification(id=5)


def test_from_row_accepts_mapping_attributes():
    row = _full_row()
    row["attributes"] = {"k": "v"}
    assert Notification.from_row(row).attributes == {"k": "v"}


def test_from_row_invalid_attribute_text_gives_empty():
    row = _full_row()
    row["attributes"] = "not json"
    assert Notification.from_row(row).attributes == {}


def test_from_row_null_id_raises():
    row = _full_row()
    row["id"] = None
    with pytest.raises(ValueError):
        Notification.from_row(row)


def test_attributes_json_round_trip():
    n = Notification(id=1, attributes={"a": 1, "b": "x", "c": None, "d": False})
    assert attributes_from_json(n.attributes_json()) == n.attributes


def test_to_json_keys_and_values():
    n = Notification.from_row(_full_row())
    data = n.to_json()
    assert set(data) == {
        "id",
        "type",
        "description",
        "notificators",
        "always",
        "calendarId",
        "commandId",
        "attributes",
    }
    assert data["calendarId"] == n.calendar_id
    assert data["commandId"] == n.command_id
    assert data["attributes"] == n.attributes


def test_to_json_empty_attributes_is_object():
    assert Notification(id=3).to_json()["attributes"] == {}


def test_row_round_trip_through_storage_form():
    original = Notification(
        id=9,
        attributes={"x": 1},
        description="d",
        calendar_id=2,
        command_id=4,
        type="deviceOnline",
        notificators="web",
        always=True,
    )
    row = {
        "id": original.id,
        "description": original.description,
        "calendarid": original.calendar_id,
        "commandid": original.command_id,
        "type": original.type,
        "notificators": original.notificators,
        "always": original.always,
        "attributes": original.attributes_json(),
    }
    assert Notification.from_row(row) == original