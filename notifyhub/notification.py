"""The notification rule stored in the database."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from notifyhub.attributes import attributes_from_json, attributes_to_json


@dataclass
class Notification:
    """A notification rule: which event type triggers which notificators."""

    id: int = 0
    attributes: dict[str, Any] = field(default_factory=dict)
    description: str = ""
    calendar_id: int = 0
    command_id: int = 0
    type: str = ""
    notificators: str = ""
    always: bool = False

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Notification:
        """Build a notification from a database row; null columns give defaults.

        Raises ValueError when the id column is null.
        """
        row_id = row["id"]
        if row_id is None:
            raise ValueError("notification row has a null id")

        raw_attributes = row.get("attributes")
        if raw_attributes is None:
            attributes: dict[str, Any] = {}
        elif isinstance(raw_attributes, Mapping):
            attributes = dict(raw_attributes)
        else:
            if isinstance(raw_attributes, (bytes, bytearray)):
                raw_attributes = raw_attributes.decode("utf-8")
            attributes = attributes_from_json(str(raw_attributes))

        def text(column: str) -> str:
            value = row.get(column)
            return "" if value is None else str(value)

        def number(column: str) -> int:
            value = row.get(column)
            return 0 if value is None else int(value)

        always = row.get("always")
        return cls(
            id=int(row_id),
            attributes=attributes,
            description=text("description"),
            calendar_id=number("calendarid"),
            command_id=number("commandid"),
            type=text("type"),
            notificators=text("notificators"),
            always=False if always is None else bool(always),
        )

    def attributes_json(self) -> str:
        """The attributes as JSON text for storage."""
        return attributes_to_json(self.attributes)

    def to_json(self) -> dict[str, Any]:
        """The notification as the API's JSON object; attributes is never null."""
        return {
            "id": self.id,
            "type": self.type,
            "description": self.description,
            "notificators": self.notificators,
            "always": self.always,
            "calendarId": self.calendar_id,
            "commandId": self.command_id,
            "attributes": dict(self.attributes),
        }