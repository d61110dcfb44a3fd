"""Creation and listing of notification rules."""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Integer, MetaData, Table, Text, insert, text
from sqlalchemy.engine import Engine

from notifyhub.notification import Notification

_metadata = MetaData()

_notifications = Table(
    "tc_notifications",
    _metadata,
    Column("id", Integer, primary_key=True),
    Column("description", Text),
    Column("type", Text),
    Column("commandid", Integer),
    Column("calendarid", Integer),
    Column("notificators", Text),
    Column("always", Boolean),
    Column("attributes", Text),
)

_user_notification = Table(
    "tc_user_notification",
    _metadata,
    Column("userid", Integer),
    Column("notificationid", Integer),
)


class NotificationService:
    """Writes and lists notification rules."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_all(self) -> list[Notification]:
        """Every stored notification."""
        with self._engine.connect() as conn:
            rows = conn.execute(text("SELECT * FROM tc_notifications")).mappings().all()
        return [Notification.from_row(row) for row in rows]

    def create(self, notification: Notification, user_id: int) -> int:
        """Store a notification, link it to the user and return its new id.

        A calendar or command id of 0 is stored as NULL.
        """
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(_notifications).values(
                    description=notification.description,
                    type=notification.type,
                    commandid=notification.command_id or None,
                    calendarid=notification.calendar_id or None,
                    notificators=notification.notificators,
                    always=notification.always,
                    attributes=notification.attributes_json(),
                )
            )
            new_id = int(result.inserted_primary_key[0])
            conn.execute(
                insert(_user_notification).values(userid=user_id, notificationid=new_id)
            )
        return new_id