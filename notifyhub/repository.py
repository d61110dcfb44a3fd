"""Read access to notification rules stored in the database."""

from __future__ import annotations

from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Engine

from notifyhub.notification import Notification

_BY_TYPE = "SELECT * FROM tc_notifications WHERE type = :type"

_BY_TYPE_ALWAYS = "SELECT * FROM tc_notifications WHERE type = :type AND always = :always"

_BY_USER = """
    SELECT n.* FROM tc_notifications n
    INNER JOIN tc_user_notification un ON n.id = un.notificationid
    WHERE un.userid = :owner
"""

_BY_DEVICE = """
    SELECT n.* FROM tc_notifications n
    INNER JOIN tc_device_notification dn ON n.id = dn.notificationid
    WHERE dn.deviceid = :owner
"""

_BY_GROUP = """
    SELECT n.* FROM tc_notifications n
    INNER JOIN tc_group_notification gn ON n.id = gn.notificationid
    WHERE gn.groupid = :owner
"""

_LINKED_TO_USER = """
    SELECT EXISTS (
        SELECT 1 FROM tc_user_notification
        WHERE userid = :user_id AND notificationid = :notification_id
    )
"""


class NotificationRepository:
    """Queries over the notification tables."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def _fetch(self, sql: str, **params: Any) -> list[Notification]:
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), params).mappings().all()
        return [Notification.from_row(row) for row in rows]

    def find_by_type(self, type_: str) -> list[Notification]:
        """All notifications of the given event type."""
        return self._fetch(_BY_TYPE, type=type_)

    def find_by_type_and_always_true(self, type_: str) -> list[Notification]:
        """Notifications of the given type that apply to every device."""
        return self._fetch(_BY_TYPE_ALWAYS, type=type_, always=True)

    def find_by_user_id(self, user_id: int) -> list[Notification]:
        """Notifications linked to a user."""
        return self._fetch(_BY_USER, owner=user_id)

    def find_by_device_id(self, device_id: int) -> list[Notification]:
        """Notifications linked to a device."""
        return self._fetch(_BY_DEVICE, owner=device_id)

    def find_by_group_id(self, group_id: int) -> list[Notification]:
        """Notifications linked to a device group."""
        return self._fetch(_BY_GROUP, owner=group_id)

    def is_linked_to_user(self, user_id: int, notification_id: int) -> bool:
        """Whether the notification is linked to the user."""
        with self._engine.connect() as conn:
            value = conn.execute(
                text(_LINKED_TO_USER),
                {"user_id": user_id, "notification_id": notification_id},
            ).scalar()
        return bool(value)