"""Rendering of events into human-readable notification text."""

from __future__ import annotations

from notifyhub.models import DeviceDTO, EventDTO, NotificationMessage, PositionDTO, UserDTO
from notifyhub.notification import Notification


def _number(value: float) -> str:
    """Format a number the way a default output stream does (six significant digits)."""
    return f"{value:g}"


class NotificationFormatter:
    """Builds notification messages for users."""

    def format(
        self,
        notification: Notification,
        user: UserDTO,
        event: EventDTO,
        position: PositionDTO | None,
    ) -> NotificationMessage:
        """Render the subject and body of a notification for a user."""
        lines = [f"📢 Evento: {event.type}"]
        if user.email:
            lines.append(f"👤 Usuario: {user.email}")
        if position is not None:
            lines.append(
                f"📍 Ubicación: {_number(position.latitude)}, {_number(position.longitude)}"
            )
        if notification.description:
            lines.append(f"📝 Descripción: {notification.description}")
        return NotificationMessage(f"Notificación: {event.type}", "\n".join(lines))


def format_message(
    event: EventDTO, device: DeviceDTO, position: PositionDTO | None
) -> str:
    """Render an event with its device and position as message text."""
    lines = [f"📢 Evento: {event.type}"]
    if device.name:
        lines.append(f"📱 Dispositivo: {device.name}")
        lines.append(f"🔢 Unique ID: {device.unique_id}")
    if position is not None:
        lines.append(
            f"📍 Ubicación: {_number(position.latitude)}, {_number(position.longitude)}"
        )
        lines.append(f"🚀 Velocidad: {_number(position.speed)} nudos")
    if event.event_time is not None:
        lines.append(f"📅 Fecha evento: {event.event_time}")
    return "\n".join(lines)