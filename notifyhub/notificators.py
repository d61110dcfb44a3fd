"""Notification channels: each delivers a notification one way."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import ClassVar, TextIO

from notifyhub.formatter import NotificationFormatter
from notifyhub.models import EventDTO, NotificationMessage, PositionDTO, UserDTO
from notifyhub.notification import Notification


class UnsupportedDeliveryError(RuntimeError):
    """Raised when a channel cannot deliver a ready-made message."""

    def __init__(self, channel: str) -> None:
        self.channel = channel
        super().__init__("Método no implementado en este notificator")


class MailService:
    """Simulated mail delivery that writes the message to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send(self, to: str, subject: str, body: str) -> None:
        """Write the mail to the stream (standard output by default)."""
        out = self._stream if self._stream is not None else sys.stdout
        out.write(f"📧 Enviando correo a: {to}\n")
        out.write(f"Asunto: {subject}\n")
        out.write(f"Contenido:\n{body}\n")
        out.write("---------------------------\n")


class Notificator(ABC):
    """A delivery channel, identified by its type name."""

    type: ClassVar[str]

    @abstractmethod
    def send(
        self,
        notification: Notification,
        user: UserDTO,
        event: EventDTO,
        position: PositionDTO | None,
    ) -> None:
        """Deliver a notification for an event to a user."""

    def send_message(
        self,
        user: UserDTO,
        message: NotificationMessage,
        event: EventDTO | None = None,
        position: PositionDTO | None = None,
    ) -> None:
        """Deliver a ready-made message.

        Channels support this only where they override it; by default the
        request is refused with an error naming the channel.
        """
        channel = getattr(self, "type", type(self).__name__)
        raise UnsupportedDeliveryError(channel)


class NotificatorCommand(Notificator):
    """Runs the notification's command on the device."""

    type = "command"

    def send(
        self,
        notification: Notification,
        user: UserDTO,
        event: EventDTO,
        position: PositionDTO | None,
    ) -> None:
        if notification.command_id <= 0:
            print("❌ commandId no definido. No se ejecuta ningún comando.", file=sys.stderr)
            return
        print(
            f"⚙️ Ejecutando comando con ID: {notification.command_id} "
            f"para el dispositivo ID: {event.device_id}"
        )


class NotificatorMail(Notificator):
    """Delivers notifications by e-mail (simulated)."""

    type = "mail"

    def send(
        self,
        notification: Notification,
        user: UserDTO,
        event: EventDTO,
        position: PositionDTO | None,
    ) -> None:
        if not user.email:
            print("❌ Usuario sin email. Notificación ignorada.", file=sys.stderr)
            return
        print(f"✅ Correo enviado a {user.email} (simulado)")


class NotificatorWeb(Notificator):
    """Delivers notifications to the web interface."""

    type = "web"

    def __init__(self, formatter: NotificationFormatter | None = None) -> None:
        self.formatter = formatter if formatter is not None else NotificationFormatter()

    def send(
        self,
        notification: Notification,
        user: UserDTO,
        event: EventDTO,
        position: PositionDTO | None,
    ) -> None:
        message = self.formatter.format(notification, user, event, position)
        print("📡 [WEB Notification]")
        print(f"Usuario: {user.email}")
        print(f"Asunto: {message.subject}")
        print(f"Mensaje:\n{message.body}")
        print("-------------------------------")