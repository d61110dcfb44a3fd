"""Registry of notification channels by type."""

from __future__ import annotations

from notifyhub.notificators import Notificator


class NotificatorNotFoundError(LookupError):
    """No notificator is registered for the requested type."""


class NotificatorManager:
    """Holds one notificator per type name."""

    def __init__(self) -> None:
        self._notificators: dict[str, Notificator] = {}

    def register(self, notificator: Notificator) -> None:
        """Register a notificator, replacing any of the same type."""
        self._notificators[notificator.type] = notificator

    def get(self, type_: str) -> Notificator:
        """The notificator for a type; raises NotificatorNotFoundError if none."""
        try:
            return self._notificators[type_]
        except KeyError:
            raise NotificatorNotFoundError(f"Notificator not found: {type_}") from None

    def all_types(self) -> list[str]:
        """Registered type names in sorted order."""
        return sorted(self._notificators)