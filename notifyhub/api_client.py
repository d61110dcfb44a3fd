"""Authenticated JSON reads from the tracking backend."""

from __future__ import annotations

import logging
from typing import Any

import requests

from notifyhub.session import DEFAULT_BACKEND_URL, extract_session_cookie

logger = logging.getLogger(__name__)

_TIMEOUT = 10.0


class ApiError(RuntimeError):
    """The backend gave no response, an error status, or a body that is not JSON."""


class ApiClient:
    """Fetches resources from the backend on behalf of the caller's session."""

    def __init__(self, backend_url: str = DEFAULT_BACKEND_URL) -> None:
        self.backend_url = backend_url.rstrip("/")

    def get_json(self, path: str, cookie_header: str | None) -> Any:
        """GET a path with the caller's session cookie and return the decoded JSON.

        Raises SessionError when the cookie carries no session, ApiError on failure.
        """
        cookie = extract_session_cookie(cookie_header)
        headers = {"Cookie": cookie, "Accept": "application/json"}
        logger.info("GET %s", path)

        try:
            response = requests.get(self.backend_url + path, headers=headers, timeout=_TIMEOUT)
        except requests.RequestException as exc:
            raise ApiError(f"Sin respuesta al consumir {path}") from exc

        if response.status_code != 200:
            raise ApiError(f"Error HTTP {response.status_code} al consumir {path}")

        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"Respuesta inválida (JSON) al consumir {path}") from exc

    def get_device_by_id(self, cookie_header: str | None, device_id: int) -> Any:
        """The device with the given id."""
        return self.get_json(f"/api/devices/{device_id}", cookie_header)

    def get_user_by_id(self, cookie_header: str | None, user_id: int) -> Any:
        """The user with the given id."""
        return self.get_json(f"/api/users/{user_id}", cookie_header)

    def get_event_by_id(self, cookie_header: str | None, event_id: int) -> Any:
        """The event with the given id."""
        return self.get_json(f"/api/events/{event_id}", cookie_header)

    def get_positions(self, cookie_header: str | None) -> Any:
        """The latest positions visible to the session."""
        return self.get_json("/api/positions", cookie_header)