"""Resolution of the current user from the backend's session cookie."""

from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://192.168.100.81:8082"

_SESSION_MARKER = "JSESSIONID="
_TIMEOUT = 10.0


class SessionError(RuntimeError):
    """The request carries no usable session, or the backend cannot resolve it."""


def extract_session_cookie(cookie_header: str | None) -> str:
    """Return the Cookie header if it carries a JSESSIONID; raise SessionError otherwise."""
    if not cookie_header or _SESSION_MARKER not in cookie_header:
        raise SessionError("Sesión no encontrada (JSESSIONID no presente)")
    logger.debug("Cookie recibida")
    return cookie_header


def extract_user_id_from_session(
    cookie_header: str | None, backend_url: str = DEFAULT_BACKEND_URL
) -> int:
    """Ask the backend's /api/session endpoint which user owns the session."""
    cookie = extract_session_cookie(cookie_header)
    url = backend_url.rstrip("/") + "/api/session"

    try:
        response = requests.get(url, headers={"Cookie": cookie}, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        logger.error("Error al consultar /api/session: sin respuesta")
        raise SessionError("Error consultando sesión") from exc

    if response.status_code != 200:
        logger.error("Error al consultar /api/session: %s", response.status_code)
        raise SessionError("Error consultando sesión")

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if not isinstance(payload, dict) or "id" not in payload:
        raise SessionError("No se pudo extraer ID de usuario desde JSON")

    try:
        user_id = int(payload["id"])
    except (TypeError, ValueError) as exc:
        raise SessionError("No se pudo extraer ID de usuario desde JSON") from exc

    logger.info("ID de usuario extraído: %d", user_id)
    return user_id