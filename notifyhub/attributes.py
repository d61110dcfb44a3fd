"""Conversion of attribute maps to and from their stored JSON text."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

_UNSERIALIZABLE = '"<no-serializable>"'


def _encode_value(value: Any) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, (int, float)):
        return str(int(value))
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return _UNSERIALIZABLE


def attributes_to_json(attributes: Mapping[str, Any]) -> str:
    """Serialise a flat attribute map, keys sorted.

    Numbers are written as integers; lists and objects are replaced by a
    placeholder string.
    """
    parts = (
        f"{json.dumps(str(key), ensure_ascii=False)}:{_encode_value(attributes[key])}"
        for key in sorted(attributes)
    )
    return "{" + ",".join(parts) + "}"


def attributes_from_json(text: str) -> dict[str, Any]:
    """Parse stored attribute JSON; text that is not valid JSON gives an empty map.

    Raises ValueError when the text is valid JSON but not an object.
    """
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return {}
    if not isinstance(parsed, dict):
        raise ValueError("attributes JSON is not an object")
    return {key: parsed[key] for key in sorted(parsed)}