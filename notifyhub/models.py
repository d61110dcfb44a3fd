"""Data models exchanged with the tracking backend and between services."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import MISSING, dataclass, field, fields
from enum import Enum
from typing import Any, TypeVar

_T = TypeVar("_T")


class EventType(str, Enum):
    """Event types reported by the tracking backend."""

    COMMAND_RESULT = "commandResult"
    DEVICE_ONLINE = "deviceOnline"
    DEVICE_UNKNOWN = "deviceUnknown"
    DEVICE_OFFLINE = "deviceOffline"
    DEVICE_INACTIVE = "deviceInactive"
    QUEUED_COMMAND_SENT = "queuedCommandSent"
    DEVICE_MOVING = "deviceMoving"
    DEVICE_STOPPED = "deviceStopped"
    DEVICE_OVERSPEED = "deviceOverspeed"
    DEVICE_FUEL_DROP = "deviceFuelDrop"
    DEVICE_FUEL_INCREASE = "deviceFuelIncrease"
    GEOFENCE_ENTER = "geofenceEnter"
    GEOFENCE_EXIT = "geofenceExit"
    ALARM = "alarm"
    IGNITION_ON = "ignitionOn"
    IGNITION_OFF = "ignitionOff"
    MAINTENANCE = "maintenance"
    TEXT_MESSAGE = "textMessage"
    DRIVER_CHANGED = "driverChanged"
    MEDIA = "media"


def _json_field(
    key: str,
    default: Any = None,
    *,
    convert: Callable[[Any], Any] | None = None,
    factory: Callable[[], Any] | None = None,
) -> Any:
    metadata = {"json": key, "convert": convert}
    if factory is not None:
        return field(default_factory=factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _attributes_field() -> Any:
    return _json_field("attributes", convert=dict, factory=dict)


def _load(cls: type[_T], data: Mapping[str, Any]) -> _T:
    """Build a dataclass instance from a decoded JSON object.

    Missing keys and JSON nulls leave the field at its default.
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
    kwargs: dict[str, Any] = {}
    for f in fields(cls):  # type: ignore[arg-type]
        key = f.metadata.get("json", f.name)
        value = data.get(key)
        if value is None:
            continue
        convert = f.metadata.get("convert")
        kwargs[f.name] = convert(value) if convert is not None else value
    return cls(**kwargs)


@dataclass
class DeviceDTO:
    """A tracked device."""

    id: int = _json_field("id", 0, convert=int)
    attributes: dict[str, Any] = _attributes_field()
    group_id: int = _json_field("groupId", 0, convert=int)
    calendar_id: int = _json_field("calendarId", 0, convert=int)
    name: str = _json_field("name", "", convert=str)
    unique_id: str = _json_field("uniqueId", "", convert=str)
    status: str = _json_field("status", "", convert=str)
    position_id: int = _json_field("positionId", 0, convert=int)
    phone: str = _json_field("phone", "", convert=str)
    model: str = _json_field("model", "", convert=str)
    contact: str = _json_field("contact", "", convert=str)
    category: str = _json_field("category", "", convert=str)
    disabled: bool = _json_field("disabled", False, convert=bool)
    expiration_time: str | None = _json_field("expirationTime", convert=str)
    last_update: str | None = _json_field("lastUpdate", convert=str)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> DeviceDTO:
        """Build a device from its JSON object."""
        return _load(cls, data)


@dataclass
class EventDTO:
    """An event raised by a device."""

    id: int = _json_field("id", 0, convert=int)
    type: str = _json_field("type", "", convert=str)
    device_id: int = _json_field("deviceId", 0, convert=int)
    position_id: int = _json_field("positionId", 0, convert=int)
    geofence_id: int = _json_field("geofenceId", 0, convert=int)
    maintenance_id: int = _json_field("maintenanceId", 0, convert=int)
    event_time: str | None = _json_field("eventTime", convert=str)
    attributes: dict[str, Any] = _attributes_field()
    message: str | None = _json_field("message", convert=str)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> EventDTO:
        """Build an event from its JSON object."""
        return _load(cls, data)


@dataclass
class PositionDTO:
    """A position fix reported by a device."""

    id: int = _json_field("id", 0, convert=int)
    attributes: dict[str, Any] = _attributes_field()
    device_id: int = _json_field("deviceId", 0, convert=int)
    protocol: str = _json_field("protocol", "", convert=str)
    server_time: str | None = _json_field("serverTime", convert=str)
    device_time: str | None = _json_field("deviceTime", convert=str)
    fix_time: str | None = _json_field("fixTime", convert=str)
    valid: bool = _json_field("valid", False, convert=bool)
    latitude: float = _json_field("latitude", 0.0, convert=float)
    longitude: float = _json_field("longitude", 0.0, convert=float)
    altitude: float = _json_field("altitude", 0.0, convert=float)
    speed: float = _json_field("speed", 0.0, convert=float)
    course: float = _json_field("course", 0.0, convert=float)
    accuracy: float = _json_field("accuracy", 0.0, convert=float)
    address: str = _json_field("address", "", convert=str)
    outdated: bool | None = _json_field("outdated", convert=bool)
    network: Any = _json_field("network")
    geofence_ids: Any = _json_field("geofenceIds")

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> PositionDTO:
        """Build a position from its JSON object."""
        return _load(cls, data)


@dataclass
class UserDTO:
    """A user account of the tracking backend."""

    id: int = _json_field("id", 0, convert=int)
    attributes: dict[str, Any] = _attributes_field()
    name: str = _json_field("name", "", convert=str)
    login: str = _json_field("login", "", convert=str)
    email: str = _json_field("email", "", convert=str)
    phone: str = _json_field("phone", "", convert=str)
    readonly: bool = _json_field("readonly", False, convert=bool)
    administrator: bool = _json_field("administrator", False, convert=bool)
    map: str = _json_field("map", "", convert=str)
    latitude: float = _json_field("latitude", 0.0, convert=float)
    longitude: float = _json_field("longitude", 0.0, convert=float)
    zoom: int = _json_field("zoom", 0, convert=int)
    coordinate_format: str = _json_field("coordinateFormat", "", convert=str)
    disabled: bool = _json_field("disabled", False, convert=bool)
    expiration_time: str | None = _json_field("expirationTime", convert=str)
    device_limit: int = _json_field("deviceLimit", 0, convert=int)
    user_limit: int = _json_field("userLimit", 0, convert=int)
    device_readonly: bool = _json_field("deviceReadonly", False, convert=bool)
    limit_commands: bool = _json_field("limitCommands", False, convert=bool)
    disable_reports: bool = _json_field("disableReports", False, convert=bool)
    fixed_email: bool = _json_field("fixedEmail", False, convert=bool)
    poi_layer: str = _json_field("poiLayer", "", convert=str)
    totp_key: str = _json_field("totpKey", "", convert=str)
    temporary: bool = _json_field("temporary", False, convert=bool)
    password: str = _json_field("password", "", convert=str)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> UserDTO:
        """Build a user from its JSON object."""
        return _load(cls, data)


@dataclass
class NotificationMessage:
    """A rendered notification: subject line and body."""

    subject: str = ""
    body: str = ""


@dataclass
class Typed:
    """A bare type name."""

    type: str = ""


@dataclass
class EventWrapper:
    """An event together with the device and position it refers to."""

    event: EventDTO | None = None
    device: DeviceDTO | None = None
    position: PositionDTO | None = None


# Fields with a default factory report MISSING as their plain default; keep the
# sentinel referenced so linters see why it is imported.
_ = MISSING