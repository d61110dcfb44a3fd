from notifyhub.formatter import NotificationFormatter, format_message
from notifyhub.models import DeviceDTO, EventDTO, PositionDTO, UserDTO
from notifyhub.notification import Notification


def test_format_full():
    message = NotificationFormatter().format(
        Notification(description="gate opened"),
        UserDTO(email="driver@example.com"),
        EventDTO(type="alarm"),
        PositionDTO(latitude=10.5, longitude=20.25),
    )
    assert message.subject == "Notificación: alarm"
    assert message.body == (
        "📢 Evento: alarm\n"
        "👤 Usuario: driver@example.com\n"
        "📍 Ubicación: 10.5, 20.25\n"
        "📝 Descripción: gate opened"
    )


def test_format_minimal():
    message = NotificationFormatter().format(
        Notification(), UserDTO(), EventDTO(type="deviceOnline"), None
    )
    assert message.subject == "Notificación: deviceOnline"
    assert message.body == "📢 Evento: deviceOnline"


def test_format_whole_numbers_have_no_decimals():
    message = NotificationFormatter().format(
        Notification(), UserDTO(), EventDTO(type="alarm"),
        PositionDTO(latitude=45.0, longitude=-3.0),
    )
    assert message.body.splitlines()[-1] == "📍 Ubicación: 45, -3"


def test_format_message_full():
    text = format_message(
        EventDTO(type="deviceMoving", event_time="2024-01-02T03:04:05Z"),
        DeviceDTO(name="truck", unique_id="TEST-0001"),
        PositionDTO(latitude=10.5, longitude=20.25, speed=12.5),
    )
    assert text.splitlines() == [
        "📢 Evento: deviceMoving",
        "📱 Dispositivo: truck",
        "🔢 Unique ID: TEST-0001",
        "📍 Ubicación: 10.5, 20.25",
        "🚀 Velocidad: 12.5 nudos",
        "📅 Fecha evento: 2024-01-02T03:04:05Z",
    ]


def test_format_message_unnamed_device_skips_device_lines():
    text = format_message(EventDTO(type="alarm"), DeviceDTO(unique_id="TEST-0002"), None)
    assert text == "📢 Evento: alarm"
    assert "TEST-0002" not in text