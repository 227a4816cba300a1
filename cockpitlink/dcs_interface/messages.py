# cockpitlink/dcs_interface/messages.py
"""
The single envelope exchanged with the DCS export script.

Requests and responses share DCSMessage; a request only fills the stop/fetch
flags and commands, a response only the state fields. Anything not meaningful
for one direction is left at None/False and omitted from the JSON.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .exceptions import MessageFormatError, ProtocolError


def parse_bool_text(value: Any, field_name: str) -> bool:
    """
    Reads the textual booleans the export script's Lua side understands.

    Only "true"/"false" (any case) are accepted; everything else, native
    JSON booleans included, is a format error rather than a default.
    """
    if isinstance(value, str):
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    raise MessageFormatError(field_name, f"Expected \"true\" or \"false\", got {value!r}")


def _require_object(data: Any, field_name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise MessageFormatError(field_name, f"Expected an object, got {data!r}")
    return data


def _require_int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MessageFormatError(key, f"Expected integer, got {value!r}")
    return value


@dataclass(frozen=True)
class DCSCommand:
    """
    One cockpit actuation played back by the export script.

    Attributes:
        device: Cockpit device ID.
        code: Button/command ID on that device.
        delay: Milliseconds to wait before releasing and/or pressing the next button.
        activate: 1 or -1. DCS takes a double here but hard buttons only use these two.
        add_depress: Also send the release action right after the press.
    """
    device: int
    code: int
    delay: int = 0
    activate: int = 1
    add_depress: bool = True

    def __post_init__(self):
        if self.activate not in (-1, 1):
            raise MessageFormatError("activate", f"Expected 1 or -1, got {self.activate}")
        if self.delay < 0:
            raise MessageFormatError("delay", f"Expected non-negative delay, got {self.delay}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "device": self.device,
            "code": self.code,
            "delay": self.delay,
            "activate": self.activate,
            "addDepress": "true" if self.add_depress else "false",
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DCSCommand':
        _require_object(data, "commands")
        return cls(
            device=_require_int(data, "device"),
            code=_require_int(data, "code"),
            delay=_require_int(data, "delay"),
            activate=_require_int(data, "activate"),
            add_depress=parse_bool_text(data.get("addDepress"), "addDepress"),
        )

    def __str__(self):
        return (f"D:{self.device}, C:{self.code}, Dly: {self.delay}, "
                f"Ac:{self.activate}, Dp: {1 if self.add_depress else 0}")


@dataclass(frozen=True)
class CameraPosition:
    lat: float
    lon: float
    alt: Optional[float] = None
    elevation: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"lat": self.lat, "lon": self.lon}
        if self.alt is not None:
            data["alt"] = self.alt
        if self.elevation is not None:
            data["elevation"] = self.elevation
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CameraPosition':
        _require_object(data, "cameraPosition")
        try:
            return cls(
                lat=float(data["lat"]),
                lon=float(data["lon"]),
                alt=float(data["alt"]) if data.get("alt") is not None else None,
                elevation=float(data["elevation"]) if data.get("elevation") is not None else None,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MessageFormatError("cameraPosition", str(e)) from e


@dataclass(frozen=True)
class WeaponStation:
    """A pylon and the weapon type name loaded on it."""
    station: int
    weapon_type: str

    def to_dict(self) -> Dict[str, Any]:
        return {"station": self.station, "type": self.weapon_type}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WeaponStation':
        _require_object(data, "weaponStations")
        if not isinstance(data.get("type"), str):
            raise MessageFormatError("weaponStations", f"Missing weapon type in {data!r}")
        return cls(station=_require_int(data, "station"), weapon_type=data["type"])


@dataclass
class DCSMessage:
    # Request
    stop: bool = False
    fetch_camera_position: bool = False
    fetch_aircraft_type: bool = False
    fetch_weapon_stations: bool = False
    commands: List[DCSCommand] = field(default_factory=list)

    # Response
    camera_position: Optional[CameraPosition] = None
    aircraft_type: Optional[str] = None
    weapon_stations: Optional[List[WeaponStation]] = None
    server_errors: List[str] = field(default_factory=list)
    current_command_index: Optional[int] = None
    is_f10_view: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "stop": self.stop,
            "fetchCameraPosition": self.fetch_camera_position,
            "fetchAircraftType": self.fetch_aircraft_type,
            "fetchWeaponStations": self.fetch_weapon_stations,
            "commands": [c.to_dict() for c in self.commands],
        }
        if self.camera_position is not None:
            data["cameraPosition"] = self.camera_position.to_dict()
        if self.aircraft_type is not None:
            data["aircraftType"] = self.aircraft_type
        if self.weapon_stations is not None:
            data["weaponStations"] = [s.to_dict() for s in self.weapon_stations]
        if self.server_errors:
            data["serverErrors"] = list(self.server_errors)
        if self.current_command_index is not None:
            data["currentCommandIndex"] = self.current_command_index
        if self.is_f10_view is not None:
            data["isF10View"] = self.is_f10_view
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DCSMessage':
        _require_object(data, "message")

        camera = data.get("cameraPosition")
        stations = data.get("weaponStations")
        errors = data.get("serverErrors") or []
        index = data.get("currentCommandIndex")
        if index is not None and (isinstance(index, bool) or not isinstance(index, int)):
            raise MessageFormatError("currentCommandIndex", f"Expected integer, got {index!r}")
        if not isinstance(errors, list):
            raise MessageFormatError("serverErrors", f"Expected a list, got {errors!r}")
        if stations is not None and not isinstance(stations, list):
            raise MessageFormatError("weaponStations", f"Expected a list, got {stations!r}")
        aircraft_type = data.get("aircraftType")
        if aircraft_type is not None and not isinstance(aircraft_type, str):
            raise MessageFormatError("aircraftType", f"Expected a string, got {aircraft_type!r}")
        is_f10_view = data.get("isF10View")
        if is_f10_view is not None and not isinstance(is_f10_view, bool):
            raise MessageFormatError("isF10View", f"Expected a boolean, got {is_f10_view!r}")
        commands = data.get("commands") or []
        if not isinstance(commands, list):
            raise MessageFormatError("commands", f"Expected a list, got {commands!r}")

        return cls(
            stop=bool(data.get("stop", False)),
            fetch_camera_position=bool(data.get("fetchCameraPosition", False)),
            fetch_aircraft_type=bool(data.get("fetchAircraftType", False)),
            fetch_weapon_stations=bool(data.get("fetchWeaponStations", False)),
            commands=[DCSCommand.from_dict(c) for c in commands],
            camera_position=CameraPosition.from_dict(camera) if camera is not None else None,
            aircraft_type=aircraft_type,
            weapon_stations=[WeaponStation.from_dict(s) for s in stations] if stations is not None else None,
            server_errors=[str(e) for e in errors],
            current_command_index=index,
            is_f10_view=is_f10_view,
        )

    def to_json(self) -> str:
        # Compact separators keep the message on a single line for framing
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> 'DCSMessage':
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ProtocolError(f"Malformed JSON from DCS: {e}") from e
        return cls.from_dict(data)
