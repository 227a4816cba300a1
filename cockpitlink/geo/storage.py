# cockpitlink/geo/storage.py
"""Saving and loading coordinate lists as JSON."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .data_models import DataEntry, GeoPoint, NavPointSpec
from ..constants.aircraft import AircraftKind

logger = logging.getLogger(__name__)


def entry_to_dict(entry: DataEntry) -> Dict[str, Any]:
    data = {
        "id": entry.id,
        "lat": entry.point.lat,
        "lon": entry.point.lon,
        "altitude": entry.point.altitude_m,
        "agl": entry.point.altitude_is_agl,
        "label": entry.point.label,
        "xfer": entry.xfer,
        "aircraftData": {
            kind.value: {"pointType": spec.point_type, "option": spec.option}
            for kind, spec in entry.aircraft_data.items()
        },
    }
    if entry.ground_elevation_m is not None:
        data["groundElevation"] = entry.ground_elevation_m
    return data


def entry_from_dict(data: Dict[str, Any]) -> DataEntry:
    """
    Raises:
        KeyError: If id, lat or lon is missing.
        ValueError: If a field has the wrong shape.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected an entry object, got {data!r}")
    aircraft_data_raw = data.get("aircraftData", {})
    if not isinstance(aircraft_data_raw, dict):
        raise ValueError(f"Expected aircraftData to be an object, got {aircraft_data_raw!r}")

    point = GeoPoint(
        lat=float(data["lat"]),
        lon=float(data["lon"]),
        altitude_m=float(data.get("altitude", 0.0)),
        altitude_is_agl=bool(data.get("agl", False)),
        label=str(data.get("label", "")),
    )
    aircraft_data = {}
    for kind_name, spec in aircraft_data_raw.items():
        kind = AircraftKind(kind_name)
        if not isinstance(spec, dict) or not isinstance(spec.get("pointType"), str):
            raise ValueError(f"Expected {{\"pointType\": ...}} for {kind_name}, got {spec!r}")
        aircraft_data[kind] = NavPointSpec(kind, spec["pointType"], spec.get("option"))
    ground = data.get("groundElevation")
    return DataEntry(
        id=int(data["id"]),
        point=point,
        xfer=bool(data.get("xfer", True)),
        aircraft_data=aircraft_data,
        ground_elevation_m=float(ground) if ground is not None else None,
    )


def save_entries(path: Union[str, Path], entries: List[DataEntry]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump([entry_to_dict(e) for e in entries], f, indent=2)
    logger.info(f"Saved {len(entries)} entries to {path}")


def load_entries(path: Union[str, Path]) -> List[DataEntry]:
    """
    Raises:
        ValueError: If the file is not a list of entries.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Expected a list of entries in {path}")
    entries = [entry_from_dict(item) for item in raw]
    logger.info(f"Loaded {len(entries)} entries from {path}")
    return entries
