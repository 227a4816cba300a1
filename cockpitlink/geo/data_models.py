# cockpitlink/geo/data_models.py
"""
Value types describing what the user wants to put into the cockpit.

A GeoPoint is where, a NavPointSpec is what kind of point it becomes on a
given aircraft, and a DataEntry ties both to a row of the user's list.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..constants.aircraft import AircraftKind, METERS_PER_FOOT


@dataclass(frozen=True)
class GeoPoint:
    """WGS84 position in decimal degrees with an altitude in meters."""
    lat: float
    lon: float
    altitude_m: float = 0.0
    altitude_is_agl: bool = False
    label: str = ""

    def __post_init__(self):
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range: {self.lat}")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude out of range: {self.lon}")


@dataclass(frozen=True)
class NavPointSpec:
    """
    Aircraft specific metadata for one entry.

    Attributes:
        kind: Aircraft the metadata applies to.
        point_type: One of the labels from the aircraft's get_point_types().
        option: One of the labels from get_point_options_for_type(point_type),
            or None when the point type has no meaningful choice.
    """
    kind: AircraftKind
    point_type: str
    option: Optional[str] = None


@dataclass
class DataEntry:
    """One row of the coordinate list."""
    id: int
    point: GeoPoint
    xfer: bool = True
    aircraft_data: Dict[AircraftKind, NavPointSpec] = field(default_factory=dict)
    ground_elevation_m: Optional[float] = None

    def spec_for(self, kind: AircraftKind) -> Optional[NavPointSpec]:
        return self.aircraft_data.get(kind)

    def altitude_msl_m(self) -> float:
        """
        Altitude above mean sea level.

        Raises:
            ValueError: If the point is AGL and the ground elevation is not known yet.
        """
        if not self.point.altitude_is_agl:
            return self.point.altitude_m
        if self.ground_elevation_m is None:
            raise ValueError(f"Entry {self.id} is AGL but its ground elevation is unknown")
        return self.point.altitude_m + self.ground_elevation_m

    def altitude_msl_ft(self) -> int:
        return int(round(self.altitude_msl_m() / METERS_PER_FOOT))
