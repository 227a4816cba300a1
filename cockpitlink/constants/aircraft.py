# cockpitlink/constants/aircraft.py
from enum import Enum


class AircraftKind(Enum):
    """Aircraft with a cockpit command compiler."""
    A10C = "A10C"
    AH64 = "AH64"
    F16C = "F16C"
    F18C = "F18C"
    JF17 = "JF17"
    KA50 = "KA50"


# Unit type names reported by the DCS export script
DCS_MODEL_NAMES = {
    "A-10C": AircraftKind.A10C,
    "A-10C_2": AircraftKind.A10C,
    "AH-64D_BLK_II": AircraftKind.AH64,
    "F-16C_50": AircraftKind.F16C,
    "FA-18C_hornet": AircraftKind.F18C,
    "JF-17": AircraftKind.JF17,
    "Ka-50": AircraftKind.KA50,
    "Ka-50_3": AircraftKind.KA50,
}

METERS_PER_FOOT = 0.3048
