# cockpitlink/aircraft/registry.py

import logging
from typing import Optional

from .airframes import A10C, AH64, F16C, F18C, JF17, KA50
from .core import DCSAircraft
from .exceptions import UnknownAircraftError
from ..constants.aircraft import AircraftKind, DCS_MODEL_NAMES

AIRCRAFT_CLASSES = {
    AircraftKind.A10C: A10C,
    AircraftKind.AH64: AH64,
    AircraftKind.F16C: F16C,
    AircraftKind.F18C: F18C,
    AircraftKind.JF17: JF17,
    AircraftKind.KA50: KA50,
}

# What DCS reports while no unit is occupied
NO_AIRCRAFT_NAMES = ("", "null")


def create_aircraft(kind: AircraftKind, **options) -> DCSAircraft:
    """Builds the compiler for `kind`; options go to its constructor (e.g. use_mgrs, is_pilot)."""
    aircraft = AIRCRAFT_CLASSES[kind](**options)
    logging.info(f"Aircraft compiler created: {kind.value} {options or ''}".rstrip())
    return aircraft


def kind_for_model(model: Optional[str]) -> Optional[AircraftKind]:
    """
    Maps the unit type name DCS reports to an AircraftKind.

    Returns None when no aircraft is occupied and raises UnknownAircraftError
    for a unit we cannot program.
    """
    if model is None or model in NO_AIRCRAFT_NAMES:
        return None
    try:
        return DCS_MODEL_NAMES[model]
    except KeyError:
        raise UnknownAircraftError(model) from None
