"""
aircraft - Per-aircraft cockpit command compilers for cockpitlink
"""

from .core import DCSAircraft, CommandSequence, NavigationState, CompileReport
from .registry import create_aircraft, kind_for_model, AIRCRAFT_CLASSES
from .airframes import A10C, AH64, F16C, F18C, JF17, KA50
from .exceptions import (
    AircraftException,
    UnknownAircraftError,
    CompilationError,
    CapacityExceededError,
    MissingPointDataError,
    InvalidPointOptionError,
    AircraftNotSelectedError,
)
from ..constants.aircraft import AircraftKind

__all__ = [
    'DCSAircraft', 'CommandSequence', 'NavigationState', 'CompileReport',
    'create_aircraft', 'kind_for_model', 'AIRCRAFT_CLASSES',
    'A10C', 'AH64', 'F16C', 'F18C', 'JF17', 'KA50',
    'AircraftException', 'UnknownAircraftError', 'CompilationError', 'CapacityExceededError',
    'MissingPointDataError', 'InvalidPointOptionError', 'AircraftNotSelectedError',
    'AircraftKind',
]
