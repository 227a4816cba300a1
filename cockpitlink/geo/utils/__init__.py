from .coordinates import (
    degrees_minutes_digits,
    degrees_minutes_seconds_digits,
    to_mgrs,
    MGRSReference,
)

__all__ = [
    'degrees_minutes_digits',
    'degrees_minutes_seconds_digits',
    'to_mgrs',
    'MGRSReference',
]
