# cockpitlink/geo/utils/coordinates.py
"""
Turns decimal degrees into the digit strings cockpit keypads expect.

Grid conversions are left to the `mgrs` package; this module only cuts its
output into the pieces the keyboards take one field at a time.
"""
import re
from dataclasses import dataclass
from typing import Tuple

import mgrs

_MGRS_CONVERTER = mgrs.MGRS()
_MGRS_PATTERN = re.compile(r"^(\d{1,2}[C-X])([A-Z]{2})(\d*)$")


def degrees_minutes_digits(value: float, degree_width: int, minute_decimals: int) -> Tuple[bool, str]:
    """
    Formats an angle as DD(D)MM followed by the decimal minutes, without separators.

    Args:
        value: Signed angle in decimal degrees.
        degree_width: 2 for latitude, 3 for longitude.
        minute_decimals: Number of digits after the minutes' decimal point.

    Returns:
        (is_positive, digits). Rounding carries into minutes and degrees, so
        59.9999' never shows up as 60'.
    """
    scale = 10 ** minute_decimals
    total = int(round(abs(value) * 60 * scale))
    degrees, remainder = divmod(total, 60 * scale)
    minutes, fraction = divmod(remainder, scale)
    digits = f"{degrees:0{degree_width}d}{minutes:02d}"
    if minute_decimals:
        digits += f"{fraction:0{minute_decimals}d}"
    return value >= 0, digits


def degrees_minutes_seconds_digits(value: float, degree_width: int, second_decimals: int = 0) -> Tuple[bool, str]:
    """Same as degrees_minutes_digits but down to (decimal) seconds."""
    scale = 10 ** second_decimals
    total = int(round(abs(value) * 3600 * scale))
    degrees, remainder = divmod(total, 3600 * scale)
    minutes, remainder = divmod(remainder, 60 * scale)
    seconds, fraction = divmod(remainder, scale)
    digits = f"{degrees:0{degree_width}d}{minutes:02d}{seconds:02d}"
    if second_decimals:
        digits += f"{fraction:0{second_decimals}d}"
    return value >= 0, digits


@dataclass(frozen=True)
class MGRSReference:
    """An MGRS reference split the way cockpit keyboards take it."""
    zone: str       # e.g. "37T"
    digraph: str    # 100 km square, e.g. "GG"
    easting: str
    northing: str

    def __str__(self):
        return f"{self.zone} {self.digraph} {self.easting} {self.northing}"


def to_mgrs(lat: float, lon: float, precision: int = 5) -> MGRSReference:
    """
    Converts a WGS84 position into an MGRS reference.

    Raises:
        ValueError: For positions MGRS cannot express with a UTM zone (polar UPS areas).
    """
    text = _MGRS_CONVERTER.toMGRS(lat, lon, MGRSPrecision=precision)
    match = _MGRS_PATTERN.match(text.strip())
    if not match:
        raise ValueError(f"Position ({lat:.5f}, {lon:.5f}) has no UTM based MGRS reference: {text}")
    zone, digraph, numbers = match.groups()
    half = len(numbers) // 2
    return MGRSReference(zone, digraph, numbers[:half], numbers[half:])
