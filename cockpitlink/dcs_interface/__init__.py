"""
dcs_interface - DCS export script communication interface for cockpitlink

Exposes the DCSConnection class, the message envelope and common exceptions.
"""

from .core import DCSConnection, Connected, Disconnected, ConnectionResult
from .messages import DCSCommand, DCSMessage, CameraPosition, WeaponStation, parse_bool_text
from .exceptions import DCSCommError, ConnectionTimeout, ProtocolError, MessageFormatError

__all__ = [
    'DCSConnection', 'Connected', 'Disconnected', 'ConnectionResult',
    'DCSCommand', 'DCSMessage', 'CameraPosition', 'WeaponStation', 'parse_bool_text',
    'DCSCommError', 'ConnectionTimeout', 'ProtocolError', 'MessageFormatError',
]
