"""
transfer - Command playback and live state polling for cockpitlink
"""

from .core import TransferOrchestrator
from .poller import LiveStatePoller, format_camera_position, NOT_CONNECTED_TEXT, NO_COORDINATES_TEXT
from .data_models import DCSStatus, StatusKind, TransferSession, TransferProgress, TransferResult

__all__ = [
    'TransferOrchestrator', 'LiveStatePoller', 'format_camera_position',
    'NOT_CONNECTED_TEXT', 'NO_COORDINATES_TEXT',
    'DCSStatus', 'StatusKind', 'TransferSession', 'TransferProgress', 'TransferResult',
]
