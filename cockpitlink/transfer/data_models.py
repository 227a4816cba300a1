# cockpitlink/transfer/data_models.py
"""
State exchanged between the transfer orchestrator, the live poller and the
HTTP surface.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..aircraft.exceptions import CompilationError
from ..dcs_interface.messages import CameraPosition


class StatusKind(Enum):
    """Connection status, in the order it is derived from a poll."""
    NOT_CONNECTED = "not_connected"
    SERVER_ERROR = "server_error"
    NO_COORDINATES = "no_coordinates"
    CONNECTED = "connected"


@dataclass(frozen=True)
class DCSStatus:
    kind: StatusKind
    text: str
    camera_position: Optional[CameraPosition] = None
    is_f10_view: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "text": self.text,
            "cameraPosition": self.camera_position.to_dict() if self.camera_position else None,
            "isF10View": self.is_f10_view,
        }


@dataclass
class TransferSession:
    """
    One playback on the host: created when a transfer is submitted, dropped
    when the host finishes, the user stops it or the aircraft changes.
    """
    total: int
    last_index: int = 0
    running: bool = True
    generation: int = 0


@dataclass(frozen=True)
class TransferProgress:
    active: bool
    current: int = 0
    total: int = 0


@dataclass
class TransferResult:
    """Outcome of start_transfer."""
    total: int
    delivered: bool
    compiled_ids: List[int] = field(default_factory=list)
    errors: List[CompilationError] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "delivered": self.delivered,
            "compiledIds": list(self.compiled_ids),
            "errors": [{"entryId": e.entry_id, "error_type": type(e).__name__, "message": str(e)}
                       for e in self.errors],
        }
