# cockpitlink/dcs_interface/core.py

import logging
import threading
from dataclasses import dataclass
from typing import Union

from .messages import DCSMessage
from .protocols.tcp import JsonLineProtocol
from .exceptions import DCSCommError
from ..constants.connection import DCSConnectionConstants

logger = logging.getLogger(__name__)

# Constants
DEFAULT_HOST = DCSConnectionConstants.DEFAULT_HOST
DEFAULT_PORT = DCSConnectionConstants.DEFAULT_PORT


@dataclass(frozen=True)
class Connected:
    """The export script answered."""
    response: DCSMessage


@dataclass(frozen=True)
class Disconnected:
    """No usable answer: nothing listening, timeout, or garbage on the wire."""
    reason: str


ConnectionResult = Union[Connected, Disconnected]


class DCSConnection:
    """
    Request/response session with the DCS export script.

    send_request never raises for transport problems. A missing simulator and a
    simulator that reports errors stay distinguishable: the former is
    Disconnected, the latter a Connected response with server_errors.
    """

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT,
                 timeout: float = DCSConnectionConstants.REQUEST_TIMEOUT_S):
        self.host = host
        self.port = port
        self.timeout = timeout
        self._protocol = JsonLineProtocol(host, port, timeout)
        # The export script serves one exchange at a time
        self._lock = threading.Lock()

    def send_request(self, message: DCSMessage) -> ConnectionResult:
        with self._lock:
            try:
                reply = self._protocol.exchange(message.to_json())
                return Connected(DCSMessage.from_json(reply))
            except DCSCommError as e:
                logger.debug(f"DCS request failed: {type(e).__name__}: {e}")
                return Disconnected(f"{type(e).__name__}: {e}")
