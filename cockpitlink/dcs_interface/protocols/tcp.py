# cockpitlink/dcs_interface/protocols/tcp.py

import socket
import time

from ..exceptions import DCSCommError, ConnectionTimeout, ProtocolError
from ...constants.connection import DCSConnectionConstants


class JsonLineProtocol:
    """
    Handles low-level communication with the DCS export script.

    Each exchange opens a fresh TCP connection, writes one JSON line and reads
    one JSON line back. The socket is closed before returning, whatever the
    outcome, so the poll loop can call this forever without leaking handles.
    """

    def __init__(self, host: str, port: int,
                 timeout: float = DCSConnectionConstants.REQUEST_TIMEOUT_S,
                 max_bytes: int = DCSConnectionConstants.MAX_MESSAGE_BYTES):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.max_bytes = max_bytes

    def exchange(self, payload: str) -> str:
        """Sends one request line and returns the reply line without its terminator."""
        deadline = time.monotonic() + self.timeout
        data = payload.encode(DCSConnectionConstants.ENCODING) + DCSConnectionConstants.LINE_TERMINATOR
        try:
            with socket.create_connection((self.host, self.port), timeout=self.timeout) as sock:
                sock.sendall(data)
                raw = self._read_line(sock, deadline)
        except socket.timeout as e:
            raise ConnectionTimeout(f"No reply from {self.host}:{self.port} within {self.timeout}s") from e
        except OSError as e:
            raise DCSCommError(f"Socket error talking to {self.host}:{self.port}: {e}") from e

        try:
            return raw.decode(DCSConnectionConstants.ENCODING)
        except UnicodeDecodeError as e:
            raise ProtocolError(f"Reply is not valid {DCSConnectionConstants.ENCODING}") from e

    def _read_line(self, sock: socket.socket, deadline: float) -> bytes:
        buffer = bytearray()
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise ConnectionTimeout(f"Reply from {self.host}:{self.port} incomplete after {self.timeout}s")
            sock.settimeout(remaining)
            chunk = sock.recv(4096)
            if not chunk:
                # Peer closing the connection also ends the message
                if buffer:
                    return bytes(buffer)
                raise ProtocolError("Connection closed without a reply")
            buffer.extend(chunk)
            end = buffer.find(DCSConnectionConstants.LINE_TERMINATOR)
            if end >= 0:
                return bytes(buffer[:end])
            if len(buffer) > self.max_bytes:
                raise ProtocolError(f"Reply exceeds {self.max_bytes} bytes without a line terminator")
