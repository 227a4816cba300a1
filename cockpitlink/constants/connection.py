# cockpitlink/constants/connection.py

class DCSConnectionConstants:
    """Shared constants for the DCS export script connection."""

    DEFAULT_HOST = "127.0.0.1"
    DEFAULT_PORT = 42069

    # Every request must give up before the next poll tick is due
    POLL_PERIOD_S = 0.25
    REQUEST_TIMEOUT_S = 0.2

    # Host reported errors stay on screen at least this long
    ERROR_HOLD_S = 10.0

    MAX_MESSAGE_BYTES = 1024 * 1024
    ENCODING = "utf-8"
    LINE_TERMINATOR = b"\n"
