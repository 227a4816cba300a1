"""cockpitlink/dcs_interface/exceptions.py"""

class DCSCommError(Exception):
    """Base exception for all DCS communication errors."""
    pass

class ConnectionTimeout(DCSCommError):
    """Raised when the DCS export script doesn't respond in time."""
    pass

class ProtocolError(DCSCommError):
    """Raised for unframed, oversized or non-JSON replies."""
    pass

class MessageFormatError(ProtocolError):
    """Raised when a message decodes but does not follow the envelope schema."""
    def __init__(self, field_name: str, message: str = "Bad value"):
        self.field_name = field_name
        super().__init__(f"{message}: {field_name}")
