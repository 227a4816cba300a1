class AircraftException(Exception):
    """Base exception for all aircraft-related errors"""
    pass

class UnknownAircraftError(AircraftException):
    """DCS reported a unit type we have no compiler for"""
    def __init__(self, model: str):
        self.model = model
        super().__init__(f"Unknown aircraft: \"{model}\"")

class CompilationError(AircraftException):
    """A single entry could not be turned into cockpit commands"""
    def __init__(self, message: str, entry_id: int = None):
        self.entry_id = entry_id
        super().__init__(message)

class CapacityExceededError(CompilationError):
    """The cockpit has no free slot left for this point type"""
    pass

class MissingPointDataError(CompilationError):
    """The entry carries no point type for the selected aircraft"""
    pass

class InvalidPointOptionError(CompilationError):
    """Point type or option is not valid for the selected aircraft"""
    pass

class AircraftNotSelectedError(CompilationError):
    """Transfer requested with no aircraft selected"""
    pass
