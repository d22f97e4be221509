"""Exception hierarchy shared by the loader, validator and writers."""


class LaserTraceError(Exception):
    """Base class for errors raised around the tracing engine."""


class LevelFormatError(LaserTraceError, ValueError):
    """Raised when level data cannot be decoded into a :class:`Level`."""


class LevelValidationError(LaserTraceError, ValueError):
    """Raised when a decoded level breaks a structural rule."""


class ResultWriteError(LaserTraceError, OSError):
    """Raised when a trace result cannot be written to its destination."""


class LevelSaveError(LaserTraceError, OSError):
    """Raised when a level cannot be written to its destination."""
