"""Custom exceptions for lap session recording."""


class LapSessionError(Exception):
    """Base exception for session recording errors."""


class ConfigurationError(LapSessionError):
    """Raised when generator or report configuration is invalid."""


class SessionDataError(LapSessionError):
    """Raised when session data cannot be parsed or validated."""


class SessionInputError(LapSessionError):
    """Raised when console input cannot be interpreted."""
