"""
Custom exception hierarchy for the TTS MOS evaluation front-end.

Provides structured error types so the pages can tell a failed fetch
from a malformed response or a bad configuration value instead of
catching bare Exception everywhere.
"""


class TTSMosError(Exception):
    """Base exception for all project-specific errors."""


class RatingsFetchError(TTSMosError):
    """Raised when the ratings table cannot be fetched.

    Attributes:
        url: The URL that was requested.
        status_code: HTTP status of the response, if one arrived.
    """

    def __init__(self, message: str, *, url: str = "", status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class TableFormatError(TTSMosError):
    """Raised when a ratings table response has the wrong shape.

    Attributes:
        field: The top-level field that is missing or malformed.
    """

    def __init__(self, message: str, *, field: str = ""):
        super().__init__(message)
        self.field = field


class ValidationError(TTSMosError):
    """Raised when a configuration or preference value is invalid.

    Attributes:
        field: The field or parameter that failed validation.
    """

    def __init__(self, message: str, *, field: str = ""):
        super().__init__(message)
        self.field = field
