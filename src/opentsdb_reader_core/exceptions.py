"""
Custom exceptions for opentsdb-reader-core.
"""


class OpenTSDBError(Exception):
    """Base exception for all OpenTSDB-related errors."""
    pass


class OpenTSDBConnectionError(OpenTSDBError):
    """Raised when reading a response body from OpenTSDB fails."""
    pass


class OpenTSDBQueryError(OpenTSDBError):
    """Raised when OpenTSDB answers a query with an error status."""
    pass


class OpenTSDBParseError(OpenTSDBError):
    """Raised when an OpenTSDB response cannot be parsed."""
    pass


class OpenTSDBShapeError(OpenTSDBParseError):
    """Raised when a response does not have the expected structure."""
    pass


class OpenTSDBValueError(OpenTSDBParseError, ValueError):
    """Raised when a sample value or timestamp is not a finite number."""
    pass
