"""
Errors raised by the matching core.

Endpoints translate these into HTTP status codes:
InvalidInput -> 400, NotFound -> 404, DataAccessFailure -> 500.
"""


class MatchingError(Exception):
    """Base class for matching and trust scoring errors."""


class InvalidInput(MatchingError):
    pass


class NotFound(MatchingError):
    pass


class DataAccessFailure(MatchingError):
    pass
