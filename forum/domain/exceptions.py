"""Errors raised by forum use cases."""


class ForumError(Exception):
    """Base class for expected failures surfaced to callers."""


class ValidationError(ForumError, ValueError):
    """Raised when caller input is malformed. Nothing was read or written."""


class NotFoundError(ForumError, LookupError):
    """Raised when a referenced report or report target does not exist."""


class ConflictError(ForumError):
    """Raised when the reporter already has an open report for the target."""


__all__ = ["ForumError", "ValidationError", "NotFoundError", "ConflictError"]
