"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from forum.domain.exceptions import ConflictError, ForumError, NotFoundError, ValidationError

_STATUS_BY_ERROR: tuple[tuple[type[ForumError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
)


def http_error_for(exc: ForumError) -> HTTPException:
    """Translate a use case failure into the matching HTTP error."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )


__all__ = ["http_error_for"]
