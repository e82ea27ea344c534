"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from forum.domain.entities import User
from forum.infrastructure.database import get_db
from forum.infrastructure.repositories import UserRepository
from forum.infrastructure.security import decode_access_token
from forum.utils import coerce_positive_int

bearer_scheme = HTTPBearer(auto_error=False)


def _credentials_error(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    user_id = coerce_positive_int(payload.get("sub"))
    if user_id is None:
        raise _credentials_error()

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_error("User not found")
    return user


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the bearer token."""

    if credentials is None or not credentials.credentials:
        raise _credentials_error("Not authenticated")
    return resolve_current_user(credentials.credentials, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def require_moderator(current_user: User = Depends(get_current_active_user)) -> User:
    """Ensure the authenticated user is a moderator or an administrator."""

    if not current_user.can_moderate():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Moderator or admin privileges required",
        )
    return current_user
