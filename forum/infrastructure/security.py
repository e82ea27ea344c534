"""Helpers for issuing and verifying bearer tokens."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from forum.config import get_settings

ALGORITHM = "HS256"

settings = get_settings()


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Sign ``data`` into a JWT.

    Session issuance lives in the identity service; this helper is kept for
    operator tooling and tests.
    """

    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


__all__ = ["ALGORITHM", "create_access_token", "decode_access_token"]
