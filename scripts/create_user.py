"""Utility script to register a forum member, typically the first moderator."""

from __future__ import annotations

import argparse
import re

from sqlalchemy.exc import SQLAlchemyError

from forum.domain.entities import ROLE_ADMIN, ROLE_MEMBER, ROLE_MODERATOR, User
from forum.infrastructure.database import SessionLocal, initialize_database
from forum.infrastructure.repositories import UserRepository
from forum.infrastructure.security import create_access_token

HANDLE_PATTERN = re.compile(r"^[A-Za-z0-9_]{2,20}$")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create a forum user with a mention handle and a role.",
    )
    parser.add_argument("--name", required=True, help="Display name of the user")
    parser.add_argument(
        "--handle",
        required=True,
        help="Mention handle without '@' (2-20 letters, digits or underscores)",
    )
    parser.add_argument(
        "--role",
        choices=(ROLE_MEMBER, ROLE_MODERATOR, ROLE_ADMIN),
        default=ROLE_MODERATOR,
        help="Role granted to the user (default: moderator)",
    )
    parser.add_argument(
        "--issue-token",
        action="store_true",
        help="Print a bearer token for the new user",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()
    handle = args.handle.lstrip("@")
    if not HANDLE_PATTERN.match(handle):
        raise SystemExit("Handle must be 2-20 letters, digits or underscores.")

    initialize_database()

    session = SessionLocal()
    try:
        repository = UserRepository(session)
        if repository.get_by_handle(handle) is not None:
            raise SystemExit(f"Handle @{handle.lower()} is already taken.")
        user = repository.create(
            User(
                id=None,
                name=args.name.strip(),
                handle=handle,
                role=args.role,
                is_active=True,
                created_at=None,
            )
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the user: {exc}") from exc
    finally:
        session.close()

    print(
        "User created:\n"
        f"  ID: {user.id}\n"
        f"  Name: {user.name}\n"
        f"  Handle: @{user.handle}\n"
        f"  Role: {user.role}"
    )
    if args.issue_token:
        print(f"  Token: {create_access_token({'sub': str(user.id)})}")


if __name__ == "__main__":
    main()
