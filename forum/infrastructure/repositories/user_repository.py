"""Persistence layer for forum members."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from forum.domain.entities import User
from forum.infrastructure.models import UserModel
from forum.utils import ensure_app_naive_datetime, ensure_app_timezone


class UserRepository:
    """Provide lookups for :class:`User` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_handle(self, handle: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.handle == handle.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_by_handles(self, handles: Iterable[str]) -> Sequence[User]:
        """Return the users owning any of ``handles`` in one query.

        The result order is unspecified; unknown handles are ignored.
        """

        unique_handles = {handle.lower() for handle in handles if handle}
        if not unique_handles:
            return []
        query = self.session.query(UserModel).filter(UserModel.handle.in_(unique_handles))
        return [self._to_entity(model) for model in query.all()]

    def create(self, user: User) -> User:
        model = UserModel(
            name=user.name,
            handle=user.handle.strip().lower(),
            role=user.role,
            is_active=user.is_active,
        )
        if user.created_at is not None:
            model.created_at = ensure_app_naive_datetime(user.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            handle=model.handle,
            role=model.role,
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
