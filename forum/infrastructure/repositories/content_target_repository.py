"""Read-only lookups of the content a report can point at."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.orm import Session

from forum.domain.entities import REPORT_SNAPSHOT_MAX_LENGTH, ReportEntityType, ReportTarget
from forum.infrastructure.models import ThreadModel, ThreadResponseModel, UserModel

_MISSING = ReportTarget(exists=False)


def _snapshot(value: str | None) -> str | None:
    if not value:
        return None
    text = " ".join(value.split())
    return text[:REPORT_SNAPSHOT_MAX_LENGTH] or None


class ContentTargetRepository:
    """Resolve report targets against the live thread, response and user tables."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self._resolvers: dict[ReportEntityType, Callable[[int], ReportTarget]] = {
            ReportEntityType.THREAD: self._resolve_thread,
            ReportEntityType.RESPONSE: self._resolve_response,
            ReportEntityType.USER: self._resolve_user,
        }

    def resolve(self, entity_type: ReportEntityType, entity_id: int) -> ReportTarget:
        """Return the target's parent thread and display snapshot, if it exists."""

        return self._resolvers[entity_type](entity_id)

    def _resolve_thread(self, entity_id: int) -> ReportTarget:
        thread = self.session.get(ThreadModel, entity_id)
        if thread is None:
            return _MISSING
        return ReportTarget(exists=True, thread_id=thread.id, snapshot=_snapshot(thread.title))

    def _resolve_response(self, entity_id: int) -> ReportTarget:
        response = self.session.get(ThreadResponseModel, entity_id)
        if response is None:
            return _MISSING
        return ReportTarget(
            exists=True, thread_id=response.thread_id, snapshot=_snapshot(response.body)
        )

    def _resolve_user(self, entity_id: int) -> ReportTarget:
        user = self.session.get(UserModel, entity_id)
        if user is None:
            return _MISSING
        return ReportTarget(exists=True, thread_id=None, snapshot=_snapshot(user.name))


__all__ = ["ContentTargetRepository"]
