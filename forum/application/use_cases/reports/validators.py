"""Input normalization shared by the report use cases."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from forum.domain.entities import REPORT_STATUS_FILTER_ALL, ReportEntityType, ReportStatus
from forum.domain.exceptions import ValidationError
from forum.utils import normalize_text

DEFAULT_LIST_LIMIT = 120
MIN_LIST_LIMIT = 1
MAX_LIST_LIMIT = 200

E = TypeVar("E", bound=Enum)


def _parse_member(enum_cls: type[E], value: Any) -> E | None:
    if isinstance(value, enum_cls):
        return value
    candidate = normalize_text(value).lower()
    try:
        return enum_cls(candidate)
    except ValueError:
        return None


def parse_entity_type(value: Any) -> ReportEntityType:
    """Return the report entity type for ``value`` or raise ``ValidationError``."""

    entity_type = _parse_member(ReportEntityType, value)
    if entity_type is None:
        raise ValidationError("Invalid report type")
    return entity_type


def parse_review_status(value: Any) -> ReportStatus:
    status = _parse_member(ReportStatus, value)
    if status is None:
        raise ValidationError("Invalid review status")
    return status


def parse_status_filter(value: Any) -> ReportStatus | None:
    """Return the status to filter by, ``None`` meaning every status.

    A missing value selects open reports.
    """

    candidate = normalize_text(value).lower() or ReportStatus.OPEN.value
    if candidate == REPORT_STATUS_FILTER_ALL:
        return None
    status = _parse_member(ReportStatus, candidate)
    if status is None:
        raise ValidationError("Invalid status filter")
    return status


def parse_entity_type_filter(value: Any) -> ReportEntityType | None:
    if value is None or normalize_text(value) == "":
        return None
    entity_type = _parse_member(ReportEntityType, value)
    if entity_type is None:
        raise ValidationError("Invalid entity type filter")
    return entity_type


def clamp_list_limit(value: Any) -> int:
    """Clamp ``value`` into the allowed page size, defaulting non-integers.

    Query strings such as ``"25"`` or ``"-3"`` count as integers; anything else
    (``"ten"``, ``"2.5"``) selects :data:`DEFAULT_LIST_LIMIT`.
    """

    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return DEFAULT_LIST_LIMIT
    if not isinstance(value, int) or isinstance(value, bool):
        return DEFAULT_LIST_LIMIT
    return min(max(value, MIN_LIST_LIMIT), MAX_LIST_LIMIT)


def ensure_max_length(value: str, *, limit: int, label: str) -> str:
    if len(value) > limit:
        raise ValidationError(f"{label} must be {limit} characters or fewer")
    return value


__all__ = [
    "DEFAULT_LIST_LIMIT",
    "MAX_LIST_LIMIT",
    "MIN_LIST_LIMIT",
    "clamp_list_limit",
    "ensure_max_length",
    "parse_entity_type",
    "parse_entity_type_filter",
    "parse_review_status",
    "parse_status_filter",
]
