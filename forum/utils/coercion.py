"""Lenient converters for identifiers and free text coming from callers."""

from __future__ import annotations

from typing import Any


def coerce_positive_int(value: Any) -> int | None:
    """Return ``value`` as a positive ``int`` or ``None`` when it is not one.

    Integers, integral floats and digit strings are accepted. Booleans are
    rejected even though they subclass ``int``.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        candidate = value
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        candidate = int(value)
    elif isinstance(value, str):
        try:
            candidate = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    return candidate if candidate > 0 else None


def normalize_text(value: Any) -> str:
    """Return ``value`` as a stripped string, treating ``None`` as empty."""

    if value is None:
        return ""
    return str(value).strip()


__all__ = ["coerce_positive_int", "normalize_text"]
