"""Extraction of ``@handle`` mentions from free text."""

from __future__ import annotations

import re
from typing import Final

# ``@`` must not follow an identifier character, so ``foo@bar`` is not a mention.
_MENTION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?<![A-Za-z0-9_])@([A-Za-z0-9_]{2,20})\b",
    re.ASCII,
)


def extract_handles(text: str | None) -> list[str]:
    """Return the distinct lowercased handles mentioned in ``text``.

    Handles are returned in order of first appearance. ``None`` and empty
    strings yield an empty list.
    """

    if not text:
        return []
    handles = (match.group(1).lower() for match in _MENTION_PATTERN.finditer(str(text)))
    return list(dict.fromkeys(handles))


__all__ = ["extract_handles"]
