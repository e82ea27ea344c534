"""Tests for the lenient identifier and text converters."""

import pytest

from forum.utils import coerce_positive_int, normalize_text


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (5, 5),
        ("12", 12),
        (" 8 ", 8),
        (3.0, 3),
        (3.5, None),
        (0, None),
        (-1, None),
        ("", None),
        ("4a", None),
        (None, None),
        (True, None),
        ([1], None),
    ],
)
def test_coerce_positive_int(value, expected) -> None:
    assert coerce_positive_int(value) == expected


def test_normalize_text() -> None:
    assert normalize_text(None) == ""
    assert normalize_text("  hi  ") == "hi"
    assert normalize_text(42) == "42"
