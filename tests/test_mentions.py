"""Tests for mention handle extraction."""

import pytest

from forum.application.use_cases.notifications import extract_handles


def test_embedded_at_sign_is_not_a_mention() -> None:
    text = "contact me at foo@bar_baz or @validHandle"

    assert extract_handles(text) == ["validhandle"]


@pytest.mark.parametrize("text", ["", None])
def test_empty_input_yields_no_handles(text) -> None:
    assert extract_handles(text) == []


def test_handles_are_lowercased_and_deduplicated() -> None:
    text = "@Alice thanks! cc @bob, @ALICE and (@carol_99)"

    assert extract_handles(text) == ["alice", "bob", "carol_99"]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("@a is too short", []),
        ("@ab is long enough", ["ab"]),
        ("@abcdefghijklmnopqrst fits", ["abcdefghijklmnopqrst"]),
        ("@abcdefghijklmnopqrstu is too long", []),
        ("start@middle", []),
        ("line\n@next", ["next"]),
        ("@@double", ["double"]),
        ("hey @dave.", ["dave"]),
    ],
)
def test_handle_boundaries(text: str, expected: list[str]) -> None:
    assert extract_handles(text) == expected
