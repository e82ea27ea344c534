"""Tests for the application timezone helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from forum.utils import datetime as app_datetime


@pytest.fixture()
def app_timezone(monkeypatch):
    """Point the cached application timezone at a given zone for one test."""

    def _use(tz):
        monkeypatch.setattr(app_datetime, "get_app_timezone", lambda: tz)

    return _use


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("UTC+05:30", timedelta(hours=5, minutes=30)),
        ("utc+0530", timedelta(hours=5, minutes=30)),
        ("GMT-3", timedelta(hours=-3)),
        (" UTC-11:00 ", timedelta(hours=-11)),
    ],
)
def test_fixed_offsets_are_parsed(name, expected) -> None:
    assert app_datetime.parse_fixed_offset(name) == timezone(expected)


@pytest.mark.parametrize("name", ["Europe/Nowhere", "UTC+24", "UTC+05:75", "+05:00", ""])
def test_unresolvable_names_fall_back_to_utc(name) -> None:
    assert app_datetime.resolve_timezone(name) == timezone.utc


def test_offset_names_resolve_through_the_offset_parser() -> None:
    tz = app_datetime.resolve_timezone("UTC+02:00")

    assert tz.utcoffset(None) == timedelta(hours=2)


def test_naive_values_are_read_in_the_app_timezone(app_timezone) -> None:
    bogota = timezone(timedelta(hours=-5))
    app_timezone(bogota)

    stored = datetime(2024, 5, 1, 7, 0)

    assert app_datetime.ensure_app_timezone(stored) == datetime(2024, 5, 1, 7, 0, tzinfo=bogota)


def test_aware_values_are_stored_as_naive_local_time(app_timezone) -> None:
    app_timezone(timezone(timedelta(hours=-5)))

    written = app_datetime.ensure_app_naive_datetime(
        datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    )

    assert written == datetime(2024, 5, 1, 7, 0)
    assert written.tzinfo is None
    assert app_datetime.ensure_app_naive_datetime(None) is None
