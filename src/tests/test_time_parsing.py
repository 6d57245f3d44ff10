from datetime import date, datetime, timezone

import pytest

from npm_version_stats.utils.time import (
    parse_iso_date,
    parse_seed_date,
    to_epoch_ms,
    week_start,
)


def test_parse_iso_date() -> None:
    result = parse_iso_date('"2024-01-03"')
    assert result.isoformat() == "2024-01-03"


def test_parse_seed_date_plain_day_is_utc_midnight() -> None:
    parsed = parse_seed_date("2024-01-03")
    assert parsed == datetime(2024, 1, 3, tzinfo=timezone.utc)


def test_parse_seed_date_strips_json_suffix() -> None:
    assert parse_seed_date("2024-01-03.json") == parse_seed_date("2024-01-03")


def test_parse_seed_date_converts_offsets_to_utc() -> None:
    parsed = parse_seed_date("2024-01-06T22:30:00-05:00")
    assert parsed.isoformat() == "2024-01-07T03:30:00+00:00"


def test_parse_seed_date_accepts_zulu_suffix() -> None:
    parsed = parse_seed_date("2024-01-03T12:00:00Z")
    assert parsed == datetime(2024, 1, 3, 12, tzinfo=timezone.utc)


def test_parse_seed_date_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_seed_date("notes.txt")


def test_to_epoch_ms() -> None:
    assert to_epoch_ms(datetime(2024, 1, 3, tzinfo=timezone.utc)) == 1704240000000


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (datetime(2024, 1, 7, tzinfo=timezone.utc), date(2024, 1, 7)),
        (datetime(2024, 1, 8, 23, 59, tzinfo=timezone.utc), date(2024, 1, 7)),
        (datetime(2024, 1, 13, 12, tzinfo=timezone.utc), date(2024, 1, 7)),
        (datetime(2024, 1, 3, tzinfo=timezone.utc), date(2023, 12, 31)),
    ],
)
def test_week_start_is_previous_sunday(value: datetime, expected: date) -> None:
    assert week_start(value) == expected
