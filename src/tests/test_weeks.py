from datetime import date

from npm_version_stats.weeks import bucket_by_week


def test_bucket_by_week_groups_on_sunday() -> None:
    weeks = bucket_by_week(["2024-01-14", "2024-01-08", "2024-01-07"])

    assert weeks == {
        date(2024, 1, 7): ["2024-01-07", "2024-01-08"],
        date(2024, 1, 14): ["2024-01-14"],
    }


def test_bucket_by_week_orders_weeks_and_days() -> None:
    weeks = bucket_by_week(
        [
            "2024-02-03.json",
            "2024-01-20.json",
            "2024-01-29.json",
            "2024-01-15.json",
            "2024-01-16.json",
        ]
    )

    assert list(weeks) == [date(2024, 1, 14), date(2024, 1, 28)]
    assert weeks[date(2024, 1, 14)] == [
        "2024-01-15.json",
        "2024-01-16.json",
        "2024-01-20.json",
    ]
    assert weeks[date(2024, 1, 28)] == ["2024-01-29.json", "2024-02-03.json"]


def test_bucket_by_week_saturday_stays_in_previous_week() -> None:
    weeks = bucket_by_week(["2024-01-13", "2024-01-14"])
    assert list(weeks) == [date(2024, 1, 7), date(2024, 1, 14)]


def test_bucket_by_week_empty() -> None:
    assert bucket_by_week([]) == {}


def test_bucket_by_week_skips_non_date_entries() -> None:
    weeks = bucket_by_week(["README.md", "2024-01-08.json", "notes.txt"])

    assert weeks == {date(2024, 1, 7): ["2024-01-08.json"]}
