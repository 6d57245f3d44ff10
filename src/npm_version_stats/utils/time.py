from __future__ import annotations

from datetime import date, datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def parse_iso_date(raw: str) -> date:
    return datetime.strptime(raw.strip().strip('"'), "%Y-%m-%d").date()


def parse_seed_date(raw: str) -> datetime:
    # Accepts "2024-01-03", "2024-01-03.json" or a full ISO timestamp.
    # Values without an offset are taken as UTC.
    cleaned = raw.strip()
    if cleaned.endswith(".json"):
        cleaned = cleaned[: -len(".json")]
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    parsed = datetime.fromisoformat(cleaned)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_epoch_ms(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def week_start(value: datetime) -> date:
    """UTC Sunday that opens the week containing ``value``."""
    day = value.astimezone(timezone.utc).date()
    # Python weekdays start on Monday; shift so Sunday is 0.
    days_since_sunday = (day.weekday() + 1) % 7
    return day - timedelta(days=days_since_sunday)
