from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable

from npm_version_stats.models import WeekBucket
from npm_version_stats.utils.time import parse_seed_date, week_start

logger = logging.getLogger(__name__)


def bucket_by_week(seed_dates: Iterable[str]) -> WeekBucket:
    """Group seed identifiers by the UTC Sunday that opens their week.

    Weekday and weekend totals from the npm API are not comparable, so the
    caller samples a single day per week. Keys come back in chronological
    order and each bucket is sorted so that sampling is deterministic.
    Identifiers that are not dates (``README.md``) are left out.
    """
    grouped: defaultdict[date, list[str]] = defaultdict(list)
    for seed_date in seed_dates:
        try:
            seeded_at = parse_seed_date(seed_date)
        except ValueError:
            logger.debug("skipping non-date seed entry name=%s", seed_date)
            continue
        grouped[week_start(seeded_at)].append(seed_date)

    return {week: sorted(grouped[week]) for week in sorted(grouped)}
