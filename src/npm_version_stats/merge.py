from __future__ import annotations

from bisect import bisect_left
from typing import Mapping

from npm_version_stats.models import HistoricalSeries


def merge_observation(
    series: HistoricalSeries,
    timestamp: int,
    per_version_counts: Mapping[str, int],
) -> bool:
    """Insert one dated observation into ``series`` in place.

    Returns False when ``timestamp`` is already present, in which case the
    series is left untouched. Versions seen for the first time are backfilled
    with zeros for every earlier and later timestamp; known versions missing
    from the observation get a zero at the new position.
    """
    insert_at = bisect_left(series.timestamps, timestamp)
    if (
        insert_at < len(series.timestamps)
        and series.timestamps[insert_at] == timestamp
    ):
        return False

    # Coerce before touching the series so a bad count leaves it intact.
    observed = {str(version): int(count) for version, count in per_version_counts.items()}

    known_versions = list(series.downloads)
    series.timestamps.insert(insert_at, timestamp)

    for version in known_versions:
        series.downloads[version].insert(insert_at, observed.get(version, 0))

    size = len(series.timestamps)
    for version, count in observed.items():
        if version in series.downloads:
            continue
        counts = [0] * size
        counts[insert_at] = count
        series.downloads[version] = counts

    return True
