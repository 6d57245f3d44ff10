from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable

from npm_version_stats.config import MAX_WORKERS
from npm_version_stats.errors import MissingExistingSeries, SeedSourceUnavailable
from npm_version_stats.jobs.common import configure_logging, start_run
from npm_version_stats.merge import merge_observation
from npm_version_stats.models import (
    TRACKED_PACKAGES,
    BatchSummary,
    PackageResult,
)
from npm_version_stats.sources.seed_reader import SeedReader
from npm_version_stats.storage.series_store import SeriesStore
from npm_version_stats.utils.time import parse_seed_date, to_epoch_ms
from npm_version_stats.weeks import bucket_by_week

JOB_NAME = "merge_weekly_stats"

logger = logging.getLogger(__name__)


def process_package(
    package: str,
    *,
    reader: SeedReader,
    store: SeriesStore,
) -> PackageResult:
    """Merge one sampled day per seed week into the stored series of ``package``.

    Every step runs sequentially since each merge mutates the loaded series.
    The series file is rewritten once at the end, even when nothing new was
    found.
    """
    seed_dates = reader.list_seed_dates()
    if seed_dates is None:
        raise SeedSourceUnavailable(f"Seed folder not found: {reader.seed_dir}")

    series = store.load(package)
    if series is None:
        raise MissingExistingSeries(f"existing data not found for {package}")

    weeks = bucket_by_week(seed_dates)

    weeks_added = 0
    for week, dates in weeks.items():
        for seed_date in dates:
            snapshot = reader.read_snapshot(seed_date)
            downloads = reader.package_downloads(snapshot, package)
            if downloads is None:
                continue

            timestamp = to_epoch_ms(parse_seed_date(seed_date))
            if merge_observation(series, timestamp, downloads):
                weeks_added += 1
            else:
                logger.debug(
                    "week already present package=%s week=%s seed=%s",
                    package,
                    week.isoformat(),
                    seed_date,
                )
            break
        else:
            logger.debug("no data package=%s week=%s", package, week.isoformat())

    store.save(series)
    return PackageResult(package=package, weeks_added=weeks_added, weeks_seen=len(weeks))


def run(
    packages: Iterable[str] = TRACKED_PACKAGES,
    *,
    seed_dir: Path | None = None,
    output_dir: Path | None = None,
    max_workers: int = MAX_WORKERS,
    run_id: str | None = None,
) -> BatchSummary:
    run_ctx = start_run(JOB_NAME, run_id=run_id)
    reader = SeedReader(seed_dir)
    store = SeriesStore(output_dir)
    package_list = list(dict.fromkeys(packages))
    summary = BatchSummary(run_id=run_ctx.run_id)

    def _safe_process(package: str) -> tuple[str, PackageResult | None, str | None]:
        try:
            return package, process_package(package, reader=reader, store=store), None
        except Exception as exc:
            logger.warning("package failed package=%s error=%s", package, exc)
            return package, None, str(exc)

    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        outcomes = list(executor.map(_safe_process, package_list))

    for package, result, error in outcomes:
        if result is None:
            print(f"[{JOB_NAME}] failed package={package}: {error}", flush=True)
            summary.failures[package] = error or "unknown error"
            continue
        print(
            f"[{JOB_NAME}] updated package={package} "
            f"weeks_added={result.weeks_added} weeks_seen={result.weeks_seen}",
            flush=True,
        )
        summary.results.append(result)

    logger.info(
        "run finished run_id=%s elapsed=%.2fs",
        run_ctx.run_id,
        run_ctx.elapsed_seconds(),
    )
    return summary


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Merge weekly per-version npm download seeds into the historical series files"
    )
    parser.add_argument("--seed-dir", type=Path, default=None, help="Seed snapshot directory")
    parser.add_argument(
        "--output-dir", type=Path, default=None, help="Historical series directory"
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=MAX_WORKERS,
        help="Packages processed concurrently",
    )
    parser.add_argument(
        "--strict", action="store_true", help="Exit non-zero if any package failed"
    )
    args = parser.parse_args()

    configure_logging()
    summary = run(
        TRACKED_PACKAGES,
        seed_dir=args.seed_dir,
        output_dir=args.output_dir,
        max_workers=args.max_workers,
    )
    total = summary.succeeded + summary.failed
    print(
        f"{JOB_NAME} complete: run_id={summary.run_id} "
        f"succeeded={summary.succeeded}/{total} failed={summary.failed}"
    )
    if summary.failed:
        print(f"{JOB_NAME} errors: {summary.error_summary}")
        if args.strict:
            sys.exit(1)


if __name__ == "__main__":
    main()
