from __future__ import annotations

import argparse
import json
import os
from datetime import date
from pathlib import Path
from typing import Iterable

from npm_version_stats.config import SEED_DATA_DIR
from npm_version_stats.jobs.common import configure_logging, start_run
from npm_version_stats.models import TRACKED_PACKAGES, RawSnapshot
from npm_version_stats.sources.npm_client import NpmVersionDownloadsClient
from npm_version_stats.sources.seed_reader import seed_filename
from npm_version_stats.utils.time import parse_iso_date, utc_now

JOB_NAME = "collect_seed"


def run(
    packages: Iterable[str] = TRACKED_PACKAGES,
    *,
    seed_dir: Path | None = None,
    day: date | None = None,
) -> dict[str, object]:
    run_ctx = start_run(JOB_NAME)
    target_dir = Path(seed_dir) if seed_dir is not None else SEED_DATA_DIR
    seed_day = day or utc_now().date()

    npm = NpmVersionDownloadsClient()
    snapshot: RawSnapshot = {}
    errors: list[str] = []

    for package in packages:
        try:
            print(f"[{JOB_NAME}] request package={package}", flush=True)
            snapshot[package] = {
                "package": package,
                "downloads": npm.fetch_version_downloads(package),
            }
        except Exception as exc:
            errors.append(f"{package}: {exc}")

    path = target_dir / seed_filename(seed_day.isoformat())
    if snapshot:
        target_dir.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(f".{path.name}.tmp")
        tmp_path.write_text(json.dumps(snapshot, separators=(",", ":")), encoding="utf-8")
        os.replace(tmp_path, path)

    return {
        "run_id": run_ctx.run_id,
        "path": str(path) if snapshot else None,
        "packages": len(snapshot),
        "errors": len(errors),
        "error_summary": None if not errors else " | ".join(errors),
    }


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Fetch last-week per-version npm downloads into a dated seed file"
    )
    parser.add_argument("--seed-dir", type=Path, default=None, help="Seed snapshot directory")
    parser.add_argument(
        "--date",
        default=None,
        help="YYYY-MM-DD used to name the seed file (default: today, UTC)",
    )
    args = parser.parse_args()

    configure_logging()
    result = run(
        seed_dir=args.seed_dir,
        day=parse_iso_date(args.date) if args.date else None,
    )
    print(
        f"{JOB_NAME} complete: path={result['path']} "
        f"packages={result['packages']} errors={result['errors']}"
    )
    if result["error_summary"]:
        print(f"{JOB_NAME} errors: {result['error_summary']}")


if __name__ == "__main__":
    main()
