from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from npm_version_stats.config import LOG_LEVEL
from npm_version_stats.utils.ids import new_run_id


@dataclass
class RunContext:
    job_name: str
    run_id: str
    started_at: datetime

    def elapsed_seconds(self) -> float:
        return (datetime.now(tz=timezone.utc) - self.started_at).total_seconds()


def start_run(job_name: str, run_id: str | None = None) -> RunContext:
    return RunContext(
        job_name=job_name,
        run_id=run_id or new_run_id(job_name),
        started_at=datetime.now(tz=timezone.utc),
    )


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
