from __future__ import annotations

import json
import logging
from pathlib import Path

from npm_version_stats.config import SEED_DATA_DIR
from npm_version_stats.models import RawSnapshot

logger = logging.getLogger(__name__)


def seed_filename(seed_date: str) -> str:
    return seed_date if seed_date.endswith(".json") else f"{seed_date}.json"


class SeedReader:
    """Reads the dated snapshot files written by the seed collector."""

    def __init__(self, seed_dir: Path | None = None):
        self.seed_dir = Path(seed_dir) if seed_dir is not None else SEED_DATA_DIR

    def list_seed_dates(self) -> list[str] | None:
        try:
            entries = list(self.seed_dir.iterdir())
        except FileNotFoundError:
            return None
        return [
            entry.name
            for entry in entries
            if entry.is_file() and not entry.name.startswith(".")
        ]

    def read_snapshot(self, seed_date: str) -> RawSnapshot | None:
        path = self.seed_dir / seed_filename(seed_date)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("seed file missing path=%s", path)
            return None
        return json.loads(content)

    @staticmethod
    def package_downloads(
        snapshot: RawSnapshot | None, package: str
    ) -> dict[str, int] | None:
        if not snapshot:
            return None
        entry = snapshot.get(package)
        if not entry:
            return None
        downloads = entry.get("downloads")
        if downloads is None:
            return None
        return downloads
