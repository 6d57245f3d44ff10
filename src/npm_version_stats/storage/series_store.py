from __future__ import annotations

import json
import os
from pathlib import Path

from npm_version_stats.config import OUTPUT_DATA_DIR
from npm_version_stats.errors import SeriesFormatError
from npm_version_stats.models import HistoricalSeries


class SeriesStore:
    """One compact JSON file per package under ``output_dir``.

    Scoped names such as ``@mui/material`` live in a per-scope directory.
    """

    def __init__(self, output_dir: Path | None = None):
        self.output_dir = Path(output_dir) if output_dir is not None else OUTPUT_DATA_DIR

    def path_for(self, package: str) -> Path:
        return self.output_dir / f"{package}.json"

    def load(self, package: str) -> HistoricalSeries | None:
        path = self.path_for(package)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        series = HistoricalSeries.from_dict(json.loads(content))
        # save() derives the path from series.package; it must point back here.
        if series.package != package:
            raise SeriesFormatError(
                f"{path} holds series for {series.package!r}, expected {package!r}"
            )
        return series

    def save(self, series: HistoricalSeries) -> Path:
        path = self.path_for(series.package)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(series.to_dict(), separators=(",", ":"))

        # Write the whole file next to the target, then swap it in.
        tmp_path = path.with_name(f".{path.name}.tmp")
        tmp_path.write_text(payload, encoding="utf-8")
        os.replace(tmp_path, path)
        return path
