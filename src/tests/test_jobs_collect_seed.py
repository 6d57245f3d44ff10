from __future__ import annotations

import json
from datetime import date
from pathlib import Path

from npm_version_stats.jobs import collect_seed, merge_weekly_stats
from npm_version_stats.models import HistoricalSeries
from npm_version_stats.storage.series_store import SeriesStore


class _Npm:
    def fetch_version_downloads(self, package: str) -> dict[str, int]:
        if package == "@mui/broken":
            raise RuntimeError("503 Service Unavailable")
        return {"1.0.0": len(package)}


def test_collect_seed_writes_dated_snapshot(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(collect_seed, "NpmVersionDownloadsClient", _Npm)

    result = collect_seed.run(
        ["react", "@mui/broken", "@mui/lab"],
        seed_dir=tmp_path,
        day=date(2024, 1, 3),
    )

    seed_path = tmp_path / "2024-01-03.json"
    assert result["path"] == str(seed_path)
    assert result["packages"] == 2
    assert result["errors"] == 1
    assert result["error_summary"] == "@mui/broken: 503 Service Unavailable"
    assert json.loads(seed_path.read_text(encoding="utf-8")) == {
        "react": {"package": "react", "downloads": {"1.0.0": 5}},
        "@mui/lab": {"package": "@mui/lab", "downloads": {"1.0.0": 8}},
    }
    assert "[collect_seed] request package=@mui/lab" in capsys.readouterr().out


def test_collect_seed_skips_write_when_everything_failed(
    tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.setattr(collect_seed, "NpmVersionDownloadsClient", _Npm)

    result = collect_seed.run(["@mui/broken"], seed_dir=tmp_path, day=date(2024, 1, 3))

    assert result["path"] is None
    assert result["errors"] == 1
    assert list(tmp_path.iterdir()) == []


def test_collected_seed_feeds_weekly_merge(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(collect_seed, "NpmVersionDownloadsClient", _Npm)
    seed_dir = tmp_path / "seed_data"
    output_dir = tmp_path / "data"
    SeriesStore(output_dir).save(HistoricalSeries(package="react"))

    collect_seed.run(["react"], seed_dir=seed_dir, day=date(2024, 1, 3))
    summary = merge_weekly_stats.run(
        ["react"], seed_dir=seed_dir, output_dir=output_dir, max_workers=1
    )

    assert summary.succeeded == 1
    assert SeriesStore(output_dir).load("react") == HistoricalSeries(
        package="react", timestamps=[1704240000000], downloads={"1.0.0": [5]}
    )
