from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, TypedDict

from npm_version_stats.errors import SeriesFormatError


class PackageDownloads(TypedDict):
    package: str
    downloads: dict[str, int]


# One seed file: package name -> last-week per-version downloads.
RawSnapshot = dict[str, PackageDownloads]

# UTC Sunday -> seed identifiers falling in that week.
WeekBucket = dict[date, list[str]]


TRACKED_PACKAGES: tuple[str, ...] = (
    "@mui/codemod",
    "@mui/core-downloads-tracker",
    "@mui/icons-material",
    "@mui/lab",
    "@mui/material-nextjs",
    "@mui/material",
    "@mui/material-pigment-css",
    "@mui/private-theming",
    "@mui/styled-engine",
    "@mui/styled-engine-sc",
    "@mui/system",
    "@mui/types",
    "@mui/utils",
    "@mui/x-data-grid",
    "@mui/x-data-grid-generator",
    "@mui/x-data-grid-pro",
    "@mui/x-data-grid-premium",
    "@mui/x-date-pickers",
    "@mui/x-date-pickers-pro",
    "@mui/x-charts",
    "@mui/x-charts-pro",
    "@mui/x-charts-premium",
    "@mui/x-charts-vendor",
    "@mui/x-tree-view",
    "@mui/x-tree-view-pro",
    "@mui/x-license",
    "@mui/x-internals",
    "@mui/x-telemetry",
    "@base-ui-components/react",
    "react",
    "@emotion/react",
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class HistoricalSeries:
    """Per-version weekly download counts for one package.

    ``downloads[version][i]`` is the count observed at ``timestamps[i]``
    (epoch milliseconds). Every version array has one entry per timestamp.
    """

    package: str
    timestamps: list[int] = field(default_factory=list)
    downloads: dict[str, list[int]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Any) -> HistoricalSeries:
        if not isinstance(payload, dict):
            raise SeriesFormatError("series payload must be a JSON object")

        package = payload.get("package")
        timestamps = payload.get("timestamps")
        downloads = payload.get("downloads")
        if not isinstance(package, str) or not package:
            raise SeriesFormatError("series is missing its package name")
        if not isinstance(timestamps, list) or not all(
            _is_int(ts) for ts in timestamps
        ):
            raise SeriesFormatError(f"{package}: timestamps must be a list of integers")
        if any(a >= b for a, b in zip(timestamps, timestamps[1:])):
            raise SeriesFormatError(f"{package}: timestamps must be strictly increasing")
        if not isinstance(downloads, dict):
            raise SeriesFormatError(f"{package}: downloads must be an object")

        for version, counts in downloads.items():
            if not isinstance(counts, list) or not all(_is_int(c) for c in counts):
                raise SeriesFormatError(
                    f"{package}: downloads[{version!r}] must be a list of integers"
                )
            if len(counts) != len(timestamps):
                raise SeriesFormatError(
                    f"{package}: downloads[{version!r}] has {len(counts)} entries "
                    f"for {len(timestamps)} timestamps"
                )

        return cls(
            package=package,
            timestamps=list(timestamps),
            downloads={str(v): list(c) for v, c in downloads.items()},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "package": self.package,
            "timestamps": self.timestamps,
            "downloads": self.downloads,
        }

    def is_aligned(self) -> bool:
        size = len(self.timestamps)
        return all(len(counts) == size for counts in self.downloads.values())


@dataclass(frozen=True)
class PackageResult:
    package: str
    weeks_added: int
    weeks_seen: int


@dataclass
class BatchSummary:
    run_id: str
    results: list[PackageResult] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def error_summary(self) -> str | None:
        if not self.failures:
            return None
        return " | ".join(f"{package}: {error}" for package, error in self.failures.items())
