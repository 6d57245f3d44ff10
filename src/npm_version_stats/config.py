from __future__ import annotations

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[2]


def _unquote_env_value(value: str) -> str:
    stripped = value.strip()
    if len(stripped) >= 2 and stripped[0] == stripped[-1] and stripped[0] in {"'", '"'}:
        return stripped[1:-1]
    return stripped


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, raw_value = line.split("=", 1)
        key = key.strip()
        if not key or key in os.environ:
            continue
        os.environ[key] = _unquote_env_value(raw_value)


def _env_path(name: str, default: Path) -> Path:
    raw = (os.getenv(name) or "").strip()
    return Path(raw) if raw else default


_load_env_file(ROOT_DIR / ".env")

SEED_DATA_DIR = _env_path("NPM_STATS_SEED_DIR", ROOT_DIR / "seed_data")
OUTPUT_DATA_DIR = _env_path("NPM_STATS_OUTPUT_DIR", ROOT_DIR / "data")

REQUEST_TIMEOUT_SECONDS = int(os.getenv("NPM_STATS_TIMEOUT_SECONDS", "30"))
MAX_WORKERS = max(1, int(os.getenv("NPM_STATS_MAX_WORKERS", "8")))
LOG_LEVEL = (os.getenv("NPM_STATS_LOG_LEVEL") or "INFO").strip().upper() or "INFO"
