from __future__ import annotations

from urllib.parse import quote

import requests

from npm_version_stats.config import REQUEST_TIMEOUT_SECONDS


class NpmVersionDownloadsClient:
    base_url = "https://api.npmjs.org/versions"

    def __init__(self, timeout_seconds: int = REQUEST_TIMEOUT_SECONDS):
        self.timeout_seconds = timeout_seconds

    def fetch_version_downloads(self, package: str) -> dict[str, int]:
        encoded_package = quote(package, safe="")
        url = f"{self.base_url}/{encoded_package}/last-week"

        response = requests.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        payload = response.json()

        downloads: dict[str, int] = {}
        for version, count in (payload.get("downloads") or {}).items():
            if count is None:
                continue
            downloads[str(version)] = int(count)
        return downloads
