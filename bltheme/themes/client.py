"""Read-only client for the theme store registry index and lockfile."""

from __future__ import annotations

import json
import logging
import time
import urllib.error
import urllib.parse
import urllib.request
from pathlib import Path
from typing import Any, cast

from bltheme.config import RegistryConfig
from bltheme.errors import RegistryError
from bltheme.themes.schema import RegistryEntry, RegistryLockEntry

logger = logging.getLogger(__name__)


class RegistryClient:
    """Fetch `index.json` / `index.lock.json` over HTTP(S) or from local paths."""

    def __init__(self, config: RegistryConfig) -> None:
        self.index_url = config.index_url
        self.lock_url = config.lock_url
        self.timeout_seconds = config.timeout_seconds
        self.retry_attempts = config.retry_attempts
        self.retry_backoff_seconds = config.retry_backoff_seconds

    def fetch_index(self) -> dict[str, Any]:
        """Return the registry index document."""
        return self._load_json(self.index_url)

    def fetch_lock(self) -> dict[str, Any]:
        """Return the registry lockfile document."""
        return self._load_json(self.lock_url)

    def list_registered(self) -> list[RegistryEntry]:
        themes = self.fetch_index().get("themes", [])
        if not isinstance(themes, list):
            return []
        entries = (RegistryEntry.from_payload(item) for item in themes)
        return [entry for entry in entries if entry is not None]

    def is_registered(self, repo: str) -> bool:
        """Return True when repo is listed in the index; any fetch failure counts as not registered."""
        try:
            return any(entry.repo == repo for entry in self.list_registered())
        except RegistryError as exc:
            logger.warning("Registry index unavailable, treating %s as unregistered: %s", repo, exc)
            return False

    def find_lock_entry(self, repo: str) -> RegistryLockEntry | None:
        """Return the locked release for repo, or None when absent or unavailable."""
        try:
            themes = self.fetch_lock().get("themes", [])
        except RegistryError as exc:
            logger.warning("Registry lockfile unavailable: %s", exc)
            return None
        if not isinstance(themes, list):
            return None
        for item in themes:
            entry = RegistryLockEntry.from_payload(item)
            if entry is not None and entry.repo == repo:
                return entry
        return None

    def _load_json(self, target: str) -> dict[str, Any]:
        parsed = urllib.parse.urlparse(target)
        try:
            if parsed.scheme in {"http", "https"}:
                with self._urlopen_with_retry(target) as response:
                    payload = response.read().decode("utf-8")
            else:
                path = Path(parsed.path if parsed.scheme == "file" else target).resolve()
                payload = path.read_text(encoding="utf-8")
            data = json.loads(payload)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise RegistryError(f"cannot read registry document {target}: {exc}") from exc
        if not isinstance(data, dict):
            raise RegistryError(f"registry document must be an object: {target}")
        return cast(dict[str, Any], data)

    def _urlopen_with_retry(self, target: str) -> Any:
        last_error: Exception | None = None
        for attempt in range(1, self.retry_attempts + 1):
            try:
                if self.timeout_seconds is None:
                    return urllib.request.urlopen(target)
                return urllib.request.urlopen(target, timeout=self.timeout_seconds)
            except (urllib.error.HTTPError, urllib.error.URLError, TimeoutError) as exc:
                last_error = exc
                if attempt >= self.retry_attempts:
                    break
                time.sleep(self.retry_backoff_seconds * attempt)
        raise RegistryError(f"network request failed after retries: {target}") from last_error
