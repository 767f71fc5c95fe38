"""Publish-readiness check: local metadata vs. the theme store registry."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from bltheme.errors import GitRemoteError, GitRepositoryError, MetadataError, ThemeNotFoundError
from bltheme.themes.schema import RegistryLockEntry, ThemeMetadata

logger = logging.getLogger(__name__)

_REMOTE_REPO_RE = re.compile(r"github\.com[:/](.+?)(?:\.git)?$")
_NUMERIC_RE = re.compile(r"^\d+$")

REMOTE_HINT = "git remote add origin https://github.com/username/theme-name.git"


class GitInspectorLike(Protocol):
    """Git capability needed by the publisher."""

    def is_repo(self, path: Path) -> bool: ...

    def remote_url(self, path: Path, name: str = "origin") -> str | None: ...


class RegistryLike(Protocol):
    """Registry capability needed by the publisher."""

    def is_registered(self, repo: str) -> bool: ...

    def find_lock_entry(self, repo: str) -> RegistryLockEntry | None: ...


class VersionComparison(str, Enum):
    EQUAL = "equal"
    GREATER = "greater"
    NOT_GREATER = "not_greater"


class PublishStatus(str, Enum):
    """Outcome of a publish-readiness check."""

    NOT_REGISTERED = "not_registered"
    NO_LOCK_ENTRY = "no_lock_entry"
    UP_TO_DATE = "up_to_date"
    READY = "ready"
    NOT_GREATER = "not_greater"


@dataclass(frozen=True)
class PublishReport:
    metadata: ThemeMetadata
    repo: str
    registered: bool
    status: PublishStatus
    lock_entry: RegistryLockEntry | None = None


def parse_remote_repo(remote: str) -> str | None:
    """Extract `owner/repo` from an https or ssh GitHub remote URL."""
    match = _REMOTE_REPO_RE.search(remote.strip())
    if match is None:
        return None
    repo = match.group(1)
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    return repo or None


def _version_part(parts: list[str], index: int) -> int | None:
    if index >= len(parts) or _NUMERIC_RE.match(parts[index]) is None:
        return None
    return int(parts[index])


def compare_versions(local: str, remote: str) -> VersionComparison:
    """Compare major, minor, then patch; the first differing part decides.

    A part that is missing or not purely numeric never compares greater or
    smaller, so such versions end up NOT_GREATER unless an earlier part is greater.
    """
    if local == remote:
        return VersionComparison.EQUAL
    local_parts = local.split(".")
    remote_parts = remote.split(".")
    for index in range(3):
        mine = _version_part(local_parts, index)
        theirs = _version_part(remote_parts, index)
        if mine is None or theirs is None:
            continue
        if mine > theirs:
            return VersionComparison.GREATER
        if mine < theirs:
            break
    return VersionComparison.NOT_GREATER


class ThemePublisher:
    """Decide whether a local theme is ready to be (re)published."""

    def __init__(self, git: GitInspectorLike, registry: RegistryLike) -> None:
        self.git = git
        self.registry = registry

    def load_metadata(self, theme_path: Path) -> ThemeMetadata:
        if not theme_path.is_dir():
            raise ThemeNotFoundError(f'Directory "{theme_path}" does not exist.')
        metadata_path = theme_path / "metadata.json"
        if not metadata_path.is_file():
            raise MetadataError(
                "metadata.json not found.",
                hints=["Run validation first: create-bl-theme validate"],
            )
        try:
            payload = json.loads(metadata_path.read_text(encoding="utf-8"))
            return ThemeMetadata.from_payload(payload)
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as exc:
            raise MetadataError(f"Invalid metadata.json - {exc}") from exc

    def resolve_repo(self, theme_path: Path) -> str:
        if not self.git.is_repo(theme_path):
            raise GitRepositoryError(
                "Not a git repository. Initialize git first:",
                hints=["git init", REMOTE_HINT],
            )
        remote = self.git.remote_url(theme_path, "origin")
        if not remote:
            raise GitRemoteError("No git remote found. Add a remote:", hints=[REMOTE_HINT])
        repo = parse_remote_repo(remote)
        if repo is None:
            raise GitRemoteError(f"Could not parse GitHub repo from remote: {remote}")
        return repo

    def check(self, theme_path: Path) -> PublishReport:
        """Run the publish-readiness check; no network writes are performed."""
        metadata = self.load_metadata(theme_path)
        repo = self.resolve_repo(theme_path)

        if not self.registry.is_registered(repo):
            report = PublishReport(metadata=metadata, repo=repo, registered=False, status=PublishStatus.NOT_REGISTERED)
        else:
            lock_entry = self.registry.find_lock_entry(repo)
            report = PublishReport(
                metadata=metadata,
                repo=repo,
                registered=True,
                status=self._status_for(metadata.version, lock_entry),
                lock_entry=lock_entry,
            )

        logger.info(
            "%s",
            json.dumps(
                {
                    "event": "theme_publish_check",
                    "repo": repo,
                    "version": metadata.version,
                    "status": report.status.value,
                },
                ensure_ascii=False,
                sort_keys=True,
            ),
        )
        return report

    @staticmethod
    def _status_for(local_version: str, lock_entry: RegistryLockEntry | None) -> PublishStatus:
        if lock_entry is None:
            return PublishStatus.NO_LOCK_ENTRY
        comparison = compare_versions(local_version, lock_entry.version)
        if comparison is VersionComparison.EQUAL:
            return PublishStatus.UP_TO_DATE
        if comparison is VersionComparison.GREATER:
            return PublishStatus.READY
        return PublishStatus.NOT_GREATER
