"""Unit tests for publish-readiness checks."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from bltheme.errors import GitRemoteError, GitRepositoryError, MetadataError, ThemeNotFoundError
from bltheme.themes.publisher import (
    PublishStatus,
    ThemePublisher,
    VersionComparison,
    compare_versions,
    parse_remote_repo,
)
from bltheme.themes.schema import RegistryLockEntry


class _FakeGit:
    def __init__(self, *, repo: bool = True, remote: str | None = "https://github.com/octocat/neon-nights.git"):
        self.repo = repo
        self.remote = remote

    def is_repo(self, path: Path) -> bool:
        return self.repo

    def remote_url(self, path: Path, name: str = "origin") -> str | None:
        return self.remote


class _FakeRegistry:
    def __init__(self, registered: set[str], locks: dict[str, RegistryLockEntry] | None = None):
        self.registered = registered
        self.locks = locks or {}

    def is_registered(self, repo: str) -> bool:
        return repo in self.registered

    def find_lock_entry(self, repo: str) -> RegistryLockEntry | None:
        return self.locks.get(repo)


def _theme(tmp_path: Path, version: str = "1.2.0") -> Path:
    theme = tmp_path / "theme"
    theme.mkdir()
    (theme / "metadata.json").write_text(
        json.dumps({"id": "neon-nights", "title": "Neon Nights", "version": version}),
        encoding="utf-8",
    )
    return theme


def _lock(version: str) -> RegistryLockEntry:
    return RegistryLockEntry(
        repo="octocat/neon-nights",
        version=version,
        locked="2024-05-01T12:00:00Z",
        commit="0123456789abcdef",
    )


@pytest.mark.parametrize(
    ("local", "remote", "expected"),
    [
        ("1.2.0", "1.1.9", VersionComparison.GREATER),
        ("1.1.9", "1.2.0", VersionComparison.NOT_GREATER),
        ("1.2.0", "1.2.0", VersionComparison.EQUAL),
        ("2.0.0", "1.9.9", VersionComparison.GREATER),
        ("1.0.10", "1.0.9", VersionComparison.GREATER),
        ("1.0.0-beta", "1.0.0", VersionComparison.NOT_GREATER),
        ("1.x.0", "1.0.0", VersionComparison.NOT_GREATER),
    ],
)
def test_compare_versions(local: str, remote: str, expected: VersionComparison) -> None:
    assert compare_versions(local, remote) is expected


@pytest.mark.parametrize(
    "remote",
    [
        "https://github.com/octocat/neon-nights.git",
        "https://github.com/octocat/neon-nights",
        "git@github.com:octocat/neon-nights.git",
        "ssh://git@github.com/octocat/neon-nights.git",
    ],
)
def test_parse_remote_repo(remote: str) -> None:
    assert parse_remote_repo(remote) == "octocat/neon-nights"


def test_parse_remote_repo_rejects_other_hosts() -> None:
    assert parse_remote_repo("https://gitlab.com/octocat/neon-nights.git") is None


def test_not_registered(tmp_path: Path) -> None:
    publisher = ThemePublisher(_FakeGit(), _FakeRegistry(set()))
    report = publisher.check(_theme(tmp_path))
    assert report.status is PublishStatus.NOT_REGISTERED
    assert report.repo == "octocat/neon-nights"
    assert report.registered is False


def test_registered_without_lock_entry(tmp_path: Path) -> None:
    publisher = ThemePublisher(_FakeGit(), _FakeRegistry({"octocat/neon-nights"}))
    report = publisher.check(_theme(tmp_path))
    assert report.status is PublishStatus.NO_LOCK_ENTRY
    assert report.lock_entry is None


@pytest.mark.parametrize(
    ("local", "locked", "expected"),
    [
        ("1.2.0", "1.1.9", PublishStatus.READY),
        ("1.2.0", "1.2.0", PublishStatus.UP_TO_DATE),
        ("1.1.9", "1.2.0", PublishStatus.NOT_GREATER),
    ],
)
def test_status_against_lockfile(tmp_path: Path, local: str, locked: str, expected: PublishStatus) -> None:
    registry = _FakeRegistry({"octocat/neon-nights"}, {"octocat/neon-nights": _lock(locked)})
    report = ThemePublisher(_FakeGit(), registry).check(_theme(tmp_path, local))
    assert report.status is expected
    assert report.lock_entry is not None
    assert report.lock_entry.short_commit == "0123456"


def test_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(ThemeNotFoundError):
        ThemePublisher(_FakeGit(), _FakeRegistry(set())).check(tmp_path / "missing")


def test_missing_metadata(tmp_path: Path) -> None:
    with pytest.raises(MetadataError) as exc_info:
        ThemePublisher(_FakeGit(), _FakeRegistry(set())).check(tmp_path)
    assert str(exc_info.value) == "metadata.json not found."
    assert exc_info.value.hints == ["Run validation first: create-bl-theme validate"]


def test_invalid_metadata(tmp_path: Path) -> None:
    (tmp_path / "metadata.json").write_text("{oops", encoding="utf-8")
    with pytest.raises(MetadataError, match="Invalid metadata.json - "):
        ThemePublisher(_FakeGit(), _FakeRegistry(set())).check(tmp_path)


def test_not_a_git_repository(tmp_path: Path) -> None:
    with pytest.raises(GitRepositoryError) as exc_info:
        ThemePublisher(_FakeGit(repo=False), _FakeRegistry(set())).check(_theme(tmp_path))
    assert "git init" in exc_info.value.hints


def test_missing_remote(tmp_path: Path) -> None:
    with pytest.raises(GitRemoteError, match="No git remote found"):
        ThemePublisher(_FakeGit(remote=None), _FakeRegistry(set())).check(_theme(tmp_path))


def test_unparsable_remote(tmp_path: Path) -> None:
    with pytest.raises(GitRemoteError, match="Could not parse GitHub repo"):
        ThemePublisher(_FakeGit(remote="https://example.com/x.git"), _FakeRegistry(set())).check(_theme(tmp_path))
