"""Tests for resolving validate targets (local paths and GitHub URLs)."""

from __future__ import annotations

from pathlib import Path

import pytest

from bltheme.config import ThemeToolConfig
from bltheme.errors import CloneError, GitCommandError
from bltheme.themes.source import GitHubRepo, parse_github_url, resolve_theme_source


class _FakeCloneGit:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.clones: list[tuple[str, Path, int]] = []

    def clone(self, url: str, dest: Path, *, depth: int = 1) -> None:
        self.clones.append((url, dest, depth))
        if self.fail:
            raise GitCommandError("repository not found")
        (dest / "metadata.json").write_text("{}", encoding="utf-8")


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/octocat/neon-nights",
        "https://github.com/octocat/neon-nights/",
        "https://github.com/octocat/neon-nights.git",
        "http://www.github.com/octocat/neon-nights",
        "github.com/octocat/neon-nights",
    ],
)
def test_parse_github_url(url: str) -> None:
    assert parse_github_url(url) == GitHubRepo(owner="octocat", repo="neon-nights")


@pytest.mark.parametrize(
    "target",
    [".", "./my-theme", "https://gitlab.com/octocat/neon-nights", "https://github.com/octocat", "https://github.com/a/b/tree/main"],
)
def test_non_github_targets_are_not_parsed(target: str) -> None:
    assert parse_github_url(target) is None


def test_clone_url_has_single_git_suffix() -> None:
    repo = parse_github_url("https://github.com/octocat/neon-nights.git")
    assert repo is not None
    assert repo.clone_url == "https://github.com/octocat/neon-nights.git"
    assert repo.slug == "octocat/neon-nights"


def test_local_target_resolves_against_cwd(tmp_path: Path) -> None:
    with resolve_theme_source("my-theme", ThemeToolConfig(), cwd=tmp_path) as resolved:
        assert resolved == (tmp_path / "my-theme").resolve()


def test_clone_uses_fresh_temp_dirs_and_removes_them() -> None:
    git = _FakeCloneGit()
    seen: list[Path] = []
    for _ in range(2):
        with resolve_theme_source("https://github.com/octocat/neon-nights", ThemeToolConfig(), git=git) as path:  # type: ignore[arg-type]
            assert (path / "metadata.json").is_file()
            assert path.name.startswith("bl-theme-")
            seen.append(path)
    assert seen[0] != seen[1]
    assert not any(path.exists() for path in seen)
    assert all(depth == 1 for _, _, depth in git.clones)


def test_temp_dir_removed_when_body_raises() -> None:
    git = _FakeCloneGit()
    with pytest.raises(RuntimeError):
        with resolve_theme_source("https://github.com/octocat/neon-nights", ThemeToolConfig(), git=git) as path:  # type: ignore[arg-type]
            raise RuntimeError("validation blew up")
    assert not path.exists()


def test_clone_failure_raises_clone_error_and_cleans_up() -> None:
    git = _FakeCloneGit(fail=True)
    with pytest.raises(CloneError) as exc_info:
        with resolve_theme_source("https://github.com/octocat/missing", ThemeToolConfig(), git=git):  # type: ignore[arg-type]
            pass
    assert str(exc_info.value) == 'Could not clone repository "octocat/missing"'
    assert exc_info.value.detail == "repository not found"
    _, dest, _ = git.clones[0]
    assert not dest.exists()
