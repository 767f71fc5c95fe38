"""Unit tests for create-bl-theme publish."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from bltheme.cli import app

runner = CliRunner()


class _FakeGit:
    remote: str | None = "git@github.com:octocat/neon-nights.git"
    repo: bool = True

    def __init__(self, git_executable: str = "git") -> None:
        pass

    def is_repo(self, path: Path) -> bool:
        return self.repo

    def remote_url(self, path: Path, name: str = "origin") -> str | None:
        return self.remote


@pytest.fixture(autouse=True)
def _fake_git(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BLTHEME_CONFIG", raising=False)
    monkeypatch.setattr("bltheme.cli.theme_publish.GitInspector", _FakeGit)


def _setup(tmp_path: Path, *, version: str, registered: bool, locked: str | None) -> tuple[Path, Path]:
    theme = tmp_path / "theme"
    theme.mkdir()
    (theme / "metadata.json").write_text(
        json.dumps({"id": "neon-nights", "title": "Neon Nights", "version": version}),
        encoding="utf-8",
    )
    index = tmp_path / "index.json"
    index.write_text(json.dumps({"themes": [{"repo": "octocat/neon-nights"}] if registered else []}), encoding="utf-8")
    lock = tmp_path / "index.lock.json"
    lock_themes = []
    if locked is not None:
        lock_themes.append(
            {"repo": "octocat/neon-nights", "version": locked, "locked": "2024-05-01T12:00:00Z", "commit": "abcdef0123456"}
        )
    lock.write_text(json.dumps({"themes": lock_themes}), encoding="utf-8")
    config = tmp_path / "bltheme.yaml"
    config.write_text(f"registry:\n  index_url: '{index}'\n  lock_url: '{lock}'\n", encoding="utf-8")
    return theme, config


def test_unregistered_theme_prints_registration_steps(tmp_path: Path) -> None:
    theme, config = _setup(tmp_path, version="1.0.0", registered=False, locked=None)
    result = runner.invoke(app, ["publish", str(theme), "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert "Repo:    octocat/neon-nights" in result.output
    assert "Theme is not registered in the theme store." in result.output
    assert '2. Add { "repo": "octocat/neon-nights" } to index.json' in result.output


def test_ready_to_publish(tmp_path: Path) -> None:
    theme, config = _setup(tmp_path, version="1.2.0", registered=True, locked="1.1.9")
    result = runner.invoke(app, ["publish", str(theme), "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert "Theme is registered in the theme store." in result.output
    assert "Commit:         abcdef0" in result.output
    assert "Ready to publish: 1.1.9 -> 1.2.0" in result.output


def test_local_version_matches_registry(tmp_path: Path) -> None:
    theme, config = _setup(tmp_path, version="1.2.0", registered=True, locked="1.2.0")
    result = runner.invoke(app, ["publish", str(theme), "--config", str(config)])
    assert result.exit_code == 0
    assert "Your local version matches the registry." in result.output


def test_version_not_greater_is_informational(tmp_path: Path) -> None:
    theme, config = _setup(tmp_path, version="1.1.9", registered=True, locked="1.2.0")
    result = runner.invoke(app, ["publish", str(theme), "--config", str(config)])
    assert result.exit_code == 0
    assert "Version 1.1.9 is not greater than 1.2.0" in result.output


def test_registered_without_lock_entry(tmp_path: Path) -> None:
    theme, config = _setup(tmp_path, version="1.0.0", registered=True, locked=None)
    result = runner.invoke(app, ["publish", str(theme), "--config", str(config)])
    assert result.exit_code == 0
    assert "Auto-publishing Setup:" in result.output
    assert "Current Registry Status:" not in result.output


def test_missing_metadata_exits_1(tmp_path: Path) -> None:
    result = runner.invoke(app, ["publish", str(tmp_path)])
    assert result.exit_code == 1
    assert "metadata.json not found." in result.output
    assert "create-bl-theme validate" in result.output


def test_not_a_git_repo_exits_1(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    theme, config = _setup(tmp_path, version="1.0.0", registered=False, locked=None)
    monkeypatch.setattr(_FakeGit, "repo", False)
    result = runner.invoke(app, ["publish", str(theme), "--config", str(config)])
    assert result.exit_code == 1
    assert "Not a git repository" in result.output
    assert "git init" in result.output


def test_missing_remote_exits_1(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    theme, config = _setup(tmp_path, version="1.0.0", registered=False, locked=None)
    monkeypatch.setattr(_FakeGit, "remote", None)
    result = runner.invoke(app, ["publish", str(theme), "--config", str(config)])
    assert result.exit_code == 1
    assert "No git remote found" in result.output


def test_lockfile_values_are_printed_literally(tmp_path: Path) -> None:
    theme, config = _setup(tmp_path, version="1.2.0", registered=True, locked="1.1.0")
    (tmp_path / "index.lock.json").write_text(
        json.dumps(
            {"themes": [{"repo": "octocat/neon-nights", "version": "1.1.0", "locked": "[/x]", "commit": "[/bold]12345"}]}
        ),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["publish", str(theme), "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert "Locked At:      [/x]" in result.output
    assert "Commit:         [/bold]" in result.output
