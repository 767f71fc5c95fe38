"""Narrow wrapper around the git executable."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from bltheme.errors import GitCommandError

logger = logging.getLogger(__name__)


class GitInspector:
    """Answer the few questions validate/publish need from git."""

    def __init__(self, git_executable: str = "git") -> None:
        self.git_executable = git_executable

    def is_repo(self, path: Path) -> bool:
        """Return True when path is inside a git working tree."""
        try:
            result = self._run(["rev-parse", "--git-dir"], cwd=path)
        except OSError:
            return False
        return result.returncode == 0

    def remote_url(self, path: Path, name: str = "origin") -> str | None:
        """Return the URL of the named remote, or None when it is not configured."""
        try:
            result = self._run(["remote", "get-url", name], cwd=path)
        except OSError:
            return None
        if result.returncode != 0:
            return None
        url = result.stdout.strip()
        return url or None

    def clone(self, url: str, dest: Path, *, depth: int = 1) -> None:
        """Shallow-clone url into dest (which may be an existing empty directory)."""
        args = ["clone", "--depth", str(depth), url, str(dest)]
        try:
            result = self._run(args)
        except OSError as exc:
            raise GitCommandError(f"git executable not available: {exc}") from exc
        if result.returncode != 0:
            detail = (result.stderr or result.stdout).strip()
            raise GitCommandError(detail or f"git clone exited with status {result.returncode}")

    def _run(self, args: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
        logger.debug("git %s (cwd=%s)", " ".join(args), cwd)
        return subprocess.run(
            [self.git_executable, *args],
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            check=False,
        )
