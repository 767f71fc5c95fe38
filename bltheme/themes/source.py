"""Resolve a validate target to a local directory, cloning GitHub URLs on demand."""

from __future__ import annotations

import logging
import re
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from bltheme.config import ThemeToolConfig
from bltheme.errors import CloneError, GitCommandError
from bltheme.themes.git import GitInspector

logger = logging.getLogger(__name__)

GITHUB_URL_RE = re.compile(r"^(?:https?://)?(?:www\.)?github\.com/([^/]+)/([^/]+?)/?$")


@dataclass(frozen=True)
class GitHubRepo:
    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def clone_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}.git"


def parse_github_url(text: str) -> GitHubRepo | None:
    """Return owner/repo when text is a GitHub repository URL."""
    match = GITHUB_URL_RE.match(text.strip())
    if match is None:
        return None
    owner, repo = match.group(1), match.group(2)
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not repo:
        return None
    return GitHubRepo(owner=owner, repo=repo)


@contextmanager
def resolve_theme_source(
    target: str,
    config: ThemeToolConfig,
    git: GitInspector | None = None,
    cwd: Path | None = None,
) -> Iterator[Path]:
    """Yield the theme directory for target.

    GitHub URLs are shallow-cloned into a fresh temporary directory that is
    removed when the context exits, whatever the outcome.
    """
    github = parse_github_url(target)
    if github is None:
        yield ((cwd or Path.cwd()) / target).resolve()
        return

    inspector = git or GitInspector(config.github.git_executable)
    temp_dir = Path(tempfile.mkdtemp(prefix=config.github.clone_prefix))
    try:
        logger.info("Cloning %s into %s", github.slug, temp_dir)
        try:
            inspector.clone(github.clone_url, temp_dir, depth=1)
        except GitCommandError as exc:
            raise CloneError(github.owner, github.repo, detail=str(exc)) from exc
        yield temp_dir
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)
