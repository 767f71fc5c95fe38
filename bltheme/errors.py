"""Exception hierarchy shared by the scaffold, validate, and publish flows."""

from __future__ import annotations


class ThemeToolError(Exception):
    """Base exception for create-bl-theme errors."""

    def __init__(self, message: str, hints: list[str] | None = None) -> None:
        super().__init__(message)
        self.hints = hints or []


class ThemeExistsError(ThemeToolError):
    """Raised when the scaffold target directory already exists."""


class ScaffoldError(ThemeToolError):
    """Raised when writing a new theme fails partway through."""


class ThemeNotFoundError(ThemeToolError):
    """Raised when the theme directory to validate or publish does not exist."""


class CloneError(ThemeToolError):
    """Raised when a GitHub theme repository cannot be cloned."""

    def __init__(self, owner: str, repo: str, detail: str = "") -> None:
        super().__init__(
            f'Could not clone repository "{owner}/{repo}"',
            hints=["Make sure the repository exists and is publicly accessible."],
        )
        self.owner = owner
        self.repo = repo
        self.detail = detail


class RegistryError(ThemeToolError):
    """Raised when the theme registry index or lockfile cannot be read."""


class PublishError(ThemeToolError):
    """Base error for fatal publish-readiness failures."""


class MetadataError(PublishError):
    """Raised when metadata.json is missing or unparsable during publish."""


class GitRepositoryError(PublishError):
    """Raised when the theme directory is not a git working tree."""


class GitRemoteError(PublishError):
    """Raised when the origin remote is missing or is not a GitHub URL."""


class GitCommandError(ThemeToolError):
    """Raised when a git subprocess exits non-zero or cannot be started."""
