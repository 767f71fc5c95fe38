"""Core schema models for theme metadata, validation results, and registry entries."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

THEME_ID_RE = re.compile(r"^[a-z0-9-]+$")
SEMVER_RE = re.compile(r"^\d+\.\d+\.\d+(-[\w.]+)?(\+[\w.]+)?$")

REQUIRED_FIELDS: tuple[str, ...] = (
    "id",
    "title",
    "creators",
    "minVersion",
    "hasShaders",
    "version",
    "images",
)


class ThemeTag(str, Enum):
    """Discoverability tags accepted by the theme store."""

    DARK = "dark"
    LIGHT = "light"
    MINIMAL = "minimal"
    COLORFUL = "colorful"
    ANIMATED = "animated"
    GLASSMORPHISM = "glassmorphism"
    RETRO = "retro"
    NEON = "neon"


@dataclass(frozen=True)
class ThemeMetadata:
    """Typed view of one theme's metadata.json."""

    id: str
    title: str
    creators: list[str]
    min_version: str
    has_shaders: bool
    version: str
    images: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    description: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the metadata.json key layout."""
        payload: dict[str, Any] = {"id": self.id, "title": self.title}
        if self.description is not None:
            payload["description"] = self.description
        payload.update(
            {
                "creators": list(self.creators),
                "minVersion": self.min_version,
                "hasShaders": self.has_shaders,
                "version": self.version,
                "tags": list(self.tags),
                "images": list(self.images),
            }
        )
        return payload

    @classmethod
    def from_payload(cls, payload: Any) -> ThemeMetadata:
        """Build metadata from a parsed metadata.json document."""
        if not isinstance(payload, dict):
            raise ValueError("metadata.json root must be an object")
        description = payload.get("description")
        return cls(
            id=str(payload.get("id", "")),
            title=str(payload.get("title", "")),
            creators=_as_str_list(payload.get("creators")),
            min_version=str(payload.get("minVersion", "")),
            has_shaders=payload.get("hasShaders") is True,
            version=str(payload.get("version", "")),
            images=_as_str_list(payload.get("images")),
            tags=_as_str_list(payload.get("tags")),
            description=description if isinstance(description, str) else None,
        )


@dataclass
class ValidationResult:
    """Errors and warnings accumulated during one validation pass."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def extend(self, other: ValidationResult) -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


@dataclass(frozen=True)
class RegistryEntry:
    """One registered theme in the registry index."""

    repo: str

    @classmethod
    def from_payload(cls, payload: Any) -> RegistryEntry | None:
        if not isinstance(payload, dict) or not isinstance(payload.get("repo"), str):
            return None
        return cls(repo=payload["repo"])


@dataclass(frozen=True)
class RegistryLockEntry:
    """Published version of one theme recorded in the registry lockfile."""

    repo: str
    version: str
    locked: str = ""
    commit: str = ""

    @property
    def short_commit(self) -> str:
        return self.commit[:7]

    @classmethod
    def from_payload(cls, payload: Any) -> RegistryLockEntry | None:
        if not isinstance(payload, dict) or not isinstance(payload.get("repo"), str):
            return None
        return cls(
            repo=payload["repo"],
            version=str(payload.get("version", "")),
            locked=str(payload.get("locked", "")),
            commit=str(payload.get("commit", "")),
        )


def is_valid_theme_id(value: Any) -> bool:
    """Return True when value is a lowercase slug."""
    return isinstance(value, str) and THEME_ID_RE.fullmatch(value) is not None


def is_valid_version(value: Any) -> bool:
    """Return True when value is MAJOR.MINOR.PATCH with optional pre-release/build."""
    return isinstance(value, str) and SEMVER_RE.fullmatch(value) is not None


def _as_str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]
