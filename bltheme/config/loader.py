"""Locate and parse the optional bltheme.yaml settings file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from bltheme.errors import ThemeToolError


class ConfigLoadError(ThemeToolError, ValueError):
    """Raised when a settings file cannot be read or is not a YAML mapping."""


def _describe_yaml_error(target: Path, exc: yaml.YAMLError) -> str:
    mark = getattr(exc, "problem_mark", None)
    problem = getattr(exc, "problem", None) or "malformed YAML"
    if mark is None:
        return f"{target}: {problem}"
    return f"{target}:{mark.line + 1}:{mark.column + 1}: {problem}"


class YAMLConfigLoader:
    """Find bltheme.yaml (env, then --config, then cwd) and return its mapping."""

    DEFAULT_FILENAME = "bltheme.yaml"
    ENV_VAR = "BLTHEME_CONFIG"

    @classmethod
    def resolve_path(cls, cli_path: str | None = None) -> Path:
        """Return the settings path: $BLTHEME_CONFIG, else cli_path, else ./bltheme.yaml."""
        for candidate in (os.environ.get(cls.ENV_VAR, ""), cli_path or ""):
            if candidate.strip():
                return Path(candidate.strip()).expanduser()
        return Path.cwd() / cls.DEFAULT_FILENAME

    @classmethod
    def is_explicit(cls, cli_path: str | None = None) -> bool:
        """True when the user named a settings file instead of relying on ./bltheme.yaml."""
        return bool(os.environ.get(cls.ENV_VAR, "").strip() or (cli_path or "").strip())

    @classmethod
    def load_dict(cls, path: str | Path | None = None, *, required: bool = False) -> dict[str, Any]:
        """Parse the settings file into a dict.

        An absent or blank file yields {} unless required is set, in which case
        a missing file is a ConfigLoadError.
        """
        target = Path(path) if path is not None else cls.resolve_path()
        if not target.is_file():
            if required:
                raise ConfigLoadError(f"{target}: settings file not found")
            return {}
        try:
            text = target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigLoadError(f"{target}: cannot read settings file ({exc})") from exc
        if not text.strip():
            return {}
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(_describe_yaml_error(target, exc)) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"{target}: top level must be a mapping of sections")
        return data
