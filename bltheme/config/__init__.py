"""Configuration for create-bl-theme: YAML file plus BLTHEME_* environment overrides."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from bltheme.config.loader import ConfigLoadError, YAMLConfigLoader
from bltheme.config.models import (
    GitHubConfig,
    ImagesConfig,
    RegistryConfig,
    ScaffoldConfig,
    ThemeToolConfig,
)

__all__ = [
    "ConfigLoadError",
    "GitHubConfig",
    "ImagesConfig",
    "RegistryConfig",
    "ScaffoldConfig",
    "ThemeToolConfig",
    "YAMLConfigLoader",
    "load_config",
]

_ENV_PREFIX = "BLTHEME_"


def _deep_merge(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(base)
    for key, value in updates.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _coerce_env_value(raw: str) -> Any:
    value = raw.strip()
    lowered = value.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "none"}:
        return None
    if value.startswith("[") or value.startswith("{"):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _collect_env_overrides(prefix: str = _ENV_PREFIX) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key, raw_value in os.environ.items():
        if not key.startswith(prefix) or key == YAMLConfigLoader.ENV_VAR:
            continue
        path = [p.strip().lower() for p in key[len(prefix) :].split("__") if p.strip()]
        if len(path) < 2:
            continue
        cursor = overrides
        for part in path[:-1]:
            existing = cursor.get(part)
            if not isinstance(existing, dict):
                existing = {}
                cursor[part] = existing
            cursor = existing
        cursor[path[-1]] = _coerce_env_value(raw_value)
    return overrides


def load_config(path: str | Path | None = None) -> ThemeToolConfig:
    """Load configuration: bundled defaults < YAML file < BLTHEME_* environment."""
    cli_path = str(path) if path is not None else None
    target = YAMLConfigLoader.resolve_path(cli_path)
    data = YAMLConfigLoader.load_dict(target, required=YAMLConfigLoader.is_explicit(cli_path))
    return ThemeToolConfig(**_deep_merge(data, _collect_env_overrides()))
