"""Shared console helpers for CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console

from bltheme.config import ConfigLoadError, ThemeToolConfig, load_config

console = Console(soft_wrap=True, highlight=False)


def echo(
    message: str,
    *,
    quiet: bool = False,
    color: str | None = None,
    bold: bool = False,
    dim: bool = False,
    err: bool = False,
) -> None:
    if quiet is True and not err:
        return
    typer.secho(message, fg=color, bold=bold, dim=dim, err=err)


def echo_error(message: str, hints: list[str] | None = None) -> None:
    echo(f"Error: {message}", color="red", err=True)
    for hint in hints or []:
        echo(f"  {hint}", dim=True, err=True)


def load_config_or_exit(config_path: str) -> ThemeToolConfig:
    """Load configuration, turning config errors into exit code 2."""
    try:
        return load_config(config_path or None)
    except (ConfigLoadError, ValueError) as exc:
        echo_error(f"invalid configuration ({exc})")
        raise typer.Exit(2) from exc
