"""create-bl-theme validate: check a local or GitHub-hosted theme."""

from __future__ import annotations

import typer

from bltheme.cli.output import echo, echo_error, load_config_or_exit
from bltheme.errors import CloneError, ThemeNotFoundError
from bltheme.themes.git import GitInspector
from bltheme.themes.schema import ValidationResult
from bltheme.themes.source import parse_github_url, resolve_theme_source
from bltheme.themes.validator import ASPECT_RATIO_PREFIX, ThemeValidator


def print_report(result: ValidationResult, *, recommended: str = "16:9") -> None:
    if not result.errors and not result.warnings:
        echo("  All checks passed!", color="green")
        echo("")
        return
    if result.errors:
        echo("  Errors:", color="red", bold=True)
        for error in result.errors:
            echo(f"    - {error}", color="red")
    if result.warnings:
        echo("")
        echo("  Warnings:", color="yellow", bold=True)
        for warning in result.warnings:
            echo(f"    - {warning}", color="yellow")
        if any(ASPECT_RATIO_PREFIX in warning for warning in result.warnings):
            echo("")
            echo(f"  Non-standard aspect ratios are just a suggestion (recommended: {recommended}), your images will still work.", color="yellow", dim=True)
            echo("  Different aspect ratios can be intentional for your theme's design.", color="yellow", dim=True)
    echo("")


def validate_command(
    target: str = typer.Argument(".", help="Theme directory or GitHub repository URL."),
    strict: bool = typer.Option(
        False,
        "--strict",
        "-s",
        help="Treat warnings as failures (exit 1 if any warnings).",
    ),
    config: str = typer.Option("", "--config", help="Optional config file path."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress."),
) -> None:
    """Validate a theme directory (local path or GitHub URL)."""
    cfg = load_config_or_exit(config)
    github = parse_github_url(target)
    if github is not None:
        echo(f"Cloning {github.slug} from GitHub...", dim=True)

    git = GitInspector(cfg.github.git_executable)
    try:
        with resolve_theme_source(target, cfg, git=git) as theme_path:
            if github is not None:
                echo("  Cloned successfully!", color="green")
            echo(f"Validating theme at {theme_path}...", dim=True)
            echo("")
            validator = ThemeValidator(cfg)
            result = validator.validate(theme_path)
            if verbose:
                echo(f"  {len(result.errors)} error(s), {len(result.warnings)} warning(s)", color="blue")
    except CloneError as exc:
        echo_error(str(exc), exc.hints)
        if exc.detail:
            echo(f"  {exc.detail}", dim=True, err=True)
        raise typer.Exit(1) from exc
    except ThemeNotFoundError as exc:
        echo_error(f'Directory "{target}" does not exist.')
        raise typer.Exit(1) from exc

    print_report(result)
    if result.errors or (strict and result.warnings):
        raise typer.Exit(1)
