"""create-bl-theme publish: report whether a theme is ready for the store."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from bltheme.cli.output import console, echo, echo_error, load_config_or_exit
from bltheme.config import ThemeToolConfig
from bltheme.errors import ThemeToolError
from bltheme.themes.client import RegistryClient
from bltheme.themes.git import GitInspector
from bltheme.themes.publisher import PublishReport, PublishStatus, ThemePublisher


def _print_theme_info(report: PublishReport) -> None:
    console.print("[bold]Theme Info:[/bold]")
    console.print(f"  ID:      {escape(report.metadata.id)}")
    console.print(f"  Title:   {escape(report.metadata.title)}")
    console.print(f"  Version: {escape(report.metadata.version)}")
    console.print(f"  Repo:    {escape(report.repo)}")
    console.print()


def _print_registration_steps(report: PublishReport, cfg: ThemeToolConfig) -> None:
    console.print("[yellow]Theme is not registered in the theme store.[/yellow]")
    console.print()
    console.print("[bold]To register your theme:[/bold]")
    console.print(f"  1. Fork {cfg.github.store_repo_url}")
    console.print(f'  2. Add {{ "repo": "{report.repo}" }} to index.json', markup=False)
    console.print("  3. Open a pull request")
    console.print()
    console.print("After your PR is merged, install the GitHub App for auto-updates:")
    console.print(f"[cyan]  {cfg.github.app_install_url}[/cyan]")


def _print_auto_publishing(cfg: ThemeToolConfig) -> None:
    console.print("[green]Theme is registered in the theme store.[/green]")
    console.print()
    console.print("[bold]Auto-publishing Setup:[/bold]")
    console.print()
    console.print("To enable automatic updates when you push:")
    console.print("  1. Install the GitHub App on your repo:")
    console.print(f"[cyan]     {cfg.github.app_install_url}[/cyan]")
    console.print()
    console.print("  2. Push changes to your repo:")
    console.print("[dim]     git add .[/dim]")
    console.print('[dim]     git commit -m "feat: update theme"[/dim]')
    console.print("[dim]     git push[/dim]")
    console.print()
    console.print("The registry will automatically:")
    console.print("  - Validate your theme")
    console.print("  - Update the lockfile")
    console.print("  - Vendor your theme files")
    console.print("  - Show a commit status on your push")
    console.print()


def _print_lock_status(report: PublishReport) -> None:
    lock = report.lock_entry
    if lock is None:
        return
    console.print("[bold]Current Registry Status:[/bold]")
    console.print(f"  Locked Version: {escape(lock.version)}")
    console.print(f"  Locked At:      {escape(lock.locked)}")
    console.print(f"  Commit:         {escape(lock.short_commit)}")
    console.print()
    if report.status is PublishStatus.UP_TO_DATE:
        console.print("[yellow]Your local version matches the registry.[/yellow]")
        console.print("Bump the version in metadata.json to publish an update.")
    elif report.status is PublishStatus.READY:
        console.print(f"[green]Ready to publish: {escape(lock.version)} -> {escape(report.metadata.version)}[/green]")
        console.print("Push to your repo to trigger an update.")
    else:
        console.print(f"[red]Version {escape(report.metadata.version)} is not greater than {escape(lock.version)}[/red]")
        console.print("Versions must increase. Update metadata.json with a higher version.")


def publish_command(
    path: str = typer.Argument(".", help="Theme directory (must be a git checkout with a GitHub remote)."),
    config: str = typer.Option("", "--config", help="Optional config file path."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress."),
) -> None:
    """Check whether a theme is registered and ready to publish."""
    cfg = load_config_or_exit(config)
    echo("Checking theme for publishing...", dim=True)
    echo("")

    publisher = ThemePublisher(GitInspector(cfg.github.git_executable), RegistryClient(cfg.registry))
    try:
        report = publisher.check((Path.cwd() / path).resolve())
    except ThemeToolError as exc:
        echo_error(str(exc), exc.hints)
        raise typer.Exit(1) from exc

    _print_theme_info(report)
    if report.status is PublishStatus.NOT_REGISTERED:
        _print_registration_steps(report, cfg)
        return

    _print_auto_publishing(cfg)
    _print_lock_status(report)
    if verbose:
        echo(f"Status: {report.status.value}", color="blue")
    console.print()
