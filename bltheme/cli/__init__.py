"""CLI tools: create-bl-theme [name], validate, publish, help."""

import sys
from importlib import metadata

import typer

from bltheme.cli.output import console
from bltheme.cli.theme_create import create_command
from bltheme.cli.theme_publish import publish_command
from bltheme.cli.theme_validate import validate_command

PROG_NAME = "create-bl-theme"
COMMANDS = ("create", "validate", "publish", "help")

app = typer.Typer(
    name=PROG_NAME,
    help="Scaffold, validate, and publish Better Lyrics themes.",
    add_completion=False,
)

app.command("create")(create_command)
app.command("validate")(validate_command)
app.command("publish")(publish_command)


def show_help() -> None:
    """Print the usage overview."""
    console.print("[bold]Usage:[/bold]")
    console.print(f"  [cyan]{PROG_NAME}[/cyan] \\[name]              Create a new theme")
    console.print(f"  [cyan]{PROG_NAME}[/cyan] validate \\[dir|url]  Validate a theme (local or GitHub)")
    console.print(f"  [cyan]{PROG_NAME}[/cyan] publish \\[dir]       Check publishing status")
    console.print()
    console.print("[bold]Examples:[/bold]")
    console.print(f"  [dim]$[/dim] {PROG_NAME} my-awesome-theme")
    console.print(f"  [dim]$[/dim] {PROG_NAME} validate ./my-theme")
    console.print(f"  [dim]$[/dim] {PROG_NAME} validate --strict https://github.com/user/theme-repo")
    console.print(f"  [dim]$[/dim] {PROG_NAME} publish")
    console.print()
    console.print("[bold]Theme Structure:[/bold]")
    console.print("  my-theme/")
    console.print("  ├── metadata.json        [dim]# Required - Theme metadata[/dim]")
    console.print("  ├── style.rics           [dim]# Required - Styles (or style.css)[/dim]")
    console.print("  ├── shader.json          [dim]# Optional - If hasShaders: true[/dim]")
    console.print("  ├── DESCRIPTION.md       [dim]# Optional - Rich description[/dim]")
    console.print("  ├── cover.png            [dim]# Optional - Cover image[/dim]")
    console.print("  └── images/              [dim]# Required - Screenshots[/dim]")
    console.print("      └── preview.png")
    console.print()
    console.print("[bold]Documentation:[/bold]")
    console.print("  [cyan]https://github.com/better-lyrics/themes[/cyan]")
    console.print()


@app.command("help")
def help_command() -> None:
    """Show usage, examples, and the expected theme layout."""
    show_help()


def _print_banner() -> None:
    console.print()
    console.print("[bold cyan]  Better Lyrics Theme Creator[/bold cyan]")
    console.print("[dim]  Create themes for Better Lyrics extension[/dim]")
    console.print()


def _print_version_and_exit() -> None:
    """Print installed package version and exit."""
    try:
        version = metadata.version(PROG_NAME)
    except metadata.PackageNotFoundError:
        version = "unknown"
    print(f"{PROG_NAME} {version}")
    raise SystemExit(0)


def resolve_argv(argv: list[str]) -> list[str]:
    """Route bare `create-bl-theme [name] [options]` to the create command."""
    if not argv:
        return ["create"]
    if argv[0] in COMMANDS:
        return list(argv)
    return ["create", *argv]


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: dispatches to subcommands."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args[:1] in (["--version"], ["-V"]):
        _print_version_and_exit()
    _print_banner()
    if args[:1] in (["help"], ["--help"], ["-h"]):
        show_help()
        raise SystemExit(0)
    try:
        app(args=resolve_argv(args), prog_name=PROG_NAME)
    except typer.Exit as e:
        raise SystemExit(e.exit_code) from None
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
