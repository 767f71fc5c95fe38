"""create-bl-theme [name]: interactively scaffold a new theme directory."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional

import typer
from rich.markup import escape

from bltheme.cli.output import console, echo, echo_error, load_config_or_exit
from bltheme.config import ThemeToolConfig
from bltheme.errors import ThemeExistsError, ThemeToolError
from bltheme.scaffold import (
    StyleFormat,
    ThemeAnswers,
    ThemeScaffolder,
    default_theme_id,
    default_theme_title,
)
from bltheme.themes.schema import ThemeTag, is_valid_theme_id

TAG_CHOICES: list[str] = [tag.value for tag in ThemeTag]


def _require_non_empty(label: str) -> Any:
    def _check(value: str) -> str:
        text = str(value).strip()
        if not text:
            raise typer.BadParameter(f"{label} is required")
        return text

    return _check


def _check_theme_id(value: str) -> str:
    text = str(value).strip()
    if not is_valid_theme_id(text):
        raise typer.BadParameter("Only lowercase letters, numbers, and hyphens allowed")
    return text


def parse_tags(value: str) -> list[str]:
    """Parse `dark, 3, neon` (names or 1-based numbers) into tag values."""
    selected: list[str] = []
    for token in re.split(r"[,\s]+", str(value).strip()):
        if not token:
            continue
        if token.isdecimal() and 1 <= int(token) <= len(TAG_CHOICES):
            tag = TAG_CHOICES[int(token) - 1]
        elif token.lower() in TAG_CHOICES:
            tag = token.lower()
        else:
            raise typer.BadParameter(f"Unknown tag '{token}'. Choose from: {', '.join(TAG_CHOICES)}")
        if tag not in selected:
            selected.append(tag)
    return selected


def _prompt_tags() -> list[str]:
    typer.echo("Available tags:")
    for index, tag in enumerate(TAG_CHOICES, 1):
        typer.echo(f"  {index}. {tag}")
    result: list[str] = typer.prompt(
        "Select tags (comma-separated names or numbers, blank for none)",
        default="",
        show_default=False,
        value_proc=parse_tags,
    )
    return result


def _fail_if_exists(directory: str) -> None:
    if (Path.cwd() / directory).exists():
        echo_error(f'Directory "{directory}" already exists.')
        raise typer.Exit(1)


def collect_answers(
    cfg: ThemeToolConfig,
    *,
    name: Optional[str],
    theme_id: Optional[str],
    title: Optional[str],
    description: Optional[str],
    description_file: Optional[bool],
    creator: Optional[str],
    tags: Optional[str],
    shaders: Optional[bool],
    style_format: StyleFormat,
) -> ThemeAnswers:
    """Ask for every answer not already given on the command line."""
    directory = name.strip() if name and name.strip() else ""
    if not directory:
        directory = typer.prompt(
            "Theme directory name",
            default=cfg.scaffold.default_directory,
            value_proc=_require_non_empty("Directory name"),
        )
    _fail_if_exists(directory)

    if theme_id is None:
        theme_id = typer.prompt(
            "Theme ID (lowercase, hyphens allowed)",
            default=default_theme_id(directory),
            value_proc=_check_theme_id,
        )
    if title is None:
        title = typer.prompt("Theme title", default=default_theme_title(directory), value_proc=_require_non_empty("Title"))
    if description is None:
        description = typer.prompt("Description", default=cfg.scaffold.default_description)
    if description_file is None:
        description_file = typer.confirm(
            "Use DESCRIPTION.md for richer formatting? (recommended for longer descriptions)",
            default=False,
        )
    if creator is None:
        creator = typer.prompt("Your GitHub username", value_proc=_require_non_empty("GitHub username"))
    tag_list = parse_tags(tags) if tags is not None else _prompt_tags()
    if shaders is None:
        shaders = typer.confirm("Will this theme include shaders?", default=False)

    return ThemeAnswers(
        directory=directory,
        id=theme_id,
        title=title,
        description=description,
        use_description_file=bool(description_file),
        creator=creator,
        tags=tag_list,
        has_shaders=bool(shaders),
        style_format=style_format,
    )


def _print_next_steps(answers: ThemeAnswers, cfg: ThemeToolConfig) -> None:
    style_name = answers.style_format.filename
    console.print()
    console.print("[green]  Theme scaffolded successfully![/green]")
    console.print()
    console.print("[bold]  Next steps:[/bold]")
    steps = [
        f"cd {escape(answers.directory)}",
        f"Edit [cyan]{style_name}[/cyan] with your theme styles",
        f"Replace the placeholder [cyan]images/{cfg.scaffold.preview_image}[/cyan] with a real screenshot",
    ]
    if answers.use_description_file:
        steps.append("Edit [cyan]DESCRIPTION.md[/cyan] with your theme description")
    if answers.has_shaders:
        steps.append("Configure [cyan]shader.json[/cyan] for shader effects")
    steps.append("Push to GitHub and submit to the theme store")
    for index, step in enumerate(steps, 1):
        console.print(f"  [dim]{index}.[/dim] {step}")
    console.print()
    console.print("[bold]  Resources:[/bold]")
    console.print("  [cyan]RICS[/cyan] is a lightweight CSS preprocessor with full CSS parity.")
    console.print("  It adds variables, nesting, and mixins - but plain CSS works too!")
    console.print()
    console.print("  [dim]Playground:[/dim]     https://rics.boidu.dev")
    console.print("  [dim]RICS Docs:[/dim]      https://github.com/better-lyrics/rics")
    console.print("  [dim]Styling Guide:[/dim]  https://github.com/better-lyrics/better-lyrics/blob/master/STYLING.md")
    console.print(f"  [dim]Submit Theme:[/dim]   {cfg.github.store_repo_url}")
    console.print()
    console.print(f"[dim]  Validate your theme with:[/dim] [cyan]create-bl-theme validate {escape(answers.directory)}[/cyan]")
    console.print()


def create_command(
    name: Optional[str] = typer.Argument(None, help="Theme directory name (prompted when omitted)."),
    theme_id: Optional[str] = typer.Option(None, "--id", help="Theme ID (lowercase letters, numbers, hyphens)."),
    title: Optional[str] = typer.Option(None, "--title", help="Theme title."),
    description: Optional[str] = typer.Option(None, "--description", help="Short description."),
    description_file: Optional[bool] = typer.Option(
        None,
        "--description-file/--no-description-file",
        help="Write DESCRIPTION.md instead of a description field in metadata.json.",
    ),
    creator: Optional[str] = typer.Option(None, "--creator", help="Your GitHub username."),
    tags: Optional[str] = typer.Option(None, "--tags", help=f"Comma-separated tags: {', '.join(TAG_CHOICES)}."),
    shaders: Optional[bool] = typer.Option(None, "--shaders/--no-shaders", help="Include shader.json."),
    style_format: StyleFormat = typer.Option(StyleFormat.RICS, "--style-format", help="Stylesheet flavour."),
    config: str = typer.Option("", "--config", help="Optional config file path."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress."),
) -> None:
    """Create a new theme from the bundled template."""
    cfg = load_config_or_exit(config)
    if theme_id is not None and not is_valid_theme_id(theme_id):
        echo_error("--id must contain only lowercase letters, numbers, and hyphens.")
        raise typer.Exit(2)
    if tags is not None:
        try:
            parse_tags(tags)
        except typer.BadParameter as exc:
            echo_error(exc.message)
            raise typer.Exit(2) from exc
    if name and name.strip():
        _fail_if_exists(name.strip())

    try:
        answers = collect_answers(
            cfg,
            name=name,
            theme_id=theme_id,
            title=title,
            description=description,
            description_file=description_file,
            creator=creator,
            tags=tags,
            shaders=shaders,
            style_format=style_format,
        )
    except typer.Abort:
        echo("\nCancelled.", color="red", err=True)
        raise typer.Exit(1) from None

    target = Path.cwd() / answers.directory
    console.print()
    console.print(f"[dim]Creating theme in {escape(str(target))}...[/dim]")
    scaffolder = ThemeScaffolder(cfg)
    try:
        created = scaffolder.create(answers, Path.cwd())
    except ThemeExistsError as exc:
        echo_error(str(exc))
        raise typer.Exit(1) from exc
    except ThemeToolError as exc:
        echo_error(str(exc), exc.hints)
        raise typer.Exit(1) from exc
    if verbose:
        for path in sorted(created.rglob("*")):
            if path.is_file():
                echo(f"  wrote {path.relative_to(created)}", color="blue")
    _print_next_steps(answers, cfg)
