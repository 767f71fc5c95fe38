"""Template renderer: Jinja2 for generated files, verbatim copies for the rest."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound

from bltheme.scaffold.exceptions import TemplateNotFoundError, TemplateRenderError

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Render `.j2` templates and read static templates from one directory."""

    def __init__(self, templates_dir: Path) -> None:
        self.templates_dir = Path(templates_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False,
        )

    def render(self, name: str, params: dict[str, Any]) -> str:
        """Render `<name>.j2` with params."""
        template_name = f"{name}.j2"
        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateNotFoundError(f"Template not found: {self.templates_dir / template_name}") from e
        try:
            return template.render(**params)
        except TemplateError as e:
            logger.warning("Render failed for %s: %s", template_name, e)
            raise TemplateRenderError(f"Failed to render {template_name}: {e}") from e

    def read_static(self, name: str) -> str:
        """Return a template file's contents unchanged."""
        path = self.templates_dir / name
        if not path.is_file():
            raise TemplateNotFoundError(f"Template not found: {path}")
        return path.read_text(encoding="utf-8")
