"""Theme scaffolding: answers, templates, and the directory writer."""

from bltheme.scaffold.exceptions import TemplateError, TemplateNotFoundError, TemplateRenderError
from bltheme.scaffold.models import StyleFormat, ThemeAnswers, default_theme_id, default_theme_title
from bltheme.scaffold.renderer import TemplateRenderer
from bltheme.scaffold.scaffolder import ThemeScaffolder, get_default_templates_dir

__all__ = [
    "StyleFormat",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateRenderError",
    "TemplateRenderer",
    "ThemeAnswers",
    "ThemeScaffolder",
    "default_theme_id",
    "default_theme_title",
    "get_default_templates_dir",
]
