"""Exceptions raised while rendering bundled theme templates."""

from bltheme.errors import ThemeToolError


class TemplateError(ThemeToolError):
    """Base exception for template errors."""


class TemplateNotFoundError(TemplateError):
    """Raised when a bundled template file is missing."""


class TemplateRenderError(TemplateError):
    """Raised when template rendering fails (e.g. Jinja2 error)."""
