"""create-bl-theme: scaffold and validate Better Lyrics themes."""

from bltheme.errors import ThemeToolError

__version__ = "1.3.0"

__all__ = ["ThemeToolError", "__version__"]
