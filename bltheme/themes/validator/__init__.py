"""Theme directory validator."""

from bltheme.themes.validator.validator import ASPECT_RATIO_PREFIX, ThemeValidator

__all__ = ["ASPECT_RATIO_PREFIX", "ThemeValidator"]
