"""Answers collected by the create flow."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class StyleFormat(str, Enum):
    """Stylesheet flavour written into a new theme."""

    RICS = "rics"
    CSS = "css"

    @property
    def filename(self) -> str:
        return f"style.{self.value}"


@dataclass
class ThemeAnswers:
    """Everything needed to scaffold one theme directory."""

    directory: str
    id: str
    title: str
    creator: str
    description: str = ""
    use_description_file: bool = False
    tags: list[str] = field(default_factory=list)
    has_shaders: bool = False
    style_format: StyleFormat = StyleFormat.RICS


def default_theme_id(directory: str) -> str:
    """Suggest a theme id from a directory name."""
    return re.sub(r"\s+", "-", directory.lower())


def default_theme_title(directory: str) -> str:
    """Suggest a display title: `my-bl-theme` -> `My Bl Theme`."""
    return " ".join(word[:1].upper() + word[1:] for word in directory.split("-"))
