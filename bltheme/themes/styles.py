"""Stylesheet checks: RICS compilation via libsass, CSS diagnostics via tinycss2."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

import sass
import tinycss2

_LOCATION_RE = re.compile(r"on line (\d+)(?::(\d+))?")
_PREPROCESSOR_RE = re.compile(r"\$[A-Za-z_-]|@(?:mixin|include|extend|function|use|forward|each|for|if|else|while)\b|#\{")


@dataclass(frozen=True)
class StyleDiagnostic:
    """One compiler or parser message, optionally located."""

    message: str
    line: int | None = None
    column: int | None = None

    def format(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


@dataclass
class CompileResult:
    """Output of compile_with_details."""

    css: str = ""
    errors: list[StyleDiagnostic] = field(default_factory=list)
    warnings: list[StyleDiagnostic] = field(default_factory=list)


class StyleCompiler:
    """Compile preprocessor sources and collect diagnostics instead of raising."""

    def compile_with_details(self, source: str) -> CompileResult:
        try:
            css = sass.compile(string=source, output_style="expanded")
        except sass.CompileError as exc:
            diagnostic = _diagnostic_from_compile_error(exc)
            if is_plain_css(source):
                # valid CSS the Sass engine cannot evaluate, e.g. min(100px, 50vw)
                return CompileResult(css=source, warnings=[diagnostic])
            return CompileResult(errors=[diagnostic])
        return CompileResult(css=css, warnings=lint_css(css))


def is_plain_css(source: str) -> bool:
    """True when source uses no preprocessor syntax and parses as CSS without errors."""
    return _PREPROCESSOR_RE.search(source) is None and not lint_css(source)


def lint_css(source: str) -> list[StyleDiagnostic]:
    """Return tinycss2 parse errors for plain CSS, including nested blocks."""
    nodes = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
    return list(_collect_parse_errors(nodes))


def _collect_parse_errors(nodes: Iterable[Any]) -> Iterator[StyleDiagnostic]:
    for node in nodes:
        if node.type == "error":
            yield StyleDiagnostic(message=node.message, line=node.source_line, column=node.source_column)
        elif node.type in {"qualified-rule", "at-rule"} and node.content is not None:
            children = tinycss2.parse_blocks_contents(node.content, skip_comments=True, skip_whitespace=True)
            yield from _collect_parse_errors(children)


def _diagnostic_from_compile_error(exc: sass.CompileError) -> StyleDiagnostic:
    raw = exc.args[0] if exc.args else str(exc)
    text = raw.decode("utf-8", "replace") if isinstance(raw, bytes) else str(raw)
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    message = lines[0] if lines else "compilation failed"
    if message.startswith("Error: "):
        message = message[len("Error: ") :]
    match = _LOCATION_RE.search(text)
    if match is None:
        return StyleDiagnostic(message=message)
    column = int(match.group(2)) if match.group(2) else None
    return StyleDiagnostic(message=message, line=int(match.group(1)), column=column)
