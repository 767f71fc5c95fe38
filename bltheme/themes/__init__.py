"""Theme packages: schema, validation, registry access, and publish checks."""

from bltheme.themes.client import RegistryClient
from bltheme.themes.git import GitInspector
from bltheme.themes.images import ImageInspector
from bltheme.themes.publisher import (
    PublishReport,
    PublishStatus,
    ThemePublisher,
    VersionComparison,
    compare_versions,
    parse_remote_repo,
)
from bltheme.themes.source import GitHubRepo, parse_github_url, resolve_theme_source
from bltheme.themes.styles import CompileResult, StyleCompiler, StyleDiagnostic, lint_css
from bltheme.themes.validator import ThemeValidator

__all__ = [
    "CompileResult",
    "GitHubRepo",
    "GitInspector",
    "ImageInspector",
    "PublishReport",
    "PublishStatus",
    "RegistryClient",
    "StyleCompiler",
    "StyleDiagnostic",
    "ThemePublisher",
    "ThemeValidator",
    "VersionComparison",
    "compare_versions",
    "lint_css",
    "parse_github_url",
    "parse_remote_repo",
    "resolve_theme_source",
]
