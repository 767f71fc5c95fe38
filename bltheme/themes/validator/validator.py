"""Validation checklist for a theme directory."""

from __future__ import annotations

import json
import logging
import re
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any

from PIL import UnidentifiedImageError

from bltheme.config import ThemeToolConfig
from bltheme.errors import ThemeNotFoundError
from bltheme.themes.images import ImageInspector
from bltheme.themes.schema import REQUIRED_FIELDS, ValidationResult, is_valid_theme_id, is_valid_version
from bltheme.themes.styles import StyleCompiler, lint_css

logger = logging.getLogger(__name__)

_STRING_FIELDS = ("id", "title", "minVersion", "version")

ASPECT_RATIO_PREFIX = "aspect ratio"

_RATIO_STEP = Decimal("0.01")


def format_aspect_ratio(width: int, height: int) -> str:
    """Two decimals, ties rounded away from zero (9:8 is "1.13")."""
    return str(Decimal(width / height).quantize(_RATIO_STEP, rounding=ROUND_HALF_UP))


def _read_stylesheet(path: Path, result: ValidationResult) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        result.add_error(f"{path.name}: not valid UTF-8 - {exc}")
        return None


class ThemeValidator:
    """Run every theme check against one directory and collect errors/warnings."""

    def __init__(
        self,
        config: ThemeToolConfig,
        style_compiler: StyleCompiler | None = None,
        image_inspector: ImageInspector | None = None,
    ) -> None:
        self.config = config
        self.style_compiler = style_compiler or StyleCompiler()
        self.image_inspector = image_inspector or ImageInspector()
        extensions = "|".join(re.escape(ext) for ext in config.images.extensions)
        self._image_re = re.compile(rf"\.({extensions})$", re.IGNORECASE)

    def validate(self, theme_path: Path) -> ValidationResult:
        """Validate theme_path; raises ThemeNotFoundError when it is not a directory."""
        if not theme_path.is_dir():
            raise ThemeNotFoundError(f'Directory "{theme_path}" does not exist.')

        result = ValidationResult()
        metadata = self.check_metadata(theme_path, result)
        if metadata is not None:
            self.check_description(theme_path, metadata, result)
        self.check_style(theme_path, result)
        self.check_images(theme_path, result)
        if metadata is not None:
            self.check_image_references(theme_path, metadata, result)
            self.check_shaders(theme_path, metadata, result)
            self.check_cover(theme_path, metadata, result)

        logger.info(
            "%s",
            json.dumps(
                {
                    "event": "theme_validate",
                    "path": str(theme_path),
                    "errors": len(result.errors),
                    "warnings": len(result.warnings),
                },
                ensure_ascii=False,
                sort_keys=True,
            ),
        )
        return result

    def check_metadata(self, theme_path: Path, result: ValidationResult) -> dict[str, Any] | None:
        """Check metadata.json; return the parsed object, or None when unusable."""
        metadata_path = theme_path / "metadata.json"
        if not metadata_path.is_file():
            result.add_error("metadata.json is missing")
            return None
        try:
            payload = json.loads(metadata_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            result.add_error(f"metadata.json: invalid JSON - {exc}")
            return None
        if not isinstance(payload, dict):
            result.add_error("metadata.json: root must be a JSON object")
            return None

        for field_name in REQUIRED_FIELDS:
            if field_name not in payload:
                result.add_error(f'metadata.json: missing required field "{field_name}"')

        for field_name in _STRING_FIELDS:
            if field_name in payload and not isinstance(payload[field_name], str):
                result.add_error(f"metadata.json: {field_name} must be a string")
        if "hasShaders" in payload and not isinstance(payload["hasShaders"], bool):
            result.add_error("metadata.json: hasShaders must be a boolean")

        version = payload.get("version")
        if isinstance(version, str) and version and not is_valid_version(version):
            result.add_error(
                f'metadata.json: invalid version format "{version}". Must be semver (e.g., 1.0.0, 1.0.0-beta.1)'
            )

        theme_id = payload.get("id")
        if isinstance(theme_id, str) and theme_id and not is_valid_theme_id(theme_id):
            result.add_error("metadata.json: id must be lowercase letters, numbers, and hyphens only")

        for list_field in ("creators", "images"):
            if list_field in payload and not isinstance(payload[list_field], list):
                result.add_error(f"metadata.json: {list_field} must be an array")

        if not payload.get("tags"):
            result.add_warning("metadata.json: consider adding tags for discoverability")
        return payload

    def check_description(self, theme_path: Path, metadata: dict[str, Any], result: ValidationResult) -> None:
        description_path = theme_path / "DESCRIPTION.md"
        has_description_md = description_path.is_file()
        if not metadata.get("description") and not has_description_md:
            result.add_error(
                'Missing description: add "description" field in metadata.json or create DESCRIPTION.md'
            )
        if has_description_md and not description_path.read_text(encoding="utf-8", errors="replace").strip():
            result.add_error("DESCRIPTION.md exists but is empty")

    def check_style(self, theme_path: Path, result: ValidationResult) -> None:
        """style.rics wins over style.css when both exist."""
        rics_path = theme_path / "style.rics"
        css_path = theme_path / "style.css"
        if rics_path.is_file():
            self._check_rics(rics_path, result)
        elif css_path.is_file():
            source = _read_stylesheet(css_path, result)
            if source is None:
                return
            if not source.strip():
                result.add_warning("style.css is empty")
                return
            for diagnostic in lint_css(source):
                result.add_warning(f"style.css: {diagnostic.format()}")
        else:
            result.add_error("Missing required file: style.rics or style.css")

    def _check_rics(self, rics_path: Path, result: ValidationResult) -> None:
        source = _read_stylesheet(rics_path, result)
        if source is None:
            return
        if not source.strip():
            result.add_warning("style.rics is empty")
            return
        try:
            compiled = self.style_compiler.compile_with_details(source)
        except Exception as exc:
            logger.debug("RICS compiler raised for %s", rics_path, exc_info=True)
            result.add_error(f"style.rics: Failed to compile - {exc}")
            return
        for diagnostic in compiled.errors:
            result.add_error(f"style.rics: {diagnostic.format()}")
        for diagnostic in compiled.warnings:
            result.add_warning(f"style.rics: {diagnostic.format()}")

    def list_images(self, images_dir: Path) -> list[Path]:
        return sorted(
            path for path in images_dir.iterdir() if path.is_file() and self._image_re.search(path.name)
        )

    def check_images(self, theme_path: Path, result: ValidationResult) -> None:
        images_dir = theme_path / "images"
        if not images_dir.is_dir():
            result.add_error("images/ directory is missing")
            return
        images = self.list_images(images_dir)
        if not images:
            result.add_error("images/ directory must contain at least one image")
            return
        for image_path in images:
            self._check_image(image_path, result)

    def _check_image(self, image_path: Path, result: ValidationResult) -> None:
        name = image_path.name
        try:
            width, height = self.image_inspector.read_dimensions(image_path)
        except UnidentifiedImageError:
            result.add_error(
                f"{name}: This image appears to be corrupted or in an unsupported format "
                "(please ensure the file is a valid PNG, JPG, GIF, or WebP image)"
            )
            return
        except FileNotFoundError:
            result.add_error(f"{name}: File not found")
            return
        except OSError as exc:
            result.add_error(f"{name}: Could not validate image - {exc} (the file may be corrupted or inaccessible)")
            return

        if width <= 0 or height <= 0:
            result.add_error(
                f"{name}: Unable to read image dimensions - the file may be corrupted or in an unsupported format"
            )
            return

        aspect_ratio = format_aspect_ratio(width, height)
        if aspect_ratio != self.config.images.recommended_aspect_ratio:
            result.add_warning(f"{name}: {width}x{height} ({ASPECT_RATIO_PREFIX} {aspect_ratio})")

    def check_image_references(self, theme_path: Path, metadata: dict[str, Any], result: ValidationResult) -> None:
        images = metadata.get("images")
        if not isinstance(images, list):
            return
        images_dir = theme_path / "images"
        for image in images:
            if not (images_dir / str(image)).exists():
                result.add_error(f'metadata.json: image "{image}" not found in images/ directory')

    def check_shaders(self, theme_path: Path, metadata: dict[str, Any], result: ValidationResult) -> None:
        if metadata.get("hasShaders") is True and not (theme_path / "shader.json").is_file():
            result.add_error("shader.json is missing but hasShaders is true")

    def check_cover(self, theme_path: Path, metadata: dict[str, Any], result: ValidationResult) -> None:
        images = metadata.get("images")
        has_images = isinstance(images, list) and len(images) > 0
        if not (theme_path / "cover.png").is_file() and not has_images:
            result.add_warning("No cover image found. Add cover.png or images to the images/ folder.")
