"""Write a new theme directory from the bundled templates."""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path

from PIL import Image

from bltheme.config import ThemeToolConfig
from bltheme.errors import ScaffoldError, ThemeExistsError
from bltheme.scaffold.models import ThemeAnswers
from bltheme.scaffold.renderer import TemplateRenderer
from bltheme.themes.schema import ThemeMetadata

logger = logging.getLogger(__name__)

PLACEHOLDER_COLOR = (24, 24, 32)


def get_default_templates_dir() -> Path:
    """Return the path to the bundled templates directory."""
    return Path(__file__).parent / "templates"


class ThemeScaffolder:
    """Create theme directories; never touches an existing directory."""

    def __init__(self, config: ThemeToolConfig) -> None:
        self.config = config
        templates_dir = config.scaffold.templates_dir.strip()
        self.renderer = TemplateRenderer(Path(templates_dir) if templates_dir else get_default_templates_dir())

    def build_metadata(self, answers: ThemeAnswers) -> ThemeMetadata:
        scaffold = self.config.scaffold
        return ThemeMetadata(
            id=answers.id,
            title=answers.title,
            creators=[answers.creator],
            min_version=scaffold.min_extension_version,
            has_shaders=answers.has_shaders,
            version=scaffold.initial_version,
            images=[scaffold.preview_image],
            tags=list(answers.tags),
            description=None if answers.use_description_file else answers.description,
        )

    def create(self, answers: ThemeAnswers, base_dir: Path | None = None) -> Path:
        """Scaffold `answers.directory` under base_dir and return its path.

        On any failure after the directory was created, the directory is removed
        again so no half-written theme is left behind.
        """
        target = (base_dir or Path.cwd()).resolve() / answers.directory
        if target.exists():
            raise ThemeExistsError(f'Directory "{answers.directory}" already exists.')

        target.mkdir(parents=True)
        try:
            self._write_files(target, answers)
        except Exception as exc:
            shutil.rmtree(target, ignore_errors=True)
            logger.warning("Scaffold of %s rolled back: %s", target, exc)
            raise ScaffoldError(f"Failed to create theme in {target}: {exc}") from exc

        logger.info(
            "%s",
            json.dumps(
                {
                    "event": "theme_scaffold",
                    "path": str(target),
                    "id": answers.id,
                    "shaders": answers.has_shaders,
                    "description_file": answers.use_description_file,
                    "style": answers.style_format.value,
                },
                ensure_ascii=False,
                sort_keys=True,
            ),
        )
        return target

    def _write_files(self, target: Path, answers: ThemeAnswers) -> None:
        scaffold = self.config.scaffold
        images_cfg = self.config.images
        images_dir = target / "images"
        images_dir.mkdir()

        metadata = self.build_metadata(answers)
        (target / "metadata.json").write_text(json.dumps(metadata.to_payload(), indent=2), encoding="utf-8")

        if answers.use_description_file:
            description_md = self.renderer.render("DESCRIPTION.md", {"min_version": scaffold.min_extension_version})
            (target / "DESCRIPTION.md").write_text(description_md, encoding="utf-8")

        style_name = answers.style_format.filename
        (target / style_name).write_text(self.renderer.read_static(style_name), encoding="utf-8")

        if answers.has_shaders:
            (target / "shader.json").write_text(self.renderer.read_static("shader.json"), encoding="utf-8")

        readme = self.renderer.render(
            "README.md",
            {
                "title": answers.title,
                "description": answers.description,
                "creator": answers.creator,
                "directory": answers.directory,
                "preview_image": scaffold.preview_image,
            },
        )
        (target / "README.md").write_text(readme, encoding="utf-8")

        gitkeep = self.renderer.render(
            "gitkeep",
            {
                "width": images_cfg.recommended_width,
                "height": images_cfg.recommended_height,
                "preview_image": scaffold.preview_image,
            },
        )
        (images_dir / ".gitkeep").write_text(gitkeep, encoding="utf-8")

        placeholder = Image.new(
            "RGB",
            (images_cfg.recommended_width, images_cfg.recommended_height),
            PLACEHOLDER_COLOR,
        )
        placeholder.save(images_dir / scaffold.preview_image)
