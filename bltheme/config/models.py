"""Configuration models for create-bl-theme."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

REGISTRY_BASE_URL = "https://raw.githubusercontent.com/better-lyrics/themes/main"


class RegistryConfig(BaseModel):
    """Where the theme store index and lockfile are fetched from."""

    index_url: str = Field(default=f"{REGISTRY_BASE_URL}/index.json")
    lock_url: str = Field(default=f"{REGISTRY_BASE_URL}/index.lock.json")
    timeout_seconds: float | None = Field(default=None, gt=0)
    retry_attempts: int = Field(default=1, ge=1, le=10)
    retry_backoff_seconds: float = Field(default=0.1, ge=0.0)


class ImagesConfig(BaseModel):
    """Screenshot checks."""

    recommended_width: int = Field(default=1280, ge=1)
    recommended_height: int = Field(default=720, ge=1)
    extensions: list[str] = Field(default_factory=lambda: ["png", "jpg", "jpeg", "gif", "webp"])

    @property
    def recommended_aspect_ratio(self) -> str:
        return f"{self.recommended_width / self.recommended_height:.2f}"


class ScaffoldConfig(BaseModel):
    """Values written into freshly scaffolded themes."""

    min_extension_version: str = Field(default="2.0.5.6")
    initial_version: str = Field(default="1.0.0")
    default_directory: str = Field(default="my-bl-theme")
    default_description: str = Field(default="A custom theme for Better Lyrics")
    preview_image: str = Field(default="preview.png")
    templates_dir: str = Field(default="", description="Override for the bundled templates directory.")


class GitHubConfig(BaseModel):
    """Git and GitHub access used by validate and publish."""

    git_executable: str = Field(default="git")
    clone_prefix: str = Field(default="bl-theme-")
    store_repo_url: str = Field(default="https://github.com/better-lyrics/themes")
    app_install_url: str = Field(default="https://github.com/marketplace/better-lyrics-themes")


class ThemeToolConfig(BaseSettings):
    """Root configuration model for create-bl-theme."""

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    images: ImagesConfig = Field(default_factory=ImagesConfig)
    scaffold: ScaffoldConfig = Field(default_factory=ScaffoldConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)

    model_config = SettingsConfigDict(
        env_prefix="BLTHEME_",
        env_nested_delimiter="__",
        extra="ignore",
    )
